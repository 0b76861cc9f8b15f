"""
Code sequence for atomic ASC code allocation.

One counter row per ASC prefix epoch; the counter is the only thing
that keeps two concurrent artwork creations from sharing a code.
"""

from django.db import models, transaction
from django.utils.translation import gettext_lazy as _


class CodeSequence(models.Model):
    """
    Atomic counter for generating sequential codes.

    One row per (prefix), e.g. "11K" → last_value = 42.
    Thread-safe via SELECT FOR UPDATE.

    Usage (internal to SequenceAscAllocator):
        seq_val = CodeSequence.next_value("11K")
        # Returns 1, 2, 3... atomically
    """

    prefix = models.CharField(
        max_length=50,
        unique=True,
        verbose_name=_("Prefix"),
    )
    last_value = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Last value"),
    )

    class Meta:
        db_table = "skuman_code_sequence"
        verbose_name = _("Code Sequence")
        verbose_name_plural = _("Code Sequences")

    def __str__(self) -> str:
        return f"{self.prefix} → {self.last_value}"

    @classmethod
    def next_value(cls, prefix: str) -> int:
        """
        Atomically increment and return the next value for a prefix.

        Thread-safe: uses SELECT FOR UPDATE to prevent race conditions.
        """
        with transaction.atomic():
            seq, created = cls.objects.select_for_update().get_or_create(
                prefix=prefix, defaults={"last_value": 0}
            )
            seq.last_value += 1
            seq.save(update_fields=["last_value"])
            return seq.last_value

    @classmethod
    def current_value(cls, prefix: str) -> int:
        """Last value handed out for a prefix (0 if none yet)."""
        return (
            cls.objects.filter(prefix=prefix)
            .values_list("last_value", flat=True)
            .first()
            or 0
        )
