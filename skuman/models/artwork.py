"""
Artwork and AscHistory models.

Artwork = one piece of art, identified by its ASC code (e.g. 11K001).
AscHistory = append-only audit trail of ASC code assignments.

The ASC code is allocated once, at creation, by skuman.service and never
changes afterwards.
"""

import logging
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords
from taggit.managers import TaggableManager

from skuman.codes import asc_sequence_number, is_valid_asc_code

logger = logging.getLogger(__name__)


class ArtworkStatus(models.TextChoices):
    """Artwork lifecycle status."""

    DRAFT = "draft", _("Draft")
    ACTIVE = "active", _("Active")
    ARCHIVED = "archived", _("Archived")
    DISCONTINUED = "discontinued", _("Discontinued")


class Artwork(models.Model):
    """
    Artwork with its ASC code.

    asc_code and sequence_number are written once by the allocation flow
    (Catalog.create_artwork) and rejected on any later change.
    """

    # UUID for external references
    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    # Identification
    asc_code = models.CharField(
        unique=True,
        max_length=6,
        editable=False,
        verbose_name=_("ASC code"),
        help_text=_("Allocated at creation, e.g. 11K001"),
    )
    sequence_number = models.PositiveIntegerField(
        editable=False,
        verbose_name=_("Sequence number"),
        help_text=_("Last 3 digits of the ASC code"),
    )

    title = models.CharField(
        max_length=255,
        verbose_name=_("Title"),
    )
    artist_name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name=_("Artist"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    art_medium = models.CharField(
        max_length=100,
        blank=True,
        verbose_name=_("Medium"),
    )
    year_created = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        verbose_name=_("Year"),
    )
    original_dimensions = models.CharField(
        max_length=100,
        blank=True,
        verbose_name=_("Original dimensions"),
    )

    status = models.CharField(
        max_length=20,
        choices=ArtworkStatus.choices,
        default=ArtworkStatus.DRAFT,
        db_index=True,
        verbose_name=_("Status"),
    )

    # Ownership
    partner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="artworks",
        verbose_name=_("Partner"),
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name=_("Created by"),
    )

    # Rights
    is_exclusive = models.BooleanField(
        default=False,
        verbose_name=_("Exclusive"),
    )
    rights_start_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_("Rights start"),
    )
    rights_end_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_("Rights end"),
    )

    tags = TaggableManager(blank=True)

    # Flexibility
    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Metadata"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "skuman_artwork"
        verbose_name = _("Artwork")
        verbose_name_plural = _("Artworks")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["partner", "status"], name="skuman_art_partner_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.asc_code} - {self.title}"

    def clean(self):
        super().clean()
        if not is_valid_asc_code(self.asc_code):
            raise ValidationError({
                "asc_code": _("Must be 2 digits, 1 uppercase letter, 3 digits (e.g. 11K001).")
            })
        if self.sequence_number != asc_sequence_number(self.asc_code):
            raise ValidationError({
                "sequence_number": _("Must match the last 3 digits of the ASC code.")
            })
        if (
            self.rights_start_date
            and self.rights_end_date
            and self.rights_end_date < self.rights_start_date
        ):
            raise ValidationError({
                "rights_end_date": _("Must not be before the rights start date.")
            })
        if not self._state.adding:
            stored = (
                Artwork.objects.filter(pk=self.pk)
                .values_list("asc_code", flat=True)
                .first()
            )
            if stored is not None and stored != self.asc_code:
                raise ValidationError({
                    "asc_code": _("ASC code cannot be changed once assigned.")
                })

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def archive(self, user=None):
        """Move the artwork to ARCHIVED. Its ASC code stays reserved."""
        self.status = ArtworkStatus.ARCHIVED
        self.save(update_fields=["status", "updated_at"])

        logger.info(
            f"Artwork {self.asc_code} archived",
            extra={
                "artwork": self.pk,
                "asc_code": self.asc_code,
                "user": user.get_username() if user else None,
            },
        )


class AscHistoryStatus(models.TextChoices):
    ASSIGNED = "assigned", _("Assigned")
    VOIDED = "voided", _("Voided")
    TRANSFERRED = "transferred", _("Transferred")


class AscHistory(models.Model):
    """
    Audit record of an ASC code assignment.

    Append-only: the only allowed change is void().
    """

    VOID_FIELDS = frozenset({"status", "void_reason", "voided_at", "voided_by"})

    asc_code = models.CharField(
        max_length=6,
        db_index=True,
        verbose_name=_("ASC code"),
    )
    artwork = models.ForeignKey(
        Artwork,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="asc_history",
        verbose_name=_("Artwork"),
    )
    status = models.CharField(
        max_length=20,
        choices=AscHistoryStatus.choices,
        default=AscHistoryStatus.ASSIGNED,
        verbose_name=_("Status"),
    )
    assigned_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name=_("Assigned by"),
    )
    assigned_at = models.DateTimeField(
        default=timezone.now,
        verbose_name=_("Assigned at"),
    )
    notes = models.TextField(
        blank=True,
        verbose_name=_("Notes"),
    )

    void_reason = models.TextField(
        blank=True,
        verbose_name=_("Void reason"),
    )
    voided_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name=_("Voided at"),
    )
    voided_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name=_("Voided by"),
    )

    class Meta:
        db_table = "skuman_asc_history"
        verbose_name = _("ASC History")
        verbose_name_plural = _("ASC History")
        ordering = ["-assigned_at"]

    def __str__(self) -> str:
        return f"{self.asc_code} ({self.status})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            update_fields = kwargs.get("update_fields")
            if update_fields is None or not set(update_fields) <= self.VOID_FIELDS:
                raise ValidationError(_("ASC history records are append-only."))
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(_("ASC history records are append-only."))

    def void(self, reason: str, user=None):
        """Mark the assignment as voided. The code itself is never reissued."""
        from skuman.exceptions import SkumanError

        if self.status == AscHistoryStatus.VOIDED:
            raise SkumanError("ALREADY_VOIDED", asc_code=self.asc_code)

        self.status = AscHistoryStatus.VOIDED
        self.void_reason = reason
        self.voided_at = timezone.now()
        self.voided_by = user
        self.save(update_fields=["status", "void_reason", "voided_at", "voided_by"])

        logger.info(
            f"ASC {self.asc_code} voided: {reason}",
            extra={
                "asc_code": self.asc_code,
                "reason": reason,
                "user": user.get_username() if user else None,
            },
        )
