"""
Product type and variant hierarchy models.

ProductType = a kind of product (PST poster, UTS tote...), 3-letter code.
VariantGroup = a product dimension (Size, Color, Finish).
ProductTypeVariantGroup = which groups a type uses, and in which SKU slot.
VariantCode = one 2-digit value of a group (00-98).

Slot order: sort_order 0 → VAR1, 1 → VAR2, 2 → VAR3.
"""

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from skuman.codes import get_variant_code_error, is_valid_variant_code

MAX_VARIANT_GROUPS = 3

type_code_validator = RegexValidator(
    regex=r"^[A-Z]{3}\Z",
    message=_("Type code must be exactly 3 uppercase letters"),
    code="invalid_type_code",
)


class ProductType(models.Model):
    """
    Kind of product sold from an artwork.

    type_code is the second SKU segment (e.g. PST in 11K001-PST-99-99-99).
    """

    type_code = models.CharField(
        unique=True,
        max_length=3,
        validators=[type_code_validator],
        verbose_name=_("Type code"),
        help_text=_("3 uppercase letters, e.g. PST"),
    )
    type_name = models.CharField(
        max_length=100,
        verbose_name=_("Name"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    sort_order = models.PositiveSmallIntegerField(
        default=0,
        verbose_name=_("Order"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "skuman_product_type"
        verbose_name = _("Product Type")
        verbose_name_plural = _("Product Types")
        ordering = ["sort_order", "type_code"]

    def __str__(self) -> str:
        return f"{self.type_code} - {self.type_name}"

    def clean(self):
        super().clean()
        if not self._state.adding:
            stored = (
                ProductType.objects.filter(pk=self.pk)
                .values_list("type_code", flat=True)
                .first()
            )
            if stored is not None and stored != self.type_code:
                raise ValidationError({
                    "type_code": _("Type code cannot be changed once created.")
                })

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def active_assignments(self):
        """Active variant group assignments in slot order."""
        return (
            self.variant_group_assignments.filter(variant_group__is_active=True)
            .select_related("variant_group")
            .order_by("sort_order", "id")
        )


class VariantGroup(models.Model):
    """A product dimension whose codes fill one SKU variant slot."""

    group_name = models.CharField(
        unique=True,
        max_length=100,
        verbose_name=_("Name"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "skuman_variant_group"
        verbose_name = _("Variant Group")
        verbose_name_plural = _("Variant Groups")
        ordering = ["group_name"]

    def __str__(self) -> str:
        return self.group_name


class ProductTypeVariantGroup(models.Model):
    """
    Assignment of a variant group to a product type.

    Reordering changes only which slot future SKUs use; SKUs already
    issued are never rewritten.
    """

    product_type = models.ForeignKey(
        ProductType,
        on_delete=models.CASCADE,
        related_name="variant_group_assignments",
        verbose_name=_("Product type"),
    )
    variant_group = models.ForeignKey(
        VariantGroup,
        on_delete=models.CASCADE,
        related_name="product_type_assignments",
        verbose_name=_("Variant group"),
    )
    sort_order = models.PositiveSmallIntegerField(
        default=0,
        validators=[MaxValueValidator(MAX_VARIANT_GROUPS - 1)],
        verbose_name=_("Slot order"),
        help_text=_("0 = VAR1, 1 = VAR2, 2 = VAR3"),
    )
    is_required = models.BooleanField(
        default=False,
        verbose_name=_("Required"),
    )
    allow_multiple = models.BooleanField(
        default=False,
        verbose_name=_("Allow multiple"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "skuman_product_type_variant_group"
        verbose_name = _("Product Type Variant Group")
        verbose_name_plural = _("Product Type Variant Groups")
        ordering = ["product_type", "sort_order", "id"]
        unique_together = [["product_type", "variant_group"]]

    def __str__(self) -> str:
        return f"{self.product_type.type_code} VAR{self.sort_order + 1}: {self.variant_group}"

    def clean(self):
        super().clean()
        if self.product_type_id is None:
            return
        siblings = ProductTypeVariantGroup.objects.filter(product_type_id=self.product_type_id)
        if self.pk:
            siblings = siblings.exclude(pk=self.pk)
        if siblings.count() >= MAX_VARIANT_GROUPS:
            raise ValidationError(
                _("A product type can have at most %(max)d variant groups.")
                % {"max": MAX_VARIANT_GROUPS}
            )

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)


class VariantCode(models.Model):
    """A 2-digit value of a variant group (00-98, 99 is reserved for N/A)."""

    variant_group = models.ForeignKey(
        VariantGroup,
        on_delete=models.CASCADE,
        related_name="codes",
        verbose_name=_("Variant group"),
    )
    code = models.CharField(
        max_length=2,
        verbose_name=_("Code"),
        help_text=_("00-98"),
    )
    display_value = models.CharField(
        max_length=100,
        verbose_name=_("Display value"),
        help_text=_("e.g. 18x24, Black, Matte"),
    )
    display_order = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        verbose_name=_("Display order"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )
    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Metadata"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "skuman_variant_code"
        verbose_name = _("Variant Code")
        verbose_name_plural = _("Variant Codes")
        ordering = ["variant_group", "display_order", "code"]
        unique_together = [["variant_group", "code"]]

    def __str__(self) -> str:
        return f"{self.code} - {self.display_value}"

    def clean(self):
        super().clean()
        if not is_valid_variant_code(self.code):
            raise ValidationError({"code": get_variant_code_error(self.code)})

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)
