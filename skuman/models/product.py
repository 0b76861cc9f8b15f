"""
Product and ProductVariant models.

Product = an artwork sold as one product type (base SKU 11K001-PST).
ProductVariant = one sellable SKU of that product (11K001-PST-03-07-99).
"""

import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from skuman.codes import get_sku_dimensionality, is_valid_sku, parse_sku


class Product(models.Model):
    """Artwork × product type."""

    artwork = models.ForeignKey(
        "skuman.Artwork",
        on_delete=models.PROTECT,
        related_name="products",
        verbose_name=_("Artwork"),
    )
    product_type = models.ForeignKey(
        "skuman.ProductType",
        on_delete=models.PROTECT,
        related_name="products",
        verbose_name=_("Product type"),
    )
    product_name = models.CharField(
        max_length=255,
        verbose_name=_("Name"),
    )
    base_sku = models.CharField(
        unique=True,
        max_length=10,
        verbose_name=_("Base SKU"),
        help_text=_("{ASC}-{TYPE}, e.g. 11K001-PST"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )
    launch_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_("Launch date"),
    )
    discontinue_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_("Discontinue date"),
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name=_("Created by"),
    )
    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Metadata"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "skuman_product"
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering = ["base_sku"]
        unique_together = [["artwork", "product_type"]]

    def __str__(self) -> str:
        return f"{self.base_sku} - {self.product_name}"

    def clean(self):
        super().clean()
        if self.artwork_id is None or self.product_type_id is None:
            return
        expected = f"{self.artwork.asc_code}-{self.product_type.type_code}"
        if self.base_sku != expected:
            raise ValidationError(
                _("Base SKU %(base)s does not match artwork and product type (%(expected)s).")
                % {"base": self.base_sku, "expected": expected}
            )

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)


class ProductVariant(models.Model):
    """
    A sellable SKU.

    full_sku is persisted as issued; later hierarchy changes never touch it.
    """

    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="variants",
        verbose_name=_("Product"),
    )
    full_sku = models.CharField(
        unique=True,
        max_length=20,
        verbose_name=_("SKU"),
    )
    variant_code = models.CharField(
        max_length=8,
        verbose_name=_("Variant code"),
        help_text=_("VAR1-VAR2-VAR3, e.g. 03-07-99"),
    )
    variant_name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name=_("Variant name"),
    )

    # Pricing
    retail_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name=_("Retail price"),
    )
    wholesale_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name=_("Wholesale price"),
    )
    cost_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name=_("Cost price"),
    )

    inventory_qty = models.IntegerField(
        default=0,
        verbose_name=_("Inventory"),
    )
    barcode = models.CharField(
        max_length=50,
        blank=True,
        verbose_name=_("Barcode"),
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
        db_table = "skuman_product_variant"
        verbose_name = _("Product Variant")
        verbose_name_plural = _("Product Variants")
        ordering = ["full_sku"]

    def __str__(self) -> str:
        return self.full_sku

    def clean(self):
        super().clean()
        parsed = parse_sku(self.full_sku)
        if parsed is None or not is_valid_sku(self.full_sku):
            raise ValidationError({
                "full_sku": _("SKU must match {ASC}-{TYPE}-{VAR1}-{VAR2}-{VAR3}.")
            })
        if self.product_id and f"{parsed.asc_code}-{parsed.type_code}" != self.product.base_sku:
            raise ValidationError({
                "full_sku": _("SKU does not belong to product %(base)s.")
                % {"base": self.product.base_sku}
            })
        if self.variant_code != parsed.variant_code:
            raise ValidationError({
                "variant_code": _("Must equal the variant part of the SKU.")
            })

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def parsed(self):
        return parse_sku(self.full_sku)

    @property
    def dimensionality(self) -> str:
        return get_sku_dimensionality(self.full_sku)
