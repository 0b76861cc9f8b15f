"""
Variant service -- products, SKU construction and SKU checks.

build_sku is the unchecked formatter; every SKU is checked with
is_valid_sku and is_valid_variant_code before it is persisted.
"""

import logging
from collections.abc import Mapping

from skuman.codes import (
    build_sku,
    get_sku_dimensionality,
    get_variant_code_error,
    is_na_code,
    is_valid_sku,
    is_valid_variant_code,
    parse_sku,
)
from skuman.context import CatalogContext
from skuman.exceptions import SkumanError
from skuman.models import Artwork, Product, ProductType, ProductVariant, VariantCode
from skuman.results import SkuCheck
from skuman.services.hierarchy import get_variant_slots, resolve_variant_codes

logger = logging.getLogger(__name__)


def check_sku(sku: str) -> SkuCheck:
    """
    Check a SKU string segment by segment.

    Grammar failures are reported, not raised. Variant segments must be
    00-98 or the "99" N/A marker.
    """
    parsed = parse_sku(sku)
    if parsed is None or not is_valid_sku(sku):
        return SkuCheck(
            sku=sku,
            valid=False,
            errors=["SKU must match {ASC}-{TYPE}-{VAR1}-{VAR2}-{VAR3}"],
        )

    errors = [
        f"VAR{slot}: {get_variant_code_error(code)}"
        for slot, code in enumerate(parsed.variants, start=1)
        if not is_na_code(code) and not is_valid_variant_code(code)
    ]
    return SkuCheck(
        sku=sku,
        valid=not errors,
        parsed=parsed,
        dimensionality=get_sku_dimensionality(sku),
        errors=errors,
    )


class CatalogVariants:
    """Product and SKU operations."""

    @classmethod
    def create_product(
        cls,
        context: CatalogContext,
        artwork: Artwork,
        product_type: ProductType,
        product_name: str = "",
        **fields,
    ) -> Product:
        """Create the artwork × product type product with its base SKU."""
        context.require_catalog_manager()

        product = Product.objects.create(
            artwork=artwork,
            product_type=product_type,
            product_name=product_name or f"{artwork.title} - {product_type.type_name}",
            base_sku=f"{artwork.asc_code}-{product_type.type_code}",
            created_by=context.user,
            **fields,
        )

        logger.info(
            f"Product {product.base_sku} created",
            extra={"base_sku": product.base_sku, "actor": context.actor},
        )
        return product

    @classmethod
    def preview_sku(cls, product: Product, selections: Mapping | None = None) -> str:
        """SKU that create_variant would issue for these selections (unchecked)."""
        var1, var2, var3 = resolve_variant_codes(product.product_type, selections)
        return build_sku(
            product.artwork.asc_code,
            product.product_type.type_code,
            var1,
            var2,
            var3,
        )

    @classmethod
    def create_variant(
        cls,
        context: CatalogContext,
        product: Product,
        selections: Mapping | None = None,
        **fields,
    ) -> ProductVariant:
        """
        Issue a SKU for a product.

        Args:
            context: Acting user and role
            product: Product the SKU belongs to
            selections: {VariantGroup or pk: code}; unselected slots get "99"
            **fields: variant_name, prices, inventory_qty...

        Raises:
            SkumanError: INVALID_VARIANT_CODE, UNKNOWN_VARIANT_CODE (not an
                active code of the slot's group) or INVALID_SKU
            ConfigurationError: UNKNOWN_VARIANT_GROUP

        Example:
            catalog.create_variant(ctx, poster, {size: "03", frame: "07"})
            # → 11K001-PST-03-07-99
        """
        context.require_catalog_manager()

        codes = resolve_variant_codes(product.product_type, selections)
        slots = get_variant_slots(product.product_type)
        for slot, (group, code) in enumerate(zip(slots.groups, codes), start=1):
            if is_na_code(code):
                continue
            if not is_valid_variant_code(code):
                raise SkumanError(
                    "INVALID_VARIANT_CODE",
                    slot=f"VAR{slot}",
                    variant_code=code,
                    message=get_variant_code_error(code),
                )
            if not VariantCode.objects.filter(
                variant_group=group, code=code, is_active=True
            ).exists():
                raise SkumanError(
                    "UNKNOWN_VARIANT_CODE",
                    slot=f"VAR{slot}",
                    variant_code=code,
                    group=group.group_name,
                )

        sku = build_sku(product.artwork.asc_code, product.product_type.type_code, *codes)
        if not is_valid_sku(sku):
            raise SkumanError("INVALID_SKU", sku=sku)

        variant = ProductVariant.objects.create(
            product=product,
            full_sku=sku,
            variant_code="-".join(codes),
            **fields,
        )

        logger.info(
            f"SKU {sku} issued ({variant.dimensionality})",
            extra={
                "sku": sku,
                "product": product.pk,
                "dimensionality": variant.dimensionality,
                "actor": context.actor,
            },
        )
        return variant

    @classmethod
    def check_sku(cls, sku: str) -> SkuCheck:
        return check_sku(sku)
