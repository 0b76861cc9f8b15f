"""
Product type & variant hierarchy service.

Resolution rule: a product type's active variant groups, sorted by
ascending sort_order, fill VAR1, VAR2, VAR3 by position. Any slot with no
group, or whose group got no code, is "99".

Hierarchy edits only affect SKUs built afterwards. Nothing here reads or
writes ProductVariant rows.
"""

import logging
from collections.abc import Iterable, Mapping

from django.core.exceptions import ValidationError
from django.db import transaction

from skuman.codes import NA_CODE, is_valid_product_type_code
from skuman.context import CatalogContext
from skuman.exceptions import ConfigurationError
from skuman.models import (
    MAX_VARIANT_GROUPS,
    ProductType,
    ProductTypeVariantGroup,
    VariantCode,
    VariantGroup,
)
from skuman.results import VariantSlots

logger = logging.getLogger(__name__)


def _group_key(group) -> object:
    return group.pk if isinstance(group, VariantGroup) else group


def _code_value(code) -> str:
    if isinstance(code, VariantCode):
        return code.code
    return code or ""


def get_variant_slots(product_type: ProductType) -> VariantSlots:
    """Map the type's active variant groups to VAR1/VAR2/VAR3."""
    groups = [a.variant_group for a in product_type.active_assignments()]
    return VariantSlots(*groups[:MAX_VARIANT_GROUPS])


def resolve_variant_codes(
    product_type: ProductType,
    selections: Mapping | None = None,
) -> tuple[str, str, str]:
    """
    Resolve (VAR1, VAR2, VAR3) for one product instance.

    Args:
        product_type: Type whose hierarchy decides the slots
        selections: {VariantGroup or group pk: code string or VariantCode}.
            Missing or empty entries become "99".

    Returns:
        Three code strings, unvalidated (validation is the caller's step)

    Raises:
        ConfigurationError: a selection names a group that is not an active
            group of this product type
    """
    selections = {_group_key(g): _code_value(c) for g, c in (selections or {}).items()}
    slots = get_variant_slots(product_type)

    mapped = {g.pk for g in slots.groups if g is not None}
    unknown = [key for key in selections if key not in mapped]
    if unknown:
        raise ConfigurationError(
            "UNKNOWN_VARIANT_GROUP",
            type_code=product_type.type_code,
            groups=unknown,
        )

    codes = []
    for group in slots.groups:
        code = selections.get(group.pk) if group is not None else None
        codes.append(code or NA_CODE)
    return tuple(codes)


class CatalogProductTypes:
    """Product type and variant hierarchy configuration."""

    @classmethod
    def create_product_type(
        cls,
        context: CatalogContext,
        type_code: str,
        type_name: str,
        description: str = "",
        sort_order: int = 0,
        is_active: bool = True,
    ) -> ProductType:
        """
        Create a product type.

        Raises:
            ConfigurationError: type_code is not 3 uppercase letters
        """
        context.require_catalog_manager()

        if not is_valid_product_type_code(type_code):
            raise ConfigurationError("INVALID_TYPE_CODE", type_code=type_code)

        product_type = ProductType.objects.create(
            type_code=type_code,
            type_name=type_name,
            description=description or "",
            sort_order=sort_order,
            is_active=is_active,
        )

        logger.info(
            f"Product type {type_code} created",
            extra={"type_code": type_code, "actor": context.actor},
        )
        return product_type

    @classmethod
    def update_product_type(
        cls, context: CatalogContext, product_type: ProductType, **changes
    ) -> ProductType:
        """
        Update a product type.

        Raises:
            ConfigurationError: TYPE_CODE_IMMUTABLE if type_code differs from
                the stored one; issued base SKUs embed it
        """
        context.require_catalog_manager()

        if "type_code" in changes and changes["type_code"] != product_type.type_code:
            raise ConfigurationError(
                "TYPE_CODE_IMMUTABLE",
                type_code=product_type.type_code,
                requested=changes["type_code"],
            )

        for name, value in changes.items():
            setattr(product_type, name, value)
        product_type.save()

        logger.info(
            f"Product type {product_type.type_code} updated",
            extra={
                "type_code": product_type.type_code,
                "fields": sorted(changes),
                "actor": context.actor,
            },
        )
        return product_type

    @classmethod
    def assign_variant_groups(
        cls,
        context: CatalogContext,
        product_type: ProductType,
        assignments: Iterable[Mapping],
    ) -> list[ProductTypeVariantGroup]:
        """
        Replace the variant groups of a product type.

        Args:
            assignments: [{"variant_group": group, "sort_order": 0,
                "is_required": False, "allow_multiple": False}, ...]

        Raises:
            ConfigurationError: more than 3 groups or sort_order outside 0-2
        """
        context.require_catalog_manager()

        assignments = list(assignments)
        if len(assignments) > MAX_VARIANT_GROUPS:
            raise ConfigurationError(
                "TOO_MANY_VARIANT_GROUPS",
                type_code=product_type.type_code,
                count=len(assignments),
            )
        for item in assignments:
            cls._check_sort_order(product_type, item.get("sort_order", 0))

        with transaction.atomic():
            product_type.variant_group_assignments.all().delete()
            created = [
                ProductTypeVariantGroup.objects.create(
                    product_type=product_type,
                    variant_group=item["variant_group"],
                    sort_order=item.get("sort_order", 0),
                    is_required=item.get("is_required", False),
                    allow_multiple=item.get("allow_multiple", False),
                )
                for item in assignments
            ]

        logger.info(
            f"Product type {product_type.type_code}: {len(created)} variant groups assigned",
            extra={"type_code": product_type.type_code, "actor": context.actor},
        )
        return created

    @classmethod
    def reorder_variant_groups(
        cls,
        context: CatalogContext,
        product_type: ProductType,
        updates: Mapping[int, int],
    ) -> VariantSlots:
        """
        Change slot order of existing assignments.

        Args:
            updates: {assignment pk: new sort_order}

        Issued SKUs keep their codes; only future SKUs use the new order.
        """
        context.require_catalog_manager()

        for sort_order in updates.values():
            cls._check_sort_order(product_type, sort_order)

        with transaction.atomic():
            assignments = {
                a.pk: a
                for a in product_type.variant_group_assignments.select_for_update()
            }
            for pk, sort_order in updates.items():
                assignment = assignments.get(pk)
                if assignment is None:
                    raise ConfigurationError(
                        "UNKNOWN_VARIANT_GROUP",
                        type_code=product_type.type_code,
                        assignment=pk,
                    )
                assignment.sort_order = sort_order
                assignment.save(update_fields=["sort_order"])

        slots = get_variant_slots(product_type)
        logger.info(
            f"Product type {product_type.type_code}: variant hierarchy reordered",
            extra={
                "type_code": product_type.type_code,
                "slots": [str(g) if g else None for g in slots.groups],
                "actor": context.actor,
            },
        )
        return slots

    @classmethod
    def get_variant_mapping(cls, product_type: ProductType) -> VariantSlots:
        return get_variant_slots(product_type)

    @classmethod
    def create_variant_code(
        cls,
        context: CatalogContext,
        variant_group: VariantGroup,
        code: str,
        display_value: str,
        **fields,
    ) -> VariantCode:
        """Add a 2-digit code to a variant group (00-98)."""
        context.require_catalog_manager()
        try:
            return VariantCode.objects.create(
                variant_group=variant_group,
                code=code,
                display_value=display_value,
                **fields,
            )
        except ValidationError as e:
            raise ConfigurationError("INVALID_VARIANT_CODE", variant_code=code, errors=e.messages) from e

    @staticmethod
    def _check_sort_order(product_type: ProductType, sort_order) -> None:
        if not isinstance(sort_order, int) or not 0 <= sort_order < MAX_VARIANT_GROUPS:
            raise ConfigurationError(
                "INVALID_SORT_ORDER",
                type_code=product_type.type_code,
                sort_order=sort_order,
            )
