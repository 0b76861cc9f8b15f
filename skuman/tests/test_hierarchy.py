"""
Tests for product types and variant hierarchy (skuman.services.hierarchy).

Verifies:
- type code grammar on create, type code fixed after create
- at most 3 variant groups, slot orders 0-2
- slot resolution by ascending sort_order, "99" for empty slots
- reordering only affects SKUs issued afterwards
"""

import pytest
from django.core.exceptions import ValidationError

from skuman.context import CatalogContext, Role
from skuman.exceptions import ConfigurationError, SkumanError
from skuman.models import (
    ProductType,
    ProductTypeVariantGroup,
    VariantCode,
    VariantGroup,
)
from skuman.service import catalog
from skuman.services.hierarchy import get_variant_slots, resolve_variant_codes


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def size(db):
    return VariantGroup.objects.create(group_name="Size")


@pytest.fixture
def frame(db):
    return VariantGroup.objects.create(group_name="Frame")


@pytest.fixture
def color(db):
    return VariantGroup.objects.create(group_name="Color")


@pytest.fixture
def poster(admin_ctx):
    return catalog.create_product_type(admin_ctx, "PST", "Poster")


@pytest.fixture
def tote(admin_ctx, size, frame):
    tote = catalog.create_product_type(admin_ctx, "UTS", "Tote")
    catalog.assign_variant_groups(
        admin_ctx,
        tote,
        [
            {"variant_group": size, "sort_order": 0},
            {"variant_group": frame, "sort_order": 1},
        ],
    )
    return tote


@pytest.fixture
def editor_ctx(db):
    from django.contrib.auth import get_user_model

    user = get_user_model().objects.create_user(username="editor", password="test123")
    return CatalogContext(user=user, role=Role.EDITOR)


# ═══════════════════════════════════════════════════════════════════
# Product types
# ═══════════════════════════════════════════════════════════════════


class TestProductTypes:
    """Tests for create/update of product types."""

    def test_create(self, admin_ctx):
        pt = catalog.create_product_type(admin_ctx, "PST", "Poster", description="Paper")

        assert pt.type_code == "PST"
        assert pt.is_active is True
        assert pt.history.count() == 1

    def test_editor_can_create(self, editor_ctx):
        assert catalog.create_product_type(editor_ctx, "MUG", "Mug").pk is not None

    @pytest.mark.parametrize("type_code", ["pst", "PS", "PSTR", "P5T", ""])
    def test_invalid_type_code(self, admin_ctx, type_code):
        """Scenario: invalid type code → ConfigurationError before persistence."""
        with pytest.raises(ConfigurationError) as exc:
            catalog.create_product_type(admin_ctx, type_code, "Bad")

        assert exc.value.code == "INVALID_TYPE_CODE"
        assert not ProductType.objects.exists()

    def test_model_rejects_invalid_type_code(self, db):
        with pytest.raises(ValidationError) as exc:
            ProductType.objects.create(type_code="ab1", type_name="Bad")

        assert exc.value.message_dict["type_code"] == [
            "Type code must be exactly 3 uppercase letters"
        ]

    def test_update(self, admin_ctx, poster):
        catalog.update_product_type(admin_ctx, poster, type_name="Art Poster")
        poster.refresh_from_db()
        assert poster.type_name == "Art Poster"

    def test_update_invalid_type_code(self, admin_ctx, poster):
        with pytest.raises(ConfigurationError):
            catalog.update_product_type(admin_ctx, poster, type_code="poster")

        poster.refresh_from_db()
        assert poster.type_code == "PST"

    def test_type_code_immutable(self, admin_ctx, partner_ctx, poster):
        """Scenario: rename PST → PSX refused; existing products keep issuing SKUs."""
        artwork = catalog.create_artwork(partner_ctx, "Blue Hour")
        product = catalog.create_product(admin_ctx, artwork, poster)

        with pytest.raises(ConfigurationError) as exc:
            catalog.update_product_type(admin_ctx, poster, type_code="PSX", type_name="X")

        assert exc.value.code == "TYPE_CODE_IMMUTABLE"
        assert exc.value.details == {"type_code": "PST", "requested": "PSX"}
        poster.refresh_from_db()
        assert poster.type_code == "PST"
        assert poster.type_name == "Poster"
        assert catalog.create_variant(admin_ctx, product).full_sku == "11K001-PST-99-99-99"

    def test_same_type_code_allowed(self, admin_ctx, poster):
        catalog.update_product_type(admin_ctx, poster, type_code="PST", type_name="Art Poster")
        poster.refresh_from_db()
        assert poster.type_name == "Art Poster"

    def test_model_rejects_type_code_change(self, poster):
        poster.type_code = "PSX"

        with pytest.raises(ValidationError) as exc:
            poster.save()

        assert "type_code" in exc.value.message_dict
        assert ProductType.objects.get(pk=poster.pk).type_code == "PST"

    def test_partner_denied(self, partner_ctx):
        with pytest.raises(SkumanError) as exc:
            catalog.create_product_type(partner_ctx, "PST", "Poster")

        assert exc.value.code == "PERMISSION_DENIED"


# ═══════════════════════════════════════════════════════════════════
# Variant groups and codes
# ═══════════════════════════════════════════════════════════════════


class TestVariantGroupAssignment:
    """Tests for assign_variant_groups limits."""

    def test_assign(self, admin_ctx, poster, size, frame, color):
        created = catalog.assign_variant_groups(
            admin_ctx,
            poster,
            [
                {"variant_group": size, "sort_order": 0, "is_required": True},
                {"variant_group": frame, "sort_order": 1},
                {"variant_group": color, "sort_order": 2, "allow_multiple": True},
            ],
        )

        assert len(created) == 3
        assert created[0].is_required is True
        assert created[2].allow_multiple is True

    def test_replaces_previous_assignment(self, admin_ctx, tote, color):
        catalog.assign_variant_groups(admin_ctx, tote, [{"variant_group": color, "sort_order": 0}])

        slots = get_variant_slots(tote)
        assert slots.groups == (color, None, None)

    def test_more_than_three_refused(self, admin_ctx, tote, size, frame, color):
        extra = VariantGroup.objects.create(group_name="Finish")

        with pytest.raises(ConfigurationError) as exc:
            catalog.assign_variant_groups(
                admin_ctx,
                tote,
                [
                    {"variant_group": g, "sort_order": i % 3}
                    for i, g in enumerate([size, frame, color, extra])
                ],
            )

        assert exc.value.code == "TOO_MANY_VARIANT_GROUPS"
        assert tote.variant_group_assignments.count() == 2

    @pytest.mark.parametrize("sort_order", [-1, 3, "1", None])
    def test_invalid_sort_order(self, admin_ctx, poster, size, sort_order):
        with pytest.raises(ConfigurationError) as exc:
            catalog.assign_variant_groups(
                admin_ctx, poster, [{"variant_group": size, "sort_order": sort_order}]
            )

        assert exc.value.code == "INVALID_SORT_ORDER"

    def test_model_refuses_fourth_group(self, tote, color):
        ProductTypeVariantGroup.objects.create(product_type=tote, variant_group=color, sort_order=2)
        extra = VariantGroup.objects.create(group_name="Finish")

        with pytest.raises(ValidationError):
            ProductTypeVariantGroup.objects.create(
                product_type=tote, variant_group=extra, sort_order=2
            )


class TestVariantCodes:
    """Tests for variant code creation."""

    def test_create(self, admin_ctx, size):
        code = catalog.create_variant_code(admin_ctx, size, "03", "18x24")
        assert str(code) == "03 - 18x24"

    def test_reserved_code_refused(self, admin_ctx, size):
        with pytest.raises(ConfigurationError) as exc:
            catalog.create_variant_code(admin_ctx, size, "99", "N/A")

        assert exc.value.code == "INVALID_VARIANT_CODE"
        assert "Code 99 is reserved for N/A placeholder. Use codes 00-98." in exc.value.details["errors"]

    def test_malformed_code_refused(self, admin_ctx, size):
        with pytest.raises(ConfigurationError):
            catalog.create_variant_code(admin_ctx, size, "7", "Small")

    def test_duplicate_code_refused(self, admin_ctx, size):
        catalog.create_variant_code(admin_ctx, size, "03", "18x24")

        with pytest.raises(ConfigurationError):
            catalog.create_variant_code(admin_ctx, size, "03", "Other")

    def test_same_code_in_other_group(self, admin_ctx, size, frame):
        catalog.create_variant_code(admin_ctx, size, "03", "18x24")
        assert catalog.create_variant_code(admin_ctx, frame, "03", "Oak").pk is not None


# ═══════════════════════════════════════════════════════════════════
# Resolution
# ═══════════════════════════════════════════════════════════════════


class TestResolution:
    """Tests for slot mapping and code resolution."""

    def test_no_groups(self, poster):
        """Scenario: type without variant groups → 99-99-99."""
        assert get_variant_slots(poster).groups == (None, None, None)
        assert resolve_variant_codes(poster) == ("99", "99", "99")

    def test_two_groups(self, tote, size, frame):
        """Scenario: size → VAR1, frame → VAR2, VAR3 = 99."""
        slots = get_variant_slots(tote)

        assert slots.var1 == size
        assert slots.var2 == frame
        assert slots.var3 is None
        assert resolve_variant_codes(tote, {size: "03", frame: "07"}) == ("03", "07", "99")

    def test_pk_keys(self, tote, size, frame):
        assert resolve_variant_codes(tote, {size.pk: "03", frame.pk: "07"}) == ("03", "07", "99")

    def test_variant_code_values(self, admin_ctx, tote, size):
        code = catalog.create_variant_code(admin_ctx, size, "05", "A3")
        assert resolve_variant_codes(tote, {size: code}) == ("05", "99", "99")

    def test_missing_and_empty_selection(self, tote, size, frame):
        assert resolve_variant_codes(tote, {size: ""}) == ("99", "99", "99")
        assert resolve_variant_codes(tote, {frame: "07"}) == ("99", "07", "99")

    def test_unknown_group(self, tote, color):
        with pytest.raises(ConfigurationError) as exc:
            resolve_variant_codes(tote, {color: "01"})

        assert exc.value.code == "UNKNOWN_VARIANT_GROUP"

    def test_sorted_by_sort_order_not_insertion(self, admin_ctx, poster, size, frame):
        catalog.assign_variant_groups(
            admin_ctx,
            poster,
            [
                {"variant_group": size, "sort_order": 1},
                {"variant_group": frame, "sort_order": 0},
            ],
        )

        assert get_variant_slots(poster).groups == (frame, size, None)

    def test_inactive_group_skipped(self, tote, size, frame):
        size.is_active = False
        size.save()

        assert get_variant_slots(tote).groups == (frame, None, None)
        with pytest.raises(ConfigurationError):
            resolve_variant_codes(tote, {size: "03"})

    def test_slot_of(self, tote, size, frame, color):
        slots = catalog.get_variant_mapping(tote)

        assert slots.slot_of(size) == 1
        assert slots.slot_of(frame.pk) == 2
        assert slots.slot_of(color) is None


# ═══════════════════════════════════════════════════════════════════
# Reorder
# ═══════════════════════════════════════════════════════════════════


class TestReorder:
    """Tests for reorder_variant_groups."""

    def _assignment(self, product_type, group):
        return product_type.variant_group_assignments.get(variant_group=group)

    def test_swap(self, admin_ctx, tote, size, frame):
        slots = catalog.reorder_variant_groups(
            admin_ctx,
            tote,
            {self._assignment(tote, size).pk: 1, self._assignment(tote, frame).pk: 0},
        )

        assert slots.groups == (frame, size, None)
        assert resolve_variant_codes(tote, {size: "03", frame: "07"}) == ("07", "03", "99")

    def test_issued_skus_unchanged(self, admin_ctx, partner_ctx, tote, size, frame):
        """Scenario: reorder after issuing → old SKU kept, new SKUs use new order."""
        artwork = catalog.create_artwork(partner_ctx, "Blue Hour")
        product = catalog.create_product(admin_ctx, artwork, tote)
        catalog.create_variant_code(admin_ctx, size, "03", "18x24")
        catalog.create_variant_code(admin_ctx, frame, "07", "Oak")
        before = catalog.create_variant(admin_ctx, product, {size: "03", frame: "07"})

        catalog.reorder_variant_groups(
            admin_ctx,
            tote,
            {self._assignment(tote, size).pk: 1, self._assignment(tote, frame).pk: 0},
        )
        after = catalog.create_variant(admin_ctx, product, {size: "03", frame: "07"})

        before.refresh_from_db()
        assert before.full_sku == "11K001-UTS-03-07-99"
        assert after.full_sku == "11K001-UTS-07-03-99"

    def test_unknown_assignment(self, admin_ctx, tote):
        with pytest.raises(ConfigurationError) as exc:
            catalog.reorder_variant_groups(admin_ctx, tote, {999999: 0})

        assert exc.value.code == "UNKNOWN_VARIANT_GROUP"

    def test_invalid_sort_order(self, admin_ctx, tote, size):
        with pytest.raises(ConfigurationError):
            catalog.reorder_variant_groups(admin_ctx, tote, {self._assignment(tote, size).pk: 5})

    def test_history_recorded(self, admin_ctx, tote, size):
        assignment = self._assignment(tote, size)
        catalog.reorder_variant_groups(admin_ctx, tote, {assignment.pk: 2})

        assert assignment.history.count() == 2

    def test_viewer_denied(self, viewer_ctx, tote, size):
        with pytest.raises(SkumanError) as exc:
            catalog.reorder_variant_groups(viewer_ctx, tote, {self._assignment(tote, size).pk: 1})

        assert exc.value.code == "PERMISSION_DENIED"
