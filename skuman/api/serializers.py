"""
Skuman API Serializers.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers
from taggit.serializers import TaggitSerializer, TagListSerializerField

from skuman.codes import get_variant_code_error, is_valid_variant_code
from skuman.models import (
    MAX_VARIANT_GROUPS,
    Artwork,
    AscHistory,
    Product,
    ProductType,
    ProductTypeVariantGroup,
    ProductVariant,
    VariantCode,
    VariantGroup,
)


class ArtworkSerializer(TaggitSerializer, serializers.ModelSerializer):
    """Serializer for Artwork model. asc_code is never writable."""

    tags = TagListSerializerField(required=False)
    partner = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), required=False
    )

    class Meta:
        model = Artwork
        fields = [
            "uuid",
            "asc_code",
            "sequence_number",
            "title",
            "artist_name",
            "description",
            "art_medium",
            "year_created",
            "original_dimensions",
            "status",
            "partner",
            "is_exclusive",
            "rights_start_date",
            "rights_end_date",
            "tags",
            "metadata",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "uuid",
            "asc_code",
            "sequence_number",
            "created_at",
            "updated_at",
        ]


class AscHistorySerializer(serializers.ModelSerializer):
    """Serializer for AscHistory model (read-only)."""

    class Meta:
        model = AscHistory
        fields = [
            "id",
            "asc_code",
            "artwork",
            "status",
            "assigned_by",
            "assigned_at",
            "notes",
            "void_reason",
            "voided_at",
            "voided_by",
        ]
        read_only_fields = fields


class VariantGroupSerializer(serializers.ModelSerializer):
    """Serializer for VariantGroup model."""

    class Meta:
        model = VariantGroup
        fields = ["id", "group_name", "description", "is_active", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]


class VariantCodeSerializer(serializers.ModelSerializer):
    """Serializer for VariantCode model."""

    class Meta:
        model = VariantCode
        fields = [
            "id",
            "variant_group",
            "code",
            "display_value",
            "display_order",
            "description",
            "is_active",
            "metadata",
        ]

    def validate_code(self, value):
        if not is_valid_variant_code(value):
            raise serializers.ValidationError(get_variant_code_error(value))
        return value


class ProductTypeVariantGroupSerializer(serializers.ModelSerializer):
    """Serializer for a product type's variant group assignment."""

    group_name = serializers.CharField(source="variant_group.group_name", read_only=True)
    slot = serializers.SerializerMethodField()

    class Meta:
        model = ProductTypeVariantGroup
        fields = [
            "id",
            "variant_group",
            "group_name",
            "sort_order",
            "slot",
            "is_required",
            "allow_multiple",
        ]

    def get_slot(self, obj) -> str:
        return f"VAR{obj.sort_order + 1}"


class ProductTypeSerializer(serializers.ModelSerializer):
    """Serializer for ProductType model."""

    variant_groups = ProductTypeVariantGroupSerializer(
        source="variant_group_assignments", many=True, read_only=True
    )

    class Meta:
        model = ProductType
        fields = [
            "id",
            "type_code",
            "type_name",
            "description",
            "sort_order",
            "is_active",
            "variant_groups",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["variant_groups", "created_at", "updated_at"]


class ProductTypeUpdateSerializer(ProductTypeSerializer):
    """ProductType update: type_code is fixed once created."""

    class Meta(ProductTypeSerializer.Meta):
        read_only_fields = ["type_code", *ProductTypeSerializer.Meta.read_only_fields]


class VariantGroupAssignmentSerializer(serializers.Serializer):
    """One entry of the assign-groups action."""

    variant_group = serializers.PrimaryKeyRelatedField(queryset=VariantGroup.objects.all())
    sort_order = serializers.IntegerField(min_value=0, max_value=MAX_VARIANT_GROUPS - 1)
    is_required = serializers.BooleanField(required=False, default=False)
    allow_multiple = serializers.BooleanField(required=False, default=False)


class AssignVariantGroupsSerializer(serializers.Serializer):
    """Serializer for ProductType assign-groups action."""

    groups = VariantGroupAssignmentSerializer(many=True)


class ReorderEntrySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    sort_order = serializers.IntegerField(min_value=0, max_value=MAX_VARIANT_GROUPS - 1)


class ReorderVariantGroupsSerializer(serializers.Serializer):
    """Serializer for ProductType reorder action."""

    updates = ReorderEntrySerializer(many=True)


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product model."""

    asc_code = serializers.CharField(source="artwork.asc_code", read_only=True)
    type_code = serializers.CharField(source="product_type.type_code", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "artwork",
            "asc_code",
            "product_type",
            "type_code",
            "product_name",
            "base_sku",
            "description",
            "is_active",
            "launch_date",
            "discontinue_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["asc_code", "type_code", "base_sku", "created_at", "updated_at"]
        extra_kwargs = {"product_name": {"required": False}}


class ProductUpdateSerializer(ProductSerializer):
    """Product update: artwork and product type are fixed, base_sku derives from them."""

    class Meta(ProductSerializer.Meta):
        read_only_fields = ["artwork", "product_type", *ProductSerializer.Meta.read_only_fields]


class ProductVariantSerializer(serializers.ModelSerializer):
    """Serializer for ProductVariant model. SKU fields are issued, never edited."""

    dimensionality = serializers.CharField(read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            "uuid",
            "product",
            "full_sku",
            "variant_code",
            "variant_name",
            "dimensionality",
            "retail_price",
            "wholesale_price",
            "cost_price",
            "inventory_qty",
            "barcode",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "uuid",
            "product",
            "full_sku",
            "variant_code",
            "dimensionality",
            "created_at",
            "updated_at",
        ]


class ProductVariantCreateSerializer(serializers.Serializer):
    """
    Serializer for issuing a SKU.

    selections maps variant group ids to codes:
        {"product": 7, "selections": {"3": "03", "5": "07"}}
    """

    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    selections = serializers.DictField(
        child=serializers.CharField(allow_blank=True), required=False, default=dict
    )
    variant_name = serializers.CharField(required=False, allow_blank=True)
    retail_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    wholesale_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    cost_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    inventory_qty = serializers.IntegerField(required=False)

    def validate_selections(self, value):
        try:
            return {int(group_id): code for group_id, code in value.items()}
        except (TypeError, ValueError):
            raise serializers.ValidationError("Keys must be variant group ids.")


class SkuCheckSerializer(serializers.Serializer):
    """Serializer for the SKU check endpoint."""

    sku = serializers.CharField(trim_whitespace=False)
