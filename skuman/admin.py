"""
Skuman Admin: artworks, product types and variants.

ASC codes and issued SKUs are read-only everywhere in the admin; they are
created through skuman.service, never typed in.
"""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from skuman.codes import get_sku_dimensionality
from skuman.models import (
    Artwork,
    AscHistory,
    CodeSequence,
    Product,
    ProductType,
    ProductTypeVariantGroup,
    ProductVariant,
    VariantCode,
    VariantGroup,
)


# ── Artwork ──

class AscHistoryInline(admin.TabularInline):
    """Inline for ASC assignment history (read-only)."""

    model = AscHistory
    extra = 0
    can_delete = False
    fields = ("asc_code", "status", "assigned_by", "assigned_at", "void_reason")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Artwork)
class ArtworkAdmin(SimpleHistoryAdmin):
    """Admin for artworks."""

    list_display = ("asc_code", "title", "artist_name", "partner", "status", "created_at")
    list_filter = ("status", "is_exclusive")
    search_fields = ("asc_code", "title", "artist_name")
    raw_id_fields = ("partner", "created_by")
    readonly_fields = ("uuid", "asc_code", "sequence_number", "created_at", "updated_at")
    inlines = [AscHistoryInline]

    def has_add_permission(self, request):
        # Artworks get their ASC code from catalog.create_artwork
        return False


@admin.register(AscHistory)
class AscHistoryAdmin(admin.ModelAdmin):
    """Admin for the ASC audit trail."""

    list_display = ("asc_code", "artwork", "status", "assigned_by", "assigned_at")
    list_filter = ("status",)
    search_fields = ("asc_code",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(CodeSequence)
class CodeSequenceAdmin(admin.ModelAdmin):
    list_display = ("prefix", "last_value")
    readonly_fields = ("prefix", "last_value")

    def has_add_permission(self, request):
        return False


# ── Product types ──

class ProductTypeVariantGroupInline(admin.TabularInline):
    """Inline for variant group slots."""

    model = ProductTypeVariantGroup
    extra = 0
    max_num = 3
    fields = ("variant_group", "sort_order", "is_required", "allow_multiple")


@admin.register(ProductType)
class ProductTypeAdmin(SimpleHistoryAdmin):
    """Admin for product types."""

    list_display = ("type_code", "type_name", "sort_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("type_code", "type_name")
    inlines = [ProductTypeVariantGroupInline]

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return ("type_code",)
        return ()


class VariantCodeInline(admin.TabularInline):
    model = VariantCode
    extra = 1
    fields = ("code", "display_value", "display_order", "is_active")


@admin.register(VariantGroup)
class VariantGroupAdmin(admin.ModelAdmin):
    """Admin for variant groups and their codes."""

    list_display = ("group_name", "is_active")
    list_filter = ("is_active",)
    search_fields = ("group_name",)
    inlines = [VariantCodeInline]


# ── Products ──

class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ("full_sku", "variant_name", "retail_price", "inventory_qty", "is_active")
    readonly_fields = ("full_sku",)

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin for products."""

    list_display = ("base_sku", "product_name", "product_type", "is_active")
    list_filter = ("product_type", "is_active")
    search_fields = ("base_sku", "product_name")
    readonly_fields = ("artwork", "product_type", "base_sku", "created_at", "updated_at")
    inlines = [ProductVariantInline]

    def has_add_permission(self, request):
        # Products get their base SKU from catalog.create_product
        return False


@admin.register(ProductVariant)
class ProductVariantAdmin(admin.ModelAdmin):
    """Admin for issued SKUs."""

    list_display = ("full_sku", "variant_name", "dimensionality", "retail_price", "inventory_qty", "is_active")
    list_filter = ("is_active",)
    search_fields = ("full_sku", "variant_name")
    raw_id_fields = ("product",)
    readonly_fields = ("uuid", "full_sku", "variant_code", "created_at", "updated_at")

    @admin.display(description="2D/3D")
    def dimensionality(self, obj):
        return get_sku_dimensionality(obj.full_sku)

    def has_add_permission(self, request):
        return False
