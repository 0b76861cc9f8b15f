# Generated manually: initial skuman schema

import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import simple_history.models
import taggit.managers
from django.conf import settings
from django.db import migrations, models


ARTWORK_STATUS_CHOICES = [
    ("draft", "Draft"),
    ("active", "Active"),
    ("archived", "Archived"),
    ("discontinued", "Discontinued"),
]

HISTORY_TYPE_CHOICES = [("+", "Created"), ("~", "Changed"), ("-", "Deleted")]

TYPE_CODE_VALIDATOR = django.core.validators.RegexValidator(
    code="invalid_type_code",
    message="Type code must be exactly 3 uppercase letters",
    regex="^[A-Z]{3}\\Z",
)


def big_auto_id():
    return (
        "id",
        models.BigAutoField(
            auto_created=True,
            primary_key=True,
            serialize=False,
            verbose_name="ID",
        ),
    )


def historical_id():
    return (
        "id",
        models.BigIntegerField(
            auto_created=True, blank=True, db_index=True, verbose_name="ID"
        ),
    )


def history_fields():
    return [
        ("history_id", models.AutoField(primary_key=True, serialize=False)),
        ("history_date", models.DateTimeField(db_index=True)),
        ("history_change_reason", models.CharField(max_length=100, null=True)),
        (
            "history_type",
            models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1),
        ),
        (
            "history_user",
            models.ForeignKey(
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


def history_options(name, name_plural):
    return {
        "verbose_name": f"historical {name}",
        "verbose_name_plural": f"historical {name_plural}",
        "ordering": ("-history_date", "-history_id"),
        "get_latest_by": ("history_date", "history_id"),
    }


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("taggit", "0001_initial"),
    ]

    operations = [
        # ── Sequence ──
        migrations.CreateModel(
            name="CodeSequence",
            fields=[
                big_auto_id(),
                ("prefix", models.CharField(max_length=50, unique=True, verbose_name="Prefix")),
                ("last_value", models.PositiveIntegerField(default=0, verbose_name="Last value")),
            ],
            options={
                "verbose_name": "Code Sequence",
                "verbose_name_plural": "Code Sequences",
                "db_table": "skuman_code_sequence",
            },
        ),
        # ── Artwork ──
        migrations.CreateModel(
            name="Artwork",
            fields=[
                big_auto_id(),
                (
                    "uuid",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID"
                    ),
                ),
                (
                    "asc_code",
                    models.CharField(
                        editable=False,
                        help_text="Allocated at creation, e.g. 11K001",
                        max_length=6,
                        unique=True,
                        verbose_name="ASC code",
                    ),
                ),
                (
                    "sequence_number",
                    models.PositiveIntegerField(
                        editable=False,
                        help_text="Last 3 digits of the ASC code",
                        verbose_name="Sequence number",
                    ),
                ),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("artist_name", models.CharField(blank=True, max_length=255, verbose_name="Artist")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("art_medium", models.CharField(blank=True, max_length=100, verbose_name="Medium")),
                (
                    "year_created",
                    models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Year"),
                ),
                (
                    "original_dimensions",
                    models.CharField(
                        blank=True, max_length=100, verbose_name="Original dimensions"
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=ARTWORK_STATUS_CHOICES,
                        db_index=True,
                        default="draft",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("is_exclusive", models.BooleanField(default=False, verbose_name="Exclusive")),
                (
                    "rights_start_date",
                    models.DateField(blank=True, null=True, verbose_name="Rights start"),
                ),
                (
                    "rights_end_date",
                    models.DateField(blank=True, null=True, verbose_name="Rights end"),
                ),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="Metadata")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Created by",
                    ),
                ),
                (
                    "partner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="artworks",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Partner",
                    ),
                ),
                (
                    "tags",
                    taggit.managers.TaggableManager(
                        blank=True,
                        help_text="A comma-separated list of tags.",
                        through="taggit.TaggedItem",
                        to="taggit.Tag",
                        verbose_name="Tags",
                    ),
                ),
            ],
            options={
                "verbose_name": "Artwork",
                "verbose_name_plural": "Artworks",
                "db_table": "skuman_artwork",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["partner", "status"], name="skuman_art_partner_status_idx"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalArtwork",
            fields=[
                historical_id(),
                (
                    "uuid",
                    models.UUIDField(
                        db_index=True, default=uuid.uuid4, editable=False, verbose_name="UUID"
                    ),
                ),
                (
                    "asc_code",
                    models.CharField(
                        db_index=True,
                        editable=False,
                        help_text="Allocated at creation, e.g. 11K001",
                        max_length=6,
                        verbose_name="ASC code",
                    ),
                ),
                (
                    "sequence_number",
                    models.PositiveIntegerField(
                        editable=False,
                        help_text="Last 3 digits of the ASC code",
                        verbose_name="Sequence number",
                    ),
                ),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("artist_name", models.CharField(blank=True, max_length=255, verbose_name="Artist")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("art_medium", models.CharField(blank=True, max_length=100, verbose_name="Medium")),
                (
                    "year_created",
                    models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Year"),
                ),
                (
                    "original_dimensions",
                    models.CharField(
                        blank=True, max_length=100, verbose_name="Original dimensions"
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=ARTWORK_STATUS_CHOICES,
                        db_index=True,
                        default="draft",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("is_exclusive", models.BooleanField(default=False, verbose_name="Exclusive")),
                (
                    "rights_start_date",
                    models.DateField(blank=True, null=True, verbose_name="Rights start"),
                ),
                (
                    "rights_end_date",
                    models.DateField(blank=True, null=True, verbose_name="Rights end"),
                ),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="Metadata")),
                ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="created at")),
                ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="updated at")),
                *history_fields(),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Created by",
                    ),
                ),
                (
                    "partner",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Partner",
                    ),
                ),
            ],
            options=history_options("Artwork", "Artworks"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="AscHistory",
            fields=[
                big_auto_id(),
                ("asc_code", models.CharField(db_index=True, max_length=6, verbose_name="ASC code")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("assigned", "Assigned"),
                            ("voided", "Voided"),
                            ("transferred", "Transferred"),
                        ],
                        default="assigned",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                (
                    "assigned_at",
                    models.DateTimeField(
                        default=django.utils.timezone.now, verbose_name="Assigned at"
                    ),
                ),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                ("void_reason", models.TextField(blank=True, verbose_name="Void reason")),
                ("voided_at", models.DateTimeField(blank=True, null=True, verbose_name="Voided at")),
                (
                    "artwork",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="asc_history",
                        to="skuman.artwork",
                        verbose_name="Artwork",
                    ),
                ),
                (
                    "assigned_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Assigned by",
                    ),
                ),
                (
                    "voided_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Voided by",
                    ),
                ),
            ],
            options={
                "verbose_name": "ASC History",
                "verbose_name_plural": "ASC History",
                "db_table": "skuman_asc_history",
                "ordering": ["-assigned_at"],
            },
        ),
        # ── Product types ──
        migrations.CreateModel(
            name="ProductType",
            fields=[
                big_auto_id(),
                (
                    "type_code",
                    models.CharField(
                        help_text="3 uppercase letters, e.g. PST",
                        max_length=3,
                        unique=True,
                        validators=[TYPE_CODE_VALIDATOR],
                        verbose_name="Type code",
                    ),
                ),
                ("type_name", models.CharField(max_length=100, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("sort_order", models.PositiveSmallIntegerField(default=0, verbose_name="Order")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Product Type",
                "verbose_name_plural": "Product Types",
                "db_table": "skuman_product_type",
                "ordering": ["sort_order", "type_code"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalProductType",
            fields=[
                historical_id(),
                (
                    "type_code",
                    models.CharField(
                        db_index=True,
                        help_text="3 uppercase letters, e.g. PST",
                        max_length=3,
                        validators=[TYPE_CODE_VALIDATOR],
                        verbose_name="Type code",
                    ),
                ),
                ("type_name", models.CharField(max_length=100, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("sort_order", models.PositiveSmallIntegerField(default=0, verbose_name="Order")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="created at")),
                ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="updated at")),
                *history_fields(),
            ],
            options=history_options("Product Type", "Product Types"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="VariantGroup",
            fields=[
                big_auto_id(),
                ("group_name", models.CharField(max_length=100, unique=True, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Variant Group",
                "verbose_name_plural": "Variant Groups",
                "db_table": "skuman_variant_group",
                "ordering": ["group_name"],
            },
        ),
        migrations.CreateModel(
            name="ProductTypeVariantGroup",
            fields=[
                big_auto_id(),
                (
                    "sort_order",
                    models.PositiveSmallIntegerField(
                        default=0,
                        help_text="0 = VAR1, 1 = VAR2, 2 = VAR3",
                        validators=[django.core.validators.MaxValueValidator(2)],
                        verbose_name="Slot order",
                    ),
                ),
                ("is_required", models.BooleanField(default=False, verbose_name="Required")),
                ("allow_multiple", models.BooleanField(default=False, verbose_name="Allow multiple")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                (
                    "product_type",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variant_group_assignments",
                        to="skuman.producttype",
                        verbose_name="Product type",
                    ),
                ),
                (
                    "variant_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="product_type_assignments",
                        to="skuman.variantgroup",
                        verbose_name="Variant group",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product Type Variant Group",
                "verbose_name_plural": "Product Type Variant Groups",
                "db_table": "skuman_product_type_variant_group",
                "ordering": ["product_type", "sort_order", "id"],
                "unique_together": {("product_type", "variant_group")},
            },
        ),
        migrations.CreateModel(
            name="HistoricalProductTypeVariantGroup",
            fields=[
                historical_id(),
                (
                    "sort_order",
                    models.PositiveSmallIntegerField(
                        default=0,
                        help_text="0 = VAR1, 1 = VAR2, 2 = VAR3",
                        validators=[django.core.validators.MaxValueValidator(2)],
                        verbose_name="Slot order",
                    ),
                ),
                ("is_required", models.BooleanField(default=False, verbose_name="Required")),
                ("allow_multiple", models.BooleanField(default=False, verbose_name="Allow multiple")),
                ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="created at")),
                *history_fields(),
                (
                    "product_type",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="skuman.producttype",
                        verbose_name="Product type",
                    ),
                ),
                (
                    "variant_group",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="skuman.variantgroup",
                        verbose_name="Variant group",
                    ),
                ),
            ],
            options=history_options("Product Type Variant Group", "Product Type Variant Groups"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="VariantCode",
            fields=[
                big_auto_id(),
                ("code", models.CharField(help_text="00-98", max_length=2, verbose_name="Code")),
                (
                    "display_value",
                    models.CharField(
                        help_text="e.g. 18x24, Black, Matte",
                        max_length=100,
                        verbose_name="Display value",
                    ),
                ),
                (
                    "display_order",
                    models.PositiveSmallIntegerField(
                        blank=True, null=True, verbose_name="Display order"
                    ),
                ),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="Metadata")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "variant_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="codes",
                        to="skuman.variantgroup",
                        verbose_name="Variant group",
                    ),
                ),
            ],
            options={
                "verbose_name": "Variant Code",
                "verbose_name_plural": "Variant Codes",
                "db_table": "skuman_variant_code",
                "ordering": ["variant_group", "display_order", "code"],
                "unique_together": {("variant_group", "code")},
            },
        ),
        # ── Products ──
        migrations.CreateModel(
            name="Product",
            fields=[
                big_auto_id(),
                ("product_name", models.CharField(max_length=255, verbose_name="Name")),
                (
                    "base_sku",
                    models.CharField(
                        help_text="{ASC}-{TYPE}, e.g. 11K001-PST",
                        max_length=10,
                        unique=True,
                        verbose_name="Base SKU",
                    ),
                ),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("launch_date", models.DateField(blank=True, null=True, verbose_name="Launch date")),
                (
                    "discontinue_date",
                    models.DateField(blank=True, null=True, verbose_name="Discontinue date"),
                ),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="Metadata")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "artwork",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="skuman.artwork",
                        verbose_name="Artwork",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Created by",
                    ),
                ),
                (
                    "product_type",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="skuman.producttype",
                        verbose_name="Product type",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "db_table": "skuman_product",
                "ordering": ["base_sku"],
                "unique_together": {("artwork", "product_type")},
            },
        ),
        migrations.CreateModel(
            name="ProductVariant",
            fields=[
                big_auto_id(),
                (
                    "uuid",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID"
                    ),
                ),
                ("full_sku", models.CharField(max_length=20, unique=True, verbose_name="SKU")),
                (
                    "variant_code",
                    models.CharField(
                        help_text="VAR1-VAR2-VAR3, e.g. 03-07-99",
                        max_length=8,
                        verbose_name="Variant code",
                    ),
                ),
                (
                    "variant_name",
                    models.CharField(blank=True, max_length=255, verbose_name="Variant name"),
                ),
                (
                    "retail_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        verbose_name="Retail price",
                    ),
                ),
                (
                    "wholesale_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        verbose_name="Wholesale price",
                    ),
                ),
                (
                    "cost_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        verbose_name="Cost price",
                    ),
                ),
                ("inventory_qty", models.IntegerField(default=0, verbose_name="Inventory")),
                ("barcode", models.CharField(blank=True, max_length=50, verbose_name="Barcode")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="Metadata")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variants",
                        to="skuman.product",
                        verbose_name="Product",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product Variant",
                "verbose_name_plural": "Product Variants",
                "db_table": "skuman_product_variant",
                "ordering": ["full_sku"],
            },
        ),
    ]
