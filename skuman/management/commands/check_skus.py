"""
Check issued SKUs against the SKU grammar.

Reports every ProductVariant whose full_sku fails is_valid_sku, carries a
variant segment outside 00-98 (other than the 99 N/A marker), or
disagrees with its product's base SKU.

Usage:
    python manage.py check_skus
    python manage.py check_skus --product-type PST
"""

from django.core.management.base import BaseCommand, CommandError

from skuman.models import ProductVariant
from skuman.services.variants import check_sku


class Command(BaseCommand):
    help = "Checks persisted SKUs against the SKU grammar"

    def add_arguments(self, parser):
        parser.add_argument(
            "--product-type",
            dest="type_code",
            help="Only check SKUs of this product type code",
        )

    def handle(self, *args, **options):
        variants = ProductVariant.objects.select_related("product").order_by("full_sku")
        if options.get("type_code"):
            variants = variants.filter(product__product_type__type_code=options["type_code"])

        checked = 0
        problems = 0
        dimensions = {"2D": 0, "3D": 0}

        for variant in variants.iterator():
            checked += 1
            result = check_sku(variant.full_sku)
            errors = list(result.errors)

            if result.parsed and (
                f"{result.parsed.asc_code}-{result.parsed.type_code}" != variant.product.base_sku
            ):
                errors.append(f"does not belong to product {variant.product.base_sku}")

            if errors:
                problems += 1
                self.stdout.write(self.style.ERROR(f"✗ {variant.full_sku}: {'; '.join(errors)}"))
            else:
                dimensions[result.dimensionality] += 1

        self.stdout.write(
            f"Checked {checked} SKUs: {dimensions['2D']} 2D, {dimensions['3D']} 3D, "
            f"{problems} invalid"
        )

        if problems:
            raise CommandError(f"{problems} invalid SKU(s)")

        self.stdout.write(self.style.SUCCESS("✓ All SKUs valid"))
