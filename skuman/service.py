"""
Skuman Service - Thin wrapper over services and models.

Usage:
    from skuman import catalog, CatalogContext, Role

    ctx = CatalogContext(user=request.user, role=Role.ADMIN)

    # Artworks (ASC code allocated atomically)
    artwork = catalog.create_artwork(ctx, "Blue Hour", artist_name="M. Okafor")
    artwork.asc_code  # "11K001"

    # Product types and hierarchy
    poster = catalog.create_product_type(ctx, "PST", "Poster")
    catalog.assign_variant_groups(ctx, poster, [
        {"variant_group": size, "sort_order": 0},
        {"variant_group": frame, "sort_order": 1},
    ])

    # SKUs
    product = catalog.create_product(ctx, artwork, poster)
    variant = catalog.create_variant(ctx, product, {size: "03", frame: "07"})
    variant.full_sku  # "11K001-PST-03-07-99"
"""

from skuman.services.artworks import CatalogArtworks
from skuman.services.hierarchy import CatalogProductTypes
from skuman.services.variants import CatalogVariants


class Catalog(CatalogArtworks, CatalogProductTypes, CatalogVariants):
    """
    Main API for Skuman.

    Composed from the service mixins; every method is a classmethod.
    """


catalog = Catalog
