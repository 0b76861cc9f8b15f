"""
Skuman Services.

Business logic that doesn't belong in models:
- allocation: ASC code allocation against the configured allocator
- artworks: Create, update, archive, ASC audit, stats
- hierarchy: Product types, variant group slots, resolution
- variants: Products, SKU issuing, SKU checks
"""

from skuman.services.allocation import allocate_artwork_code
from skuman.services.artworks import CatalogArtworks
from skuman.services.hierarchy import (
    CatalogProductTypes,
    get_variant_slots,
    resolve_variant_codes,
)
from skuman.services.variants import CatalogVariants, check_sku

__all__ = [
    "allocate_artwork_code",
    "CatalogArtworks",
    "CatalogProductTypes",
    "CatalogVariants",
    "get_variant_slots",
    "resolve_variant_codes",
    "check_sku",
]
