"""
Skuman Models.

Core models for the artwork code / SKU catalog:
- CodeSequence: Atomic counter behind ASC code allocation
- Artwork: A piece of art with its ASC code
- AscHistory: Append-only audit of ASC code assignments
- ProductType: 3-letter product kind (PST, UTS...)
- VariantGroup / VariantCode: Product dimensions and their 2-digit values
- ProductTypeVariantGroup: Which groups fill VAR1/VAR2/VAR3 for a type
- Product / ProductVariant: Base SKU and full SKUs
"""

from skuman.models.artwork import Artwork, ArtworkStatus, AscHistory, AscHistoryStatus
from skuman.models.product import Product, ProductVariant
from skuman.models.product_type import (
    MAX_VARIANT_GROUPS,
    ProductType,
    ProductTypeVariantGroup,
    VariantCode,
    VariantGroup,
)
from skuman.models.sequence import CodeSequence

__all__ = [
    "CodeSequence",
    "Artwork",
    "ArtworkStatus",
    "AscHistory",
    "AscHistoryStatus",
    "ProductType",
    "VariantGroup",
    "ProductTypeVariantGroup",
    "VariantCode",
    "MAX_VARIANT_GROUPS",
    "Product",
    "ProductVariant",
]
