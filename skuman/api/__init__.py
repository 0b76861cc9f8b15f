"""
Skuman REST API.

Provides DRF ViewSets for:
- Artwork (create allocates the ASC code + actions)
- ProductType (CRUD + variant mapping / reorder)
- VariantGroup, VariantCode (CRUD)
- Product, ProductVariant (SKU issuing)
- SKU check endpoint
"""
