"""
Django Skuman - artwork codes and SKUs for art catalogs.

Usage:
    from skuman import catalog, CatalogContext, Role, SkumanError

    ctx = CatalogContext(user=request.user, role=Role.PARTNER)
    artwork = catalog.create_artwork(ctx, "Blue Hour")
    artwork.asc_code  # "11K001"

    from skuman.codes import build_sku, parse_sku, is_valid_sku

    build_sku("11K001", "UTS", "03", "07")  # "11K001-UTS-03-07-99"
    parse_sku("11K001-UTS-03-07-12").var3   # "12"
"""

from skuman.exceptions import AllocationError, ConfigurationError, SkumanError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("catalog", "Catalog"):
        from skuman.service import Catalog

        return Catalog
    if name in ("CatalogContext", "Role"):
        from skuman import context

        return getattr(context, name)
    if name == "ParsedSKU":
        from skuman.results import ParsedSKU

        return ParsedSKU
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "catalog",
    "Catalog",
    "CatalogContext",
    "Role",
    "ParsedSKU",
    "SkumanError",
    "AllocationError",
    "ConfigurationError",
]
__version__ = "0.1.0"
