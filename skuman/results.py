"""
Skuman Result Types.

Structured values returned by parsing, hierarchy resolution and checks.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skuman.models import VariantGroup


@dataclass(frozen=True)
class ParsedSKU:
    """Segments of a SKU: {asc_code}-{type_code}-{var1}-{var2}-{var3}."""

    asc_code: str
    type_code: str
    var1: str
    var2: str
    var3: str

    @property
    def variants(self) -> tuple[str, str, str]:
        return (self.var1, self.var2, self.var3)

    @property
    def variant_code(self) -> str:
        """Variant part only, as stored on ProductVariant (e.g. "03-07-99")."""
        return "-".join(self.variants)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class VariantSlots:
    """
    Variant groups mapped to SKU slots for one product type.

    A slot is None when the product type has fewer than 3 active groups.
    """

    var1: VariantGroup | None = None
    var2: VariantGroup | None = None
    var3: VariantGroup | None = None

    @property
    def groups(self) -> tuple:
        return (self.var1, self.var2, self.var3)

    def slot_of(self, group) -> int | None:
        """1-based slot number of a group, or None if unmapped."""
        for index, mapped in enumerate(self.groups, start=1):
            if mapped is not None and mapped.pk == getattr(group, "pk", group):
                return index
        return None


@dataclass
class SkuCheck:
    """
    Result of checking a SKU string.

    valid=True only when the full grammar holds AND every real variant
    segment is in range 00-98.
    """

    sku: str
    valid: bool
    parsed: ParsedSKU | None = None
    dimensionality: str = "2D"
    errors: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "sku": self.sku,
            "valid": self.valid,
            "parsed": self.parsed.as_dict() if self.parsed else None,
            "dimensionality": self.dimensionality,
            "errors": list(self.errors),
        }


@dataclass
class ArtworkStats:
    """Artwork counts by status."""

    total: int = 0
    active: int = 0
    draft: int = 0
    archived: int = 0
