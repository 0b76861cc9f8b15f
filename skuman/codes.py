"""
Skuman Codes: grammar, parsing and formatting of product identifiers.

Pure functions, no I/O, no Django imports.

    ASC code   11K001                 2 digits, 1 letter, 3 digits
    Type code  PST                    3 uppercase letters
    Variant    03                     2 digits, 00-98 (99 = N/A)
    SKU        11K001-UTS-03-07-99    {ASC}-{TYPE}-{VAR1}-{VAR2}-{VAR3}

Validators never raise: a grammar mismatch is ``False`` (or ``None`` from
parse_sku). build_sku is an unchecked formatter; validation is a separate
explicit step.

Usage:
    from skuman.codes import build_sku, parse_sku, is_valid_sku

    sku = build_sku("11K001", "UTS", "03", "07")
    parsed = parse_sku(sku)
    parsed.var3  # "99"
"""

from __future__ import annotations

import re
from typing import Literal

from skuman.results import ParsedSKU


# ── Constants ──

NA_CODE = "99"
MAX_SKU_LENGTH = 20
MAX_VARIANT_VALUE = 98
SEQUENCE_DIGITS = 3

ASC_CODE_PATTERN = re.compile(r"^[0-9]{2}[A-Z][0-9]{3}$")
ASC_PREFIX_PATTERN = re.compile(r"^[0-9]{2}[A-Z]$")
PRODUCT_TYPE_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")
VARIANT_CODE_PATTERN = re.compile(r"^[0-9]{2}$")
SKU_PATTERN = re.compile(
    r"^([0-9]{2}[A-Z][0-9]{3})-([A-Z]{3})-([0-9]{2})-([0-9]{2})-([0-9]{2})$"
)

Dimensionality = Literal["2D", "3D"]

# Error messages (order = precedence in get_variant_code_error)
MSG_VARIANT_REQUIRED = "Variant code is required"
MSG_VARIANT_SHAPE = "Variant code must be exactly 2 digits (e.g., 01, 15, 42)"
MSG_VARIANT_RESERVED = "Code 99 is reserved for N/A placeholder. Use codes 00-98."
MSG_VARIANT_RANGE = "Variant code must be between 00 and 98"
MSG_VARIANT_INVALID = "Invalid variant code"


def _fullmatch(pattern: re.Pattern, value) -> re.Match | None:
    # `$` also matches before a trailing newline; fullmatch does not.
    if not isinstance(value, str):
        return None
    return pattern.fullmatch(value)


# ══════════════════════════════════════════════════════════════
# COMPONENT GRAMMARS
# ══════════════════════════════════════════════════════════════


def is_valid_variant_code(code: str) -> bool:
    """True iff code is exactly 2 digits with value 00-98 (99 is the N/A sentinel)."""
    if not _fullmatch(VARIANT_CODE_PATTERN, code):
        return False
    return 0 <= int(code) <= MAX_VARIANT_VALUE


def is_valid_product_type_code(code: str) -> bool:
    """True iff code is exactly 3 uppercase ASCII letters."""
    return _fullmatch(PRODUCT_TYPE_CODE_PATTERN, code) is not None


def is_valid_asc_code(code: str) -> bool:
    """True iff code is 2 digits, 1 uppercase letter, 3 digits (e.g. 11K001)."""
    return _fullmatch(ASC_CODE_PATTERN, code) is not None


def is_valid_asc_prefix(prefix: str) -> bool:
    """True iff prefix is the scheme part of an ASC code (e.g. 11K)."""
    return _fullmatch(ASC_PREFIX_PATTERN, prefix) is not None


def is_na_code(code: str) -> bool:
    return code == NA_CODE


def get_variant_code_error(code: str) -> str:
    """
    Human-readable reason why a variant code is not usable.

    Checks run in a fixed order and the first failing one wins:
    missing, shape, reserved sentinel, range, then a generic fallback.
    Only meaningful for codes that failed is_valid_variant_code.
    """
    if not code:
        return MSG_VARIANT_REQUIRED

    if not _fullmatch(VARIANT_CODE_PATTERN, code):
        return MSG_VARIANT_SHAPE

    value = int(code)
    if value == int(NA_CODE):
        return MSG_VARIANT_RESERVED

    if value < 0 or value > MAX_VARIANT_VALUE:
        return MSG_VARIANT_RANGE

    return MSG_VARIANT_INVALID


# ══════════════════════════════════════════════════════════════
# ASC CODES
# ══════════════════════════════════════════════════════════════


def format_asc_code(prefix: str, sequence_number: int) -> str:
    """Format an ASC code from its scheme prefix and sequence number (unchecked)."""
    return f"{prefix}{sequence_number:0{SEQUENCE_DIGITS}d}"


def asc_sequence_number(asc_code: str) -> int:
    """
    Sequence number carried by an ASC code (its last 3 digits).

    Raises ValueError if the code does not match the ASC grammar.
    """
    if not is_valid_asc_code(asc_code):
        raise ValueError(f"Not an ASC code: {asc_code!r}")
    return int(asc_code[-SEQUENCE_DIGITS:])


def asc_prefix(asc_code: str) -> str:
    """Scheme prefix of an ASC code (e.g. "11K" for "11K001")."""
    if not is_valid_asc_code(asc_code):
        raise ValueError(f"Not an ASC code: {asc_code!r}")
    return asc_code[:-SEQUENCE_DIGITS]


# ══════════════════════════════════════════════════════════════
# SKU
# ══════════════════════════════════════════════════════════════


def is_valid_sku(sku: str) -> bool:
    """
    True iff sku matches the full SKU grammar and is at most 20 characters.

    Every grammar-conformant string is exactly 20 characters today; the
    length cap is checked on its own so it survives grammar changes.
    """
    if not _fullmatch(SKU_PATTERN, sku):
        return False
    return len(sku) <= MAX_SKU_LENGTH


def parse_sku(sku: str) -> ParsedSKU | None:
    """
    Split a SKU into its five segments.

    Returns None on any grammar mismatch. Variant segments are returned
    as captured: "99" comes back as-is and the 00-98 range is not
    re-checked (use is_valid_variant_code per segment for that).
    """
    match = _fullmatch(SKU_PATTERN, sku)
    if not match:
        return None

    asc_code, type_code, var1, var2, var3 = match.groups()
    return ParsedSKU(
        asc_code=asc_code,
        type_code=type_code,
        var1=var1,
        var2=var2,
        var3=var3,
    )


def build_sku(
    asc_code: str,
    type_code: str,
    var1: str = NA_CODE,
    var2: str = NA_CODE,
    var3: str = NA_CODE,
) -> str:
    """
    Join SKU segments with "-".

    No validation: callers pass grammar-conformant parts, or check the
    result with is_valid_sku.
    """
    return f"{asc_code}-{type_code}-{var1}-{var2}-{var3}"


def get_sku_dimensionality(sku: str) -> Dimensionality:
    """
    "3D" when VAR3 carries a real code, "2D" otherwise.

    A SKU that fails to parse is reported as "2D" rather than raising,
    so legacy or malformed identifiers are treated as simple products.
    """
    parsed = parse_sku(sku)
    if parsed is None:
        return "2D"

    return "2D" if is_na_code(parsed.var3) else "3D"
