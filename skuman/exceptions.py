"""
Skuman Exceptions.

All skuman errors derive from SkumanError for consistent handling.
Grammar checks never raise; they return False/None (see skuman.codes).
"""

from typing import Any


class SkumanError(Exception):
    """
    Base exception for all Skuman errors.

    Usage:
        raise SkumanError('INVALID_SKU', sku='11K001-pst-99-99-99')

    Attributes:
        code: Error code (INVALID_SKU, PERMISSION_DENIED, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        name = type(self).__name__
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{name}({self.code}: {details_str})"
        return f"{name}({self.code})"


class AllocationError(SkumanError):
    """
    The ASC allocator could not supply a code.

    Fatal to artwork creation. Never retried inside skuman.
    """


class ConfigurationError(SkumanError):
    """Catalog configuration rejected before persistence (type codes, hierarchy)."""


# Common error codes
# ALLOCATOR_UNAVAILABLE: Allocator raised or could not be reached (AllocationError)
# MALFORMED_CODE: Allocator returned something that is not an ASC code (AllocationError)
# SEQUENCE_EXHAUSTED: Prefix epoch ran past 999 (AllocationError)
# INVALID_PREFIX: Configured ASC_PREFIX is not 2 digits + 1 letter (AllocationError)
# INVALID_TYPE_CODE: Product type code is not 3 uppercase letters (ConfigurationError)
# TYPE_CODE_IMMUTABLE: Attempt to change an existing product type's code (ConfigurationError)
# TOO_MANY_VARIANT_GROUPS: More than 3 variant groups on a product type (ConfigurationError)
# INVALID_SORT_ORDER: Sort order outside 0-2 (ConfigurationError)
# UNKNOWN_VARIANT_GROUP: Group not mapped to the product type (ConfigurationError)
# NOT_AUTHENTICATED: Operation requires a user
# PERMISSION_DENIED: Role cannot perform the operation
# INVALID_VARIANT_CODE: Variant code outside 00-98 or malformed
# UNKNOWN_VARIANT_CODE: Code is not an active code of the slot's variant group
# INVALID_SKU: Built SKU does not satisfy the SKU grammar
# ASC_CODE_IMMUTABLE: Attempt to change an assigned ASC code
# ALREADY_VOIDED: ASC history record already voided
