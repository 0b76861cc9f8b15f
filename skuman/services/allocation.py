"""
Allocation service -- obtain a fresh ASC code from the configured allocator.

The allocator (skuman.conf.get_asc_allocator) is the single source of
truth for ASC suffixes. This module only checks what comes back: a code
that does not match the ASC grammar is refused, never repaired, and no
call is ever retried here.
"""

import logging

from skuman.codes import is_valid_asc_code
from skuman.conf import get_asc_allocator
from skuman.exceptions import AllocationError

logger = logging.getLogger(__name__)


def allocate_artwork_code() -> str:
    """
    Allocate a new, never-issued ASC code.

    Returns:
        ASC code as returned by the allocator, e.g. "11K042"

    Raises:
        AllocationError: allocator failed or returned a malformed value
    """
    allocator = get_asc_allocator()

    try:
        code = allocator.next_code()
    except AllocationError:
        raise
    except Exception as e:
        logger.error(
            f"ASC allocator {type(allocator).__name__} failed: {e}",
            extra={"allocator": type(allocator).__name__},
        )
        raise AllocationError(
            "ALLOCATOR_UNAVAILABLE",
            allocator=type(allocator).__name__,
            error=str(e),
        ) from e

    if not is_valid_asc_code(code):
        logger.error(
            f"ASC allocator returned malformed code {code!r}",
            extra={"allocator": type(allocator).__name__, "code": repr(code)},
        )
        raise AllocationError("MALFORMED_CODE", value=repr(code))

    logger.info(f"ASC code {code} allocated", extra={"asc_code": code})
    return code
