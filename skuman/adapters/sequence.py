"""
Sequence ASC Allocator -- issues ASC codes from a CodeSequence row.

Default allocator. Atomicity comes from CodeSequence.next_value()
(SELECT FOR UPDATE inside a transaction), so concurrent artwork
creations against the same database never share a code.

Configuration:
    SKUMAN = {
        "ASC_ALLOCATOR": "skuman.adapters.sequence.SequenceAscAllocator",
        "ASC_PREFIX": "11K",
    }
"""

from __future__ import annotations

import logging

from skuman.codes import SEQUENCE_DIGITS, format_asc_code, is_valid_asc_prefix
from skuman.conf import get_asc_prefix
from skuman.exceptions import AllocationError

logger = logging.getLogger(__name__)

MAX_SEQUENCE_VALUE = 10**SEQUENCE_DIGITS - 1


class SequenceAscAllocator:
    """
    AscAllocator backed by the skuman_code_sequence table.

    One counter per prefix epoch; the prefix is read from settings on
    every call so a new epoch starts as soon as ASC_PREFIX changes.
    """

    def next_code(self) -> str:
        from skuman.models import CodeSequence

        prefix = get_asc_prefix()
        if not is_valid_asc_prefix(prefix):
            raise AllocationError("INVALID_PREFIX", prefix=prefix)

        value = CodeSequence.next_value(prefix)
        if value > MAX_SEQUENCE_VALUE:
            logger.error(
                f"ASC sequence {prefix} exhausted at {value}",
                extra={"prefix": prefix, "value": value},
            )
            raise AllocationError("SEQUENCE_EXHAUSTED", prefix=prefix, value=value)

        return format_asc_code(prefix, value)
