"""
Memory ASC Allocator -- process-local counter.

Use this adapter for development or tests that should not touch the
database. Codes are unique only within one process.

Configuration:
    SKUMAN = {
        "ASC_ALLOCATOR": "skuman.adapters.memory.MemoryAscAllocator",
    }
"""

from __future__ import annotations

import threading
from collections import defaultdict

from skuman.adapters.sequence import MAX_SEQUENCE_VALUE
from skuman.codes import format_asc_code
from skuman.conf import get_asc_prefix
from skuman.exceptions import AllocationError


class MemoryAscAllocator:
    """In-memory implementation of the AscAllocator protocol."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[str, int] = defaultdict(int)

    def next_code(self) -> str:
        prefix = get_asc_prefix()
        with self._lock:
            value = self._counters[prefix] + 1
            if value > MAX_SEQUENCE_VALUE:
                raise AllocationError("SEQUENCE_EXHAUSTED", prefix=prefix, value=value)
            self._counters[prefix] = value
        return format_asc_code(prefix, value)

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
