"""
Skuman Adapters.

Implementations of the AscAllocator protocol.
Select one with the ASC_ALLOCATOR setting.
"""

from skuman.adapters.memory import MemoryAscAllocator
from skuman.adapters.sequence import SequenceAscAllocator

__all__ = [
    "SequenceAscAllocator",
    "MemoryAscAllocator",
]
