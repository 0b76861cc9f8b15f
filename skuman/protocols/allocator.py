"""
ASC Allocator Protocol: interface for atomic artwork-code allocation.

Skuman defines this protocol; a database sequence (the default adapter),
a remote RPC or any compare-and-swap counter implements it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AscAllocator(Protocol):
    """
    Protocol for ASC code allocation.

    Implementations must guarantee, across all concurrent callers:
    - every returned code is unique
    - the 3-digit suffix strictly increases within a prefix
    - a call either returns a complete code or raises
    """

    def next_code(self) -> str:
        """
        Allocate the next ASC code.

        Returns:
            Fresh ASC code, e.g. "11K042"

        Raises:
            AllocationError (or any exception) when no code can be issued
        """
        ...
