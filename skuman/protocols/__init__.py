"""
Skuman Protocols.

Defines interfaces for external integrations.
"""

from skuman.protocols.allocator import AscAllocator

__all__ = [
    # Allocator Protocol
    "AscAllocator",
]
