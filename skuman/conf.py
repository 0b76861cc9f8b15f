"""
Skuman Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    SKUMAN = {
        "ASC_PREFIX": "11K",
        "ASC_ALLOCATOR": "skuman.adapters.sequence.SequenceAscAllocator",
    }

    # Option 2: Flat
    SKUMAN_ASC_PREFIX = "11K"
    SKUMAN_ASC_ALLOCATOR = "skuman.adapters.sequence.SequenceAscAllocator"

All settings have defaults; zero configuration required.
"""

import threading

from django.conf import settings


# ── Defaults ──

DEFAULTS = {
    "ASC_PREFIX": "11K",
    "ASC_ALLOCATOR": "skuman.adapters.sequence.SequenceAscAllocator",
    "DEFAULT_ARTWORK_STATUS": "draft",
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a skuman setting.

    Looks up in order:
    1. SKUMAN dict (e.g. SKUMAN = {"ASC_PREFIX": "..."})
    2. Flat setting (e.g. SKUMAN_ASC_PREFIX = "...")
    3. DEFAULTS
    """
    skuman_dict = getattr(settings, "SKUMAN", {})
    if name in skuman_dict:
        return skuman_dict[name]

    flat_value = getattr(settings, f"SKUMAN_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_asc_prefix() -> str:
    """Scheme prefix of the current allocation epoch (e.g. "11K")."""
    return get_setting("ASC_PREFIX")


_allocator_lock = threading.Lock()
_allocator_instance = None


def get_asc_allocator():
    """
    Return the configured ASC allocator instance.

    The allocator is the only source of new ASC codes and the only
    guarantee against duplicates under concurrent artwork creation.
    """
    global _allocator_instance

    if _allocator_instance is None:
        with _allocator_lock:
            if _allocator_instance is None:  # double-checked
                from django.utils.module_loading import import_string

                _allocator_instance = import_string(get_setting("ASC_ALLOCATOR"))()

    return _allocator_instance


def reset_asc_allocator() -> None:
    """Reset singleton (for tests)."""
    global _allocator_instance
    _allocator_instance = None
