"""
Tests for ASC allocation (skuman.services.allocation, skuman.adapters).

Verifies:
- codes come back in order and never repeat
- allocator failures surface as AllocationError, never as a code
- malformed allocator output is refused
- concurrent callers never share a code
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest

from skuman.adapters import MemoryAscAllocator, SequenceAscAllocator
from skuman.codes import is_valid_asc_code
from skuman.conf import get_asc_allocator, get_setting
from skuman.exceptions import AllocationError
from skuman.models import CodeSequence
from skuman.protocols import AscAllocator
from skuman.services.allocation import allocate_artwork_code


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def memory_allocator(settings):
    settings.SKUMAN = {
        "ASC_PREFIX": "11K",
        "ASC_ALLOCATOR": "skuman.adapters.memory.MemoryAscAllocator",
    }
    return get_asc_allocator()


def _with_allocator(allocator):
    return patch("skuman.services.allocation.get_asc_allocator", return_value=allocator)


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


class TestAllocatorConfig:
    """Tests for allocator selection in skuman.conf."""

    def test_default_allocator_is_sequence(self):
        assert isinstance(get_asc_allocator(), SequenceAscAllocator)

    def test_allocator_is_singleton(self):
        assert get_asc_allocator() is get_asc_allocator()

    def test_setting_selects_allocator(self, memory_allocator):
        assert isinstance(memory_allocator, MemoryAscAllocator)

    def test_adapters_satisfy_protocol(self):
        assert isinstance(SequenceAscAllocator(), AscAllocator)
        assert isinstance(MemoryAscAllocator(), AscAllocator)

    def test_flat_setting(self, settings):
        settings.SKUMAN = {}
        settings.SKUMAN_ASC_PREFIX = "12B"
        assert get_setting("ASC_PREFIX") == "12B"

    def test_dict_wins_over_flat(self, settings):
        settings.SKUMAN = {"ASC_PREFIX": "13C"}
        settings.SKUMAN_ASC_PREFIX = "12B"
        assert get_setting("ASC_PREFIX") == "13C"

    def test_defaults(self, settings):
        settings.SKUMAN = {}
        assert get_setting("ASC_PREFIX") == "11K"
        assert get_setting("DEFAULT_ARTWORK_STATUS") == "draft"


# ═══════════════════════════════════════════════════════════════════
# Sequence allocator
# ═══════════════════════════════════════════════════════════════════


class TestSequenceAllocation:
    """Tests for allocation through the database sequence."""

    def test_first_code(self, db):
        """Scenario: first allocation in the 11K epoch is 11K001."""
        assert allocate_artwork_code() == "11K001"

    def test_sequential_codes_are_distinct(self, db):
        codes = [allocate_artwork_code() for _ in range(25)]

        assert len(set(codes)) == 25
        assert codes[0] == "11K001"
        assert codes[-1] == "11K025"
        assert all(is_valid_asc_code(c) for c in codes)

    def test_continues_from_existing_counter(self, db):
        CodeSequence.objects.create(prefix="11K", last_value=41)
        assert allocate_artwork_code() == "11K042"

    def test_new_prefix_starts_new_epoch(self, db, settings):
        allocate_artwork_code()
        settings.SKUMAN = {"ASC_PREFIX": "12A"}
        assert allocate_artwork_code() == "12A001"

    def test_exhaustion_raises(self, db):
        """Past 999 the epoch is exhausted; no 4-digit code is ever produced."""
        CodeSequence.objects.create(prefix="11K", last_value=999)

        with pytest.raises(AllocationError) as exc:
            allocate_artwork_code()

        assert exc.value.code == "SEQUENCE_EXHAUSTED"
        assert exc.value.details["prefix"] == "11K"

    def test_last_code_of_epoch(self, db):
        CodeSequence.objects.create(prefix="11K", last_value=998)
        assert allocate_artwork_code() == "11K999"

    def test_invalid_prefix(self, db, settings):
        settings.SKUMAN = {"ASC_PREFIX": "11KK"}

        with pytest.raises(AllocationError) as exc:
            allocate_artwork_code()

        assert exc.value.code == "INVALID_PREFIX"
        assert not CodeSequence.objects.exists()


# ═══════════════════════════════════════════════════════════════════
# Failure handling
# ═══════════════════════════════════════════════════════════════════


class TestAllocationFailures:
    """Tests for allocator failure surfacing."""

    def test_allocator_exception_becomes_allocation_error(self):
        """Scenario: allocator unreachable → AllocationError, no code."""
        allocator = MagicMock()
        allocator.next_code.side_effect = ConnectionError("database is down")

        with _with_allocator(allocator):
            with pytest.raises(AllocationError) as exc:
                allocate_artwork_code()

        assert exc.value.code == "ALLOCATOR_UNAVAILABLE"
        assert "database is down" in exc.value.details["error"]
        assert isinstance(exc.value.__cause__, ConnectionError)

    def test_no_retry(self):
        allocator = MagicMock()
        allocator.next_code.side_effect = RuntimeError("boom")

        with _with_allocator(allocator):
            with pytest.raises(AllocationError):
                allocate_artwork_code()

        assert allocator.next_code.call_count == 1

    def test_allocation_error_passes_through(self):
        allocator = MagicMock()
        allocator.next_code.side_effect = AllocationError("SEQUENCE_EXHAUSTED", prefix="11K")

        with _with_allocator(allocator):
            with pytest.raises(AllocationError) as exc:
                allocate_artwork_code()

        assert exc.value.code == "SEQUENCE_EXHAUSTED"

    @pytest.mark.parametrize("value", ["11K1000", "11k001", "", None, 42, "11K001\n"])
    def test_malformed_code_refused(self, value):
        """Scenario: allocator returns garbage → refused, not repaired."""
        allocator = MagicMock()
        allocator.next_code.return_value = value

        with _with_allocator(allocator):
            with pytest.raises(AllocationError) as exc:
                allocate_artwork_code()

        assert exc.value.code == "MALFORMED_CODE"

    def test_error_as_dict(self):
        error = AllocationError("MALFORMED_CODE", value="'x'")
        assert error.as_dict() == {"code": "MALFORMED_CODE", "value": "'x'"}
        assert str(error) == "AllocationError(MALFORMED_CODE: value='x')"


# ═══════════════════════════════════════════════════════════════════
# Concurrency
# ═══════════════════════════════════════════════════════════════════


class TestConcurrentAllocation:
    """Concurrent callers must receive pairwise distinct codes."""

    def test_threads_never_share_a_code(self, memory_allocator):
        """Scenario: N concurrent allocations → N distinct codes."""
        barrier = threading.Barrier(8)

        def allocate(_):
            barrier.wait()
            return [allocate_artwork_code() for _ in range(25)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(allocate, range(8)))

        codes = [code for batch in batches for code in batch]
        assert len(codes) == 200
        assert len(set(codes)) == 200
        assert all(is_valid_asc_code(c) for c in codes)

    def test_memory_allocator_exhausts(self, memory_allocator):
        for _ in range(999):
            memory_allocator.next_code()

        with pytest.raises(AllocationError) as exc:
            allocate_artwork_code()

        assert exc.value.code == "SEQUENCE_EXHAUSTED"

    def test_memory_allocator_reset(self, memory_allocator):
        allocate_artwork_code()
        memory_allocator.reset()
        assert allocate_artwork_code() == "11K001"
