"""Unit tests for the single-slot alert cache.

A fake clock drives staleness deterministically.
"""

import pytest

from safezone.core.alert import build_alert_record
from safezone.core.cache import AlertCache, CacheEntry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def record():
    return build_alert_record(2, "2026-01-10", "PHIVOLCS (WOVOdat)")


class TestCacheEntry:
    """Tests for CacheEntry.is_valid()."""

    def test_valid_inside_window(self, record):
        entry = CacheEntry(data=record, timestamp=100.0)

        assert entry.is_valid(now=999.0, duration_seconds=900) is True

    def test_invalid_at_window_edge(self, record):
        """Staleness starts when age equals the duration."""
        entry = CacheEntry(data=record, timestamp=100.0)

        assert entry.is_valid(now=1000.0, duration_seconds=900) is False


class TestAlertCache:
    """Tests for AlertCache get/put."""

    def test_empty_cache_returns_none(self, clock):
        cache = AlertCache(duration_seconds=900, clock=clock)

        assert cache.get() is None
        assert cache.entry() is None

    def test_returns_stored_record(self, clock, record):
        cache = AlertCache(duration_seconds=900, clock=clock)
        cache.put(record)

        clock.advance(60)

        assert cache.get() == record

    def test_entry_records_timestamp(self, clock, record):
        cache = AlertCache(duration_seconds=900, clock=clock)
        cache.put(record)

        assert cache.entry().timestamp == 1000.0

    def test_stale_record_is_absent(self, clock, record):
        cache = AlertCache(duration_seconds=900, clock=clock)
        cache.put(record)

        clock.advance(901)

        assert cache.get() is None

    def test_put_replaces_previous_record(self, clock, record):
        cache = AlertCache(duration_seconds=900, clock=clock)
        cache.put(record)
        newer = build_alert_record(3, "2026-01-12", "PHIVOLCS (Website)")

        cache.put(newer)

        assert cache.get() == newer

    def test_put_after_expiry_restarts_window(self, clock, record):
        cache = AlertCache(duration_seconds=900, clock=clock)
        cache.put(record)
        clock.advance(1000)
        cache.put(record)

        clock.advance(899)

        assert cache.get() == record
