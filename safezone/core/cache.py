"""Single-slot alert cache.

Holds at most one resolved AlertRecord for a bounded window. The clock is
injected so staleness can be driven deterministically in tests. No I/O.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable

from cachetools import TTLCache

from safezone.core.alert import AlertRecord


# Default cache window (seconds)
DEFAULT_CACHE_DURATION = 15 * 60

_SLOT = "alert"


@dataclass(frozen=True)
class CacheEntry:
    """A cached record and the clock reading when it was stored.

    Attributes:
        data: The cached AlertRecord
        timestamp: Clock value at store time
    """
    data: AlertRecord
    timestamp: float

    def is_valid(self, now: float, duration_seconds: float) -> bool:
        """Check whether the entry is still fresh at `now`."""
        return now - self.timestamp < duration_seconds


class AlertCache:
    """Process-wide, single-slot cache for the resolved alert.

    An entry is usable while `now - timestamp < duration_seconds`; after
    that it is treated as absent.
    """

    def __init__(
        self,
        duration_seconds: float = DEFAULT_CACHE_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            duration_seconds: How long a stored record stays valid
            clock: Monotonic time source in seconds
        """
        self.duration_seconds = duration_seconds
        self.clock = clock
        self._lock = threading.Lock()
        self._store: TTLCache = TTLCache(
            maxsize=1,
            ttl=duration_seconds,
            timer=clock,
        )

    def entry(self) -> CacheEntry | None:
        """Return the current entry, or None if empty or stale."""
        with self._lock:
            entry = self._store.get(_SLOT)
        if entry is None or not entry.is_valid(self.clock(), self.duration_seconds):
            return None
        return entry

    def get(self) -> AlertRecord | None:
        """Return the cached record, or None if empty or stale."""
        entry = self.entry()
        return entry.data if entry is not None else None

    def put(self, record: AlertRecord) -> None:
        """Store a record, replacing any previous one."""
        with self._lock:
            self._store[_SLOT] = CacheEntry(data=record, timestamp=self.clock())
