"""LexSearch Result Cache - Memoized Search Results.

Entries expire after a fixed time-to-live. When the cache is full the
oldest-inserted entry is evicted, regardless of how recently it was
read. The whole cache is cleared whenever the corpus is reloaded.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from lexsearch_core.query.options import SearchOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fingerprint(query: str, options: SearchOptions) -> str:
    """Cache key for a query and its options.

    Queries differing only in case or spacing share a key.
    """
    key_data = json.dumps(
        {"query": " ".join((query or "").lower().split()), "options": options.to_dict()},
        sort_keys=True,
        ensure_ascii=False,
    )
    return hashlib.md5(key_data.encode("utf-8")).hexdigest()


@dataclass
class CacheEntry(Generic[T]):
    """Cached value with its expiry time."""

    value: T
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class CacheStats:
    """Cache counters."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    entries: int = 0

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class ResultCache(Generic[T]):
    """TTL cache with first-in first-out eviction."""

    def __init__(
        self,
        max_entries: int = 100,
        ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize cache.

        Args:
            max_entries: Capacity; 0 disables storing
            ttl_seconds: Entry lifetime
            clock: Time source in seconds

        Raises:
            ValueError: If max_entries or ttl_seconds is negative
        """
        if max_entries < 0:
            raise ValueError(f"max_entries must not be negative, got {max_entries}")
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must not be negative, got {ttl_seconds}")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry[T]]" = OrderedDict()
        self._stats = CacheStats()
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[T]:
        """Get a live entry, counting a hit or a miss."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.is_expired(self._clock()):
                del self._entries[key]
                entry = None
            if entry is None:
                self._stats.misses += 1
                return None
            self._stats.hits += 1
            return entry.value

    def put(self, key: str, value: T) -> None:
        """Store a value with a fresh time-to-live."""
        with self._lock:
            if self.max_entries == 0:
                return
            self._entries.pop(key, None)
            self._purge_expired()
            while len(self._entries) >= self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(f"Evicted cache entry {evicted}")
            self._entries[key] = CacheEntry(value, self._clock() + self.ttl_seconds)

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute and store it.

        Args:
            key: Fingerprint
            compute_fn: Produces the value on a miss

        Returns:
            Cached or freshly computed value

        Concurrent misses on one key may each compute; the last put wins.
        """
        value = self.get(key)
        if value is not None:
            logger.debug(f"Cache hit for {key}")
            return value
        value = compute_fn()
        self.put(key, value)
        return value

    def clear(self) -> None:
        """Drop every entry; counters are kept."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Result cache cleared ({count} entries)")

    def stats(self) -> CacheStats:
        """Snapshot of the counters."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                entries=len(self._entries),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and not entry.is_expired(self._clock())

    def _purge_expired(self) -> None:
        now = self._clock()
        for key in [k for k, e in self._entries.items() if e.is_expired(now)]:
            del self._entries[key]


__all__ = [
    "CacheEntry",
    "CacheStats",
    "ResultCache",
    "fingerprint",
]
