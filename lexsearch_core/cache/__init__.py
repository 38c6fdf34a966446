"""LexSearch Cache Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsearch_core.cache.result_cache import (
    CacheEntry,
    CacheStats,
    ResultCache,
    fingerprint,
)

__all__ = [
    "CacheEntry",
    "CacheStats",
    "ResultCache",
    "fingerprint",
]
