"""Tests for the result cache."""

import threading

import pytest

from lexsearch_core.cache import ResultCache, fingerprint
from lexsearch_core.query import SearchOptions


def test_entries_expire_after_ttl(clock):
    cache = ResultCache(ttl_seconds=10, clock=clock)
    cache.put("k", ["a"])
    clock.advance(9)
    assert cache.get("k") == ["a"]
    clock.advance(1)
    assert cache.get("k") is None
    assert "k" not in cache


def test_eviction_is_first_in_first_out(clock):
    cache = ResultCache(max_entries=2, clock=clock)
    cache.put("a", [1])
    cache.put("b", [2])
    assert cache.get("a") == [1]
    cache.put("c", [3])
    assert "a" not in cache
    assert "b" in cache and "c" in cache
    assert cache.stats().evictions == 1


def test_expired_entries_do_not_count_as_evictions(clock):
    cache = ResultCache(max_entries=2, ttl_seconds=5, clock=clock)
    cache.put("a", [1])
    cache.put("b", [2])
    clock.advance(5)
    cache.put("c", [3])
    assert cache.stats().evictions == 0
    assert len(cache) == 1


def test_get_or_compute_computes_once(clock):
    cache = ResultCache(clock=clock)
    calls = []

    def compute():
        calls.append(1)
        return []

    assert cache.get_or_compute("k", compute) == []
    assert cache.get_or_compute("k", compute) == []
    assert len(calls) == 1
    stats = cache.stats()
    assert (stats.hits, stats.misses, stats.entries) == (1, 1, 1)
    assert stats.hit_rate == 0.5


def test_recompute_after_expiry(clock):
    cache = ResultCache(ttl_seconds=1, clock=clock)
    values = iter([["old"], ["new"]])
    assert cache.get_or_compute("k", lambda: next(values)) == ["old"]
    clock.advance(2)
    assert cache.get_or_compute("k", lambda: next(values)) == ["new"]


def test_clear(clock):
    cache = ResultCache(clock=clock)
    cache.put("k", [1])
    cache.clear()
    assert len(cache) == 0
    assert cache.get("k") is None


def test_zero_capacity_stores_nothing(clock):
    cache = ResultCache(max_entries=0, clock=clock)
    cache.put("k", [1])
    assert len(cache) == 0


def test_invalid_configuration():
    with pytest.raises(ValueError):
        ResultCache(max_entries=-1)
    with pytest.raises(ValueError):
        ResultCache(ttl_seconds=-1)


def test_fingerprint_normalizes_query_text():
    options = SearchOptions()
    assert fingerprint("Godišnji   Odmor ", options) == fingerprint("godišnji odmor", options)


def test_fingerprint_covers_every_option():
    base = fingerprint("odmor", SearchOptions())
    assert fingerprint("odmor", SearchOptions(section="leave")) != base
    assert fingerprint("odmor", SearchOptions(fuzzy=False)) != base
    assert fingerprint("odmor", SearchOptions(max_results=5)) != base
    assert fingerprint("odmor", SearchOptions(sort_by="date")) != base
    assert fingerprint("odmor", SearchOptions(sort_order="asc")) != base


def test_cache_stays_usable_while_computing(clock):
    cache = ResultCache(clock=clock)
    cache.put("other", ["b"])
    seen = []

    def compute():
        reader = threading.Thread(target=lambda: seen.append(cache.get("other")))
        reader.start()
        reader.join(timeout=2)
        assert not reader.is_alive()
        return ["a"]

    assert cache.get_or_compute("k", compute) == ["a"]
    assert seen == [["b"]]
    assert cache.get("k") == ["a"]
