"""Tests for tiered fallback search."""

import pytest

from lexsearch_core import SearchEngine, SearchOptions
from lexsearch_core.query import FallbackSearch


def test_stops_at_first_sufficient_tier(engine):
    outcome = FallbackSearch(engine, min_results=1).search("odmor")
    assert outcome.tier == "standard"
    assert outcome.attempts == 1
    assert outcome.result.hits


def test_best_tier_when_none_is_sufficient(engine):
    outcome = FallbackSearch(engine).search("odmor")
    assert outcome.attempts == 3
    counts = [
        len(engine.search("odmor", preset()))
        for preset in (SearchOptions.standard, SearchOptions.relaxed, SearchOptions.ultra_relaxed)
    ]
    assert len(outcome.result) == max(counts)
    assert outcome.tier == ["standard", "relaxed", "ultra_relaxed"][counts.index(max(counts))]


def test_overrides_apply_to_every_tier(engine):
    outcome = FallbackSearch(engine).search("dana", section="termination")
    assert outcome.result.ids == ["art_007"]


def test_not_ready_stops_immediately():
    outcome = FallbackSearch(SearchEngine()).search("odmor")
    assert not outcome.result.ready
    assert outcome.attempts == 1


def test_needs_tiers(engine):
    with pytest.raises(ValueError):
        FallbackSearch(engine, tiers=[])
