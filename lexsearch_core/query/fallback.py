"""LexSearch Fallback Search - Relevance Tiers.

Retries a query with progressively looser options until enough hits
come back. This is a caller policy: SearchEngine.search never relaxes
options on its own.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from lexsearch_core.query.options import SearchOptions

if TYPE_CHECKING:
    from lexsearch_core.engine import SearchEngine, SearchResult

logger = logging.getLogger(__name__)

# Fewer hits than this send a query to the next tier.
MIN_DESIRED_RESULTS = 10

DEFAULT_TIERS: List[Tuple[str, SearchOptions]] = [
    ("standard", SearchOptions.standard()),
    ("relaxed", SearchOptions.relaxed()),
    ("ultra_relaxed", SearchOptions.ultra_relaxed()),
]


@dataclass
class FallbackResult:
    """Result of a tiered search."""

    result: "SearchResult"
    tier: str
    attempts: int


class FallbackSearch:
    """Runs a query through relevance tiers in order."""

    def __init__(
        self,
        engine: "SearchEngine",
        tiers: Optional[List[Tuple[str, SearchOptions]]] = None,
        min_results: int = MIN_DESIRED_RESULTS,
    ):
        """Initialize fallback search.

        Args:
            engine: Engine to search
            tiers: (name, options) pairs, strictest first
            min_results: Hits that satisfy a tier

        Raises:
            ValueError: If no tiers are given
        """
        self.engine = engine
        self.tiers = list(tiers) if tiers is not None else list(DEFAULT_TIERS)
        if not self.tiers:
            raise ValueError("FallbackSearch needs at least one tier")
        self.min_results = min_results

    def search(self, query: str, **overrides: Any) -> FallbackResult:
        """Search tier by tier.

        Stops at the first tier returning at least min_results hits.
        When none does, the tier with the most hits wins, the earlier
        one on a tie.

        Args:
            query: Query string
            **overrides: Option fields applied to every tier

        Returns:
            Winning tier and its result
        """
        best: Optional[FallbackResult] = None
        for attempt, (name, options) in enumerate(self.tiers, start=1):
            result = self.engine.search(query, options, **overrides)
            if not result.ready:
                return FallbackResult(result=result, tier=name, attempts=attempt)

            if best is None or len(result) > len(best.result):
                best = FallbackResult(result=result, tier=name, attempts=attempt)
            if len(result) >= self.min_results:
                break
            logger.debug(f"Tier {name} returned {len(result)} hits for {query!r}")

        best.attempts = attempt
        return best


__all__ = ["DEFAULT_TIERS", "FallbackResult", "FallbackSearch", "MIN_DESIRED_RESULTS"]
