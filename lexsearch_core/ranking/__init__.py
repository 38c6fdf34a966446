"""LexSearch Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsearch_core.ranking.fuzzy import FuzzyMatcher, edit_distance, similarity
from lexsearch_core.ranking.highlight import Highlighter
from lexsearch_core.ranking.scorer import (
    FieldWeights,
    RelevanceScorer,
    ScoredResult,
    TermGroup,
    TermWeights,
    Variant,
    sort_results,
)

__all__ = [
    "FieldWeights",
    "FuzzyMatcher",
    "Highlighter",
    "RelevanceScorer",
    "ScoredResult",
    "TermGroup",
    "TermWeights",
    "Variant",
    "edit_distance",
    "similarity",
    "sort_results",
]
