"""LexSearch Fuzzy Matcher - Approximate Token Similarity.

Similarity is ``(longer - edit_distance) / longer`` with unit-cost
Levenshtein distance. A token matches fuzzily when its similarity is
at least the threshold (inclusive).

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple


def edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance."""
    if len(s1) < len(s2):
        return edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(a: str, b: str) -> float:
    """Similarity of two strings in [0, 1]; two empty strings are identical."""
    longer = max(len(a), len(b))
    if longer == 0:
        return 1.0
    return (longer - edit_distance(a, b)) / longer


class FuzzyMatcher:
    """Finds vocabulary tokens similar to a query term."""

    def __init__(self, threshold: float = 0.5):
        """Initialize matcher.

        Args:
            threshold: Default minimum similarity
        """
        self.threshold = threshold

    def is_match(self, a: str, b: str, threshold: Optional[float] = None) -> bool:
        """Check whether two tokens match at the threshold."""
        limit = self.threshold if threshold is None else threshold
        return similarity(a, b) >= limit

    def candidates(
        self,
        term: str,
        vocabulary: Iterable[str],
        threshold: Optional[float] = None,
    ) -> List[Tuple[str, float]]:
        """Find every vocabulary token within the threshold.

        Args:
            term: Query term
            vocabulary: Candidate tokens
            threshold: Minimum similarity, defaults to the matcher's

        Returns:
            (token, similarity) pairs, most similar first, ties by token
        """
        limit = self.threshold if threshold is None else threshold
        results = []
        for token in vocabulary:
            # Length difference alone bounds the best achievable similarity.
            longer = max(len(term), len(token))
            if longer and (longer - abs(len(term) - len(token))) / longer < limit:
                continue
            score = similarity(term, token)
            if score >= limit:
                results.append((token, score))

        results.sort(key=lambda x: (-x[1], x[0]))
        return results


__all__ = ["FuzzyMatcher", "edit_distance", "similarity"]
