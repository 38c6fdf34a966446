"""LexSearch Search Options - Per-Request Search Settings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from lexsearch_core.corpus.document import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 25
DEFAULT_MIN_RELEVANCE = 0.0001
DEFAULT_FUZZY_THRESHOLD = 0.5

SORT_FIELDS = ("relevance", "date", "title")
SORT_ORDERS = ("desc", "asc")


@dataclass(frozen=True)
class SearchOptions:
    """Filters and thresholds for one search.

    Attributes:
        max_results: Maximum hits returned
        min_relevance: Hits scoring below this are dropped
        fuzzy_threshold: Minimum similarity for a fuzzy token match
        section: Only return documents in this section
        article_type: Only return documents of this article type
        target_language: Language of the highlighted text
        translate: Expand terms across languages
        fuzzy: Allow approximate token matches
        sort_by: One of SORT_FIELDS; ties always fall back to id
        sort_order: "desc" or "asc"
    """

    max_results: int = DEFAULT_MAX_RESULTS
    min_relevance: float = DEFAULT_MIN_RELEVANCE
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    section: Optional[str] = None
    article_type: Optional[str] = None
    target_language: Optional[str] = None
    translate: bool = True
    fuzzy: bool = True
    sort_by: str = "relevance"
    sort_order: str = "desc"

    @classmethod
    def standard(cls, **overrides: Any) -> "SearchOptions":
        """Default tier."""
        return cls(**overrides)

    @classmethod
    def relaxed(cls, **overrides: Any) -> "SearchOptions":
        """Wider tier for queries with few standard hits."""
        values = dict(max_results=35, min_relevance=0.00001, fuzzy_threshold=0.4)
        values.update(overrides)
        return cls(**values)

    @classmethod
    def ultra_relaxed(cls, **overrides: Any) -> "SearchOptions":
        """Widest tier."""
        values = dict(max_results=45, min_relevance=0.000001, fuzzy_threshold=0.4)
        values.update(overrides)
        return cls(**values)

    @classmethod
    def auto_search(cls, **overrides: Any) -> "SearchOptions":
        """Short, strict result list for search-as-you-type."""
        values = dict(max_results=8, min_relevance=0.1, fuzzy_threshold=0.5)
        values.update(overrides)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "SearchOptions":
        """Copy with some fields replaced.

        Raises:
            TypeError: If an override names an unknown field
        """
        return replace(self, **overrides) if overrides else self

    def clamped(self) -> Tuple["SearchOptions", List[str]]:
        """Replace invalid values with safe ones.

        Returns:
            (valid options, one warning per replaced value)
        """
        warnings: List[str] = []
        changes: Dict[str, Any] = {}

        max_results = self.max_results
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results <= 0:
            warnings.append(
                f"Invalid max_results {max_results!r}, using {DEFAULT_MAX_RESULTS}"
            )
            changes["max_results"] = DEFAULT_MAX_RESULTS

        if not _is_finite(self.min_relevance) or self.min_relevance < 0:
            warnings.append(f"Invalid min_relevance {self.min_relevance!r}, using 0")
            changes["min_relevance"] = 0.0

        threshold = self.fuzzy_threshold
        if not _is_finite(threshold) or threshold <= 0:
            warnings.append(
                f"Invalid fuzzy_threshold {threshold!r}, using {DEFAULT_FUZZY_THRESHOLD}"
            )
            changes["fuzzy_threshold"] = DEFAULT_FUZZY_THRESHOLD
        elif threshold > 1:
            warnings.append(f"fuzzy_threshold {threshold!r} above 1, using 1.0")
            changes["fuzzy_threshold"] = 1.0

        language = self.target_language
        if language is not None:
            code = str(language).lower()
            if code not in SUPPORTED_LANGUAGES:
                warnings.append(f"Unknown target_language {language!r}, ignoring it")
                changes["target_language"] = None
            elif code != language:
                changes["target_language"] = code

        # a blank filter means "any", as sent by an unselected dropdown
        for name in ("section", "article_type"):
            value = getattr(self, name)
            if value is not None and not str(value).strip():
                changes[name] = None

        for name, allowed in (("sort_by", SORT_FIELDS), ("sort_order", SORT_ORDERS)):
            value = getattr(self, name)
            code = str(value).lower()
            if code not in allowed:
                warnings.append(f"Unknown {name} {value!r}, using {allowed[0]}")
                changes[name] = allowed[0]
            elif code != value:
                changes[name] = code

        for warning in warnings:
            logger.warning(warning)
        return replace(self, **changes) if changes else self, warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def _is_finite(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


__all__ = [
    "DEFAULT_FUZZY_THRESHOLD",
    "DEFAULT_MAX_RESULTS",
    "DEFAULT_MIN_RELEVANCE",
    "SORT_FIELDS",
    "SORT_ORDERS",
    "SearchOptions",
]
