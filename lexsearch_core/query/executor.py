"""LexSearch Query Executor - Query Execution Pipeline.

Runs one search over a built index: parse the raw string, attach
translations, then score and rank. Records timing per phase and the
diagnostics collected along the way.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Mapping, Optional

from lexsearch_core.corpus.document import Document
from lexsearch_core.index.inverted import InvertedIndex
from lexsearch_core.query.options import SearchOptions
from lexsearch_core.query.parser import QueryParser, StructuredQuery
from lexsearch_core.query.translator import QueryTranslator
from lexsearch_core.ranking.scorer import RelevanceScorer, ScoredResult

logger = logging.getLogger(__name__)


class ExecutionPhase(Enum):
    """Query execution phases."""

    PARSE = auto()
    TRANSLATE = auto()
    SCORE = auto()


@dataclass
class ExecutionStats:
    """Statistics about query execution.

    Attributes:
        total_hits: Hits returned
        phase_times: Milliseconds spent in each phase
        alternatives: Translated alternatives attached
    """

    total_hits: int = 0
    phase_times: Dict[str, float] = field(default_factory=dict)
    alternatives: int = 0

    def add_phase_time(self, phase: ExecutionPhase, time_ms: float) -> None:
        """Record time for execution phase."""
        self.phase_times[phase.name] = time_ms

    @property
    def took_ms(self) -> float:
        return sum(self.phase_times.values())


@dataclass
class ExecutionResult:
    """Ranked results of one execution with its diagnostics."""

    results: List[ScoredResult]
    query: StructuredQuery
    stats: ExecutionStats
    warnings: List[str] = field(default_factory=list)


class QueryExecutor:
    """Executes raw queries against an index."""

    def __init__(
        self,
        parser: Optional[QueryParser] = None,
        translator: Optional[QueryTranslator] = None,
        scorer: Optional[RelevanceScorer] = None,
    ):
        """Initialize executor.

        Args:
            parser: Query parser
            translator: Cross-language expansion
            scorer: Relevance scorer
        """
        self.parser = parser or QueryParser()
        self.translator = translator or QueryTranslator()
        self.scorer = scorer or RelevanceScorer()

    def execute(
        self,
        raw_query: str,
        index: InvertedIndex,
        documents: Mapping[str, Document],
        options: Optional[SearchOptions] = None,
    ) -> ExecutionResult:
        """Execute a query.

        Args:
            raw_query: Query as typed
            index: Built index
            documents: Corpus by id
            options: Valid search options

        Returns:
            Execution result
        """
        options = options or SearchOptions()
        stats = ExecutionStats()

        start = time.time()
        query = self.parser.parse(raw_query)
        stats.add_phase_time(ExecutionPhase.PARSE, (time.time() - start) * 1000)

        if options.translate:
            start = time.time()
            self.translator.expand(query)
            stats.alternatives = sum(len(v) for v in query.alternatives.values())
            stats.add_phase_time(ExecutionPhase.TRANSLATE, (time.time() - start) * 1000)

        start = time.time()
        results = self.scorer.score(query, index, documents, options)
        stats.add_phase_time(ExecutionPhase.SCORE, (time.time() - start) * 1000)
        stats.total_hits = len(results)

        logger.debug(
            f"Executed {raw_query!r}: {stats.total_hits} hits in {stats.took_ms:.1f}ms"
        )
        return ExecutionResult(
            results=results,
            query=query,
            stats=stats,
            warnings=list(query.warnings),
        )


__all__ = [
    "ExecutionPhase",
    "ExecutionResult",
    "ExecutionStats",
    "QueryExecutor",
]
