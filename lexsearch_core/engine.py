"""LexSearch Core Engine - Main Search Engine Implementation.

The SearchEngine class is the interface collaborators use: it loads a
corpus, builds the index, reports readiness and answers searches
through the result cache.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Callable, Dict, Generator, List, Optional

from lexsearch_core.analyzers.standard import clean_word
from lexsearch_core.cache.result_cache import ResultCache, fingerprint
from lexsearch_core.corpus.document import CorpusSource, Document, load_documents
from lexsearch_core.index.builder import BuildStats, IndexBuilder
from lexsearch_core.index.inverted import InvertedIndex
from lexsearch_core.query.executor import ExecutionResult, QueryExecutor
from lexsearch_core.query.options import SearchOptions
from lexsearch_core.query.parser import BooleanOperator, QueryParser
from lexsearch_core.query.translator import QueryTranslator, TranslationTable
from lexsearch_core.ranking.highlight import Highlighter
from lexsearch_core.ranking.scorer import FieldWeights, RelevanceScorer, ScoredResult, TermWeights

logger = logging.getLogger(__name__)

NOT_READY_WARNING = "index not ready"


class EngineState(Enum):
    """Engine state enumeration."""

    INITIALIZING = auto()
    BUILDING = auto()
    READY = auto()
    ERROR = auto()


@dataclass
class SearchConfig:
    """Search engine configuration.

    Attributes:
        default_operator: Operator joining space-separated terms (AND/OR)
        default_language: Display language when no other applies
        field_weights: Field-group scoring weights
        term_weights: Clause-kind scoring weights
        cache_max_entries: Result cache capacity
        cache_ttl_seconds: Result cache entry lifetime
        batch_size: Documents indexed per batch
        slow_search_ms: Searches slower than this are reported
        highlight_pre_tag: Markup before a match
        highlight_post_tag: Markup after a match
        translate: Enable cross-language expansion
    """

    default_operator: str = "OR"
    default_language: str = "hr"
    field_weights: FieldWeights = field(default_factory=FieldWeights)
    term_weights: TermWeights = field(default_factory=TermWeights)
    cache_max_entries: int = 100
    cache_ttl_seconds: float = 3600.0
    batch_size: int = 2
    slow_search_ms: float = 250.0
    highlight_pre_tag: str = "<mark>"
    highlight_post_tag: str = "</mark>"
    translate: bool = True


@dataclass
class SearchResult:
    """Search response.

    Attributes:
        hits: Ranked results
        query: Query as submitted
        ready: False when the index was not available
        from_cache: Whether hits came from the result cache
        took_ms: Search time in milliseconds
        warnings: Diagnostics about the query and options
    """

    hits: List[ScoredResult] = field(default_factory=list)
    query: str = ""
    ready: bool = True
    from_cache: bool = False
    took_ms: float = 0.0
    warnings: List[str] = field(default_factory=list)

    @property
    def max_score(self) -> float:
        return self.hits[0].score if self.hits else 0.0

    @property
    def ids(self) -> List[str]:
        return [hit.id for hit in self.hits]

    def __len__(self) -> int:
        """Return number of hits."""
        return len(self.hits)

    def __iter__(self) -> Generator[ScoredResult, None, None]:
        """Iterate over hits."""
        yield from self.hits

    def __getitem__(self, index: int) -> ScoredResult:
        """Get hit by index."""
        return self.hits[index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "query": self.query,
            "hits": [hit.to_dict() for hit in self.hits],
            "ready": self.ready,
            "from_cache": self.from_cache,
            "took_ms": self.took_ms,
            "warnings": list(self.warnings),
        }


@dataclass
class EngineStats:
    """Engine statistics, computed on demand."""

    state: EngineState = EngineState.INITIALIZING
    document_count: int = 0
    term_count: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    cache_evictions: int = 0
    cache_entries: int = 0
    total_searches: int = 0
    avg_search_ms: float = 0.0
    build_ms: float = 0.0
    sections: int = 0
    article_types: int = 0
    avg_keywords: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "state": self.state.name,
            "document_count": self.document_count,
            "term_count": self.term_count,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "cache_evictions": self.cache_evictions,
            "cache_entries": self.cache_entries,
            "total_searches": self.total_searches,
            "avg_search_ms": self.avg_search_ms,
            "build_ms": self.build_ms,
            "sections": self.sections,
            "article_types": self.article_types,
            "avg_keywords": self.avg_keywords,
        }


@dataclass(frozen=True)
class _Snapshot:
    """A corpus together with the index built from it."""

    generation: int
    documents: Dict[str, Document]
    index: InvertedIndex
    build: BuildStats


class SearchEngine:
    """Main search engine class.

    A corpus and its index are published together as one snapshot, so
    a search sees either the previous corpus or the new one, never a
    partial index. While a build runs, searches report not-ready.
    """

    def __init__(
        self,
        documents: Optional[CorpusSource] = None,
        translations: Optional[TranslationTable] = None,
        config: Optional[SearchConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize search engine.

        Args:
            documents: Corpus to load right away
            translations: Translation table, the default legal table when None
            config: Engine configuration
            clock: Time source for cache expiry
        """
        self.config = config or SearchConfig()
        self._state = EngineState.INITIALIZING
        self._lock = threading.RLock()
        self._ready_event = threading.Event()
        self._ready_callbacks: List[Callable[["SearchEngine"], None]] = []
        self._snapshot: Optional[_Snapshot] = None
        self._generation = 0

        self._builder = IndexBuilder(batch_size=self.config.batch_size)
        self._executor = QueryExecutor(
            parser=QueryParser(BooleanOperator(self.config.default_operator.upper())),
            translator=QueryTranslator(translations),
            scorer=RelevanceScorer(
                field_weights=self.config.field_weights,
                term_weights=self.config.term_weights,
                highlighter=Highlighter(
                    self.config.highlight_pre_tag, self.config.highlight_post_tag
                ),
                default_language=self.config.default_language,
            ),
        )
        self._cache: ResultCache[List[ScoredResult]] = ResultCache(
            max_entries=self.config.cache_max_entries,
            ttl_seconds=self.config.cache_ttl_seconds,
            clock=clock,
        )

        self._search_count = 0
        self._search_time_ms = 0.0

        logger.info("Search engine initialized")
        if documents is not None:
            self.load(documents)

    @property
    def state(self) -> EngineState:
        """Get engine state."""
        return self._state

    @property
    def ready(self) -> bool:
        """Whether searches can be answered."""
        return self._state == EngineState.READY

    @property
    def translator(self) -> QueryTranslator:
        return self._executor.translator

    def load(self, documents: CorpusSource) -> None:
        """Replace the corpus and rebuild the index.

        Args:
            documents: Corpus in any shape load_documents accepts

        Raises:
            TypeError: If the corpus shape is unsupported
            ValueError: If a record has no id
        """
        docs = load_documents(documents)
        self._begin_build(len(docs))
        try:
            index = self._builder.build(docs)
        except Exception:
            self._fail_build()
            raise
        self._publish(docs, index)

    async def load_async(self, documents: CorpusSource) -> None:
        """Replace the corpus, yielding to the event loop while indexing.

        Args:
            documents: Corpus in any shape load_documents accepts
        """
        docs = load_documents(documents)
        self._begin_build(len(docs))
        try:
            index = await self._builder.build_async(docs)
        except Exception:
            self._fail_build()
            raise
        self._publish(docs, index)

    def on_ready(self, callback: Callable[["SearchEngine"], None]) -> None:
        """Register a callback run after every completed build.

        The callback also runs immediately when the engine is ready.
        """
        with self._lock:
            self._ready_callbacks.append(callback)
            ready = self.ready
        if ready:
            self._notify([callback])

    def wait_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until ready.

        Args:
            timeout: Seconds to wait, forever when None

        Returns:
            True if the engine is ready
        """
        return self._ready_event.wait(timeout)

    def search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any,
    ) -> SearchResult:
        """Search the corpus.

        Args:
            query: Query string
            options: Search options, defaults when None
            **overrides: Individual option fields to replace

        Returns:
            Search result; ready is False while no index is available
        """
        start_time = time.time()
        options = (options or SearchOptions()).with_overrides(**overrides)
        options, warnings = options.clamped()
        if not self.config.translate and options.translate:
            options = replace(options, translate=False)

        with self._lock:
            snapshot = self._snapshot if self._state == EngineState.READY else None

        if snapshot is None:
            logger.debug(f"Search before index ready: {query!r}")
            return SearchResult(
                query=query,
                ready=False,
                took_ms=(time.time() - start_time) * 1000,
                warnings=warnings + [NOT_READY_WARNING],
            )

        executions: List[ExecutionResult] = []

        def compute() -> List[ScoredResult]:
            execution = self._executor.execute(
                query, snapshot.index, snapshot.documents, options
            )
            executions.append(execution)
            return execution.results

        key = f"{snapshot.generation}:{fingerprint(query, options)}"
        hits = self._cache.get_or_compute(key, compute)
        for execution in executions:
            warnings.extend(execution.warnings)

        took_ms = (time.time() - start_time) * 1000
        if took_ms > self.config.slow_search_ms:
            logger.warning(f"Slow search {query!r}: {took_ms:.0f}ms")
            warnings.append(f"slow search: {took_ms:.0f}ms")

        with self._lock:
            self._search_count += 1
            self._search_time_ms += took_ms

        return SearchResult(
            hits=list(hits),
            query=query,
            ready=True,
            from_cache=not executions,
            took_ms=took_ms,
            warnings=warnings,
        )

    def get(self, doc_id: str) -> Optional[Document]:
        """Get a document by id."""
        snapshot = self._snapshot
        return snapshot.documents.get(doc_id) if snapshot else None

    def documents(self) -> List[Document]:
        """Get every document in corpus order."""
        snapshot = self._snapshot
        return list(snapshot.documents.values()) if snapshot else []

    def documents_in_section(self, section: str) -> List[Document]:
        """Get the documents of one section in corpus order."""
        return [doc for doc in self.documents() if doc.section == section]

    def sections(self) -> List[str]:
        """Get distinct sections, sorted."""
        return sorted({doc.section for doc in self.documents() if doc.section})

    def article_types(self) -> List[str]:
        """Get distinct article types, sorted."""
        return sorted({doc.article_type for doc in self.documents() if doc.article_type})

    def suggest(self, partial: str, max_suggestions: int = 5) -> List[str]:
        """Get completions for partially typed text.

        Index tokens starting with a single typed word come first, then
        keywords containing the typed text.

        Args:
            partial: Text typed so far
            max_suggestions: Maximum suggestions

        Returns:
            Suggestions, empty for input shorter than 2 characters
        """
        text = (partial or "").strip().lower()
        snapshot = self._snapshot
        if len(text) < 2 or snapshot is None or max_suggestions <= 0:
            return []

        suggestions: List[str] = []
        words = text.split()
        if len(words) == 1:
            prefix = clean_word(words[0])
            if len(prefix) >= 2:
                suggestions.extend(snapshot.index.prefix_terms(prefix, limit=max_suggestions))

        for doc in snapshot.documents.values():
            for keyword in doc.keywords:
                if len(suggestions) >= max_suggestions:
                    return suggestions
                if text in keyword.lower() and keyword not in suggestions:
                    suggestions.append(keyword)

        return suggestions[:max_suggestions]

    def related(self, doc_id: str, limit: int = 5) -> List[Document]:
        """Get documents related to a document.

        Same section scores 5, same article type 3, and each shared
        keyword 2. Unrelated documents are left out.

        Args:
            doc_id: Document ID
            limit: Maximum documents

        Returns:
            Related documents by score descending, ties by id
        """
        source = self.get(doc_id)
        if source is None:
            return []

        keywords = {k.lower() for k in source.keywords}
        scored = []
        for doc in self.documents():
            if doc.id == source.id:
                continue
            score = 0
            if source.section and doc.section == source.section:
                score += 5
            if source.article_type and doc.article_type == source.article_type:
                score += 3
            score += 2 * len(keywords & {k.lower() for k in doc.keywords})
            if score > 0:
                scored.append((score, doc))

        scored.sort(key=lambda x: (-x[0], x[1].id))
        return [doc for _, doc in scored[:limit]]

    def get_stats(self) -> EngineStats:
        """Get engine statistics."""
        with self._lock:
            snapshot = self._snapshot
            state = self._state
            searches = self._search_count
            search_time = self._search_time_ms

        cache = self._cache.stats()
        stats = EngineStats(
            state=state,
            cache_hits=cache.hits,
            cache_misses=cache.misses,
            cache_evictions=cache.evictions,
            cache_entries=cache.entries,
            total_searches=searches,
            avg_search_ms=search_time / searches if searches else 0.0,
        )
        if snapshot is not None:
            docs = list(snapshot.documents.values())
            stats.document_count = len(docs)
            stats.term_count = snapshot.index.term_count
            stats.build_ms = snapshot.build.took_ms
            stats.sections = len(self.sections())
            stats.article_types = len(self.article_types())
            if docs:
                stats.avg_keywords = sum(len(d.keywords) for d in docs) / len(docs)
        return stats

    def clear_cache(self) -> None:
        """Drop every cached result."""
        self._cache.clear()

    def _begin_build(self, count: int) -> None:
        with self._lock:
            self._state = EngineState.BUILDING
            self._ready_event.clear()
        logger.info(f"Building index for {count} documents")

    def _fail_build(self) -> None:
        logger.exception("Index build failed")
        with self._lock:
            if self._snapshot is not None:
                self._state = EngineState.READY
                self._ready_event.set()
            else:
                self._state = EngineState.ERROR

    def _publish(self, docs: List[Document], index: InvertedIndex) -> None:
        documents: Dict[str, Document] = {}
        for doc in docs:
            documents[doc.id] = doc

        with self._lock:
            self._generation += 1
            self._snapshot = _Snapshot(
                generation=self._generation,
                documents=documents,
                index=index,
                build=replace(self._builder.last_stats),
            )
            self._cache.clear()
            self._state = EngineState.READY
            self._ready_event.set()
            callbacks = list(self._ready_callbacks)

        logger.info(
            f"Search engine ready: {len(documents)} documents, {index.term_count} terms"
        )
        self._notify(callbacks)

    def _notify(self, callbacks: List[Callable[["SearchEngine"], None]]) -> None:
        for callback in callbacks:
            try:
                callback(self)
            except Exception:
                logger.exception(f"Ready callback {callback!r} failed")


__all__ = [
    "EngineState",
    "EngineStats",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
]
