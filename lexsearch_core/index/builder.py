"""LexSearch Index Builder - Corpus Indexing.

Builds an InvertedIndex from an ordered document sequence. Documents
are processed in small batches; the async variant yields to the event
loop between batches so a host loop stays responsive while a corpus
loads. Batch size never changes the resulting index.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from lexsearch_core.analyzers.base import Analyzer
from lexsearch_core.analyzers.standard import LegalTextAnalyzer
from lexsearch_core.corpus.document import Document, FieldGroup
from lexsearch_core.index.inverted import InvertedIndex

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics about one index build.

    Attributes:
        documents: Documents indexed
        skipped: Documents that failed analysis
        duplicates: Records replaced by a later record with the same id
        batches: Batches processed
        term_count: Unique tokens in the index
        took_ms: Build time in milliseconds
    """

    documents: int = 0
    skipped: int = 0
    duplicates: int = 0
    batches: int = 0
    term_count: int = 0
    took_ms: float = 0.0


class IndexBuilder:
    """Constructs inverted indexes with a shared analyzer."""

    def __init__(
        self,
        batch_size: int = 2,
        analyzer: Optional[Analyzer] = None,
    ):
        """Initialize builder.

        Args:
            batch_size: Documents per batch
            analyzer: Normalizer applied to every field

        Raises:
            ValueError: If batch_size is not positive
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.batch_size = batch_size
        self._analyzer = analyzer or LegalTextAnalyzer()
        self._last_stats = BuildStats()

    @property
    def last_stats(self) -> BuildStats:
        """Statistics of the most recent build."""
        return self._last_stats

    def iter_batches(self, documents: Sequence[Document]) -> Iterator[List[Document]]:
        """Split documents into batches, resolving duplicate ids.

        When two documents share an id the later one wins but keeps the
        position of the first.

        Args:
            documents: Documents to index

        Yields:
            Lists of at most batch_size documents
        """
        unique: Dict[str, Document] = {}
        for doc in documents:
            if doc.id in unique:
                logger.warning(f"Duplicate document id {doc.id}, keeping the later record")
                self._last_stats.duplicates += 1
            unique[doc.id] = doc

        ordered = list(unique.values())
        for i in range(0, len(ordered), self.batch_size):
            yield ordered[i:i + self.batch_size]

    def build(self, documents: Sequence[Document]) -> InvertedIndex:
        """Build an index synchronously.

        Args:
            documents: Documents to index

        Returns:
            Completed index
        """
        start_time = time.time()
        self._last_stats = BuildStats()
        index = InvertedIndex()

        for batch in self.iter_batches(documents):
            self._index_batch(index, batch)

        return self._finish(index, start_time)

    async def build_async(self, documents: Sequence[Document]) -> InvertedIndex:
        """Build an index, yielding to the event loop between batches.

        Args:
            documents: Documents to index

        Returns:
            Completed index
        """
        start_time = time.time()
        self._last_stats = BuildStats()
        index = InvertedIndex()

        for batch in self.iter_batches(documents):
            self._index_batch(index, batch)
            await asyncio.sleep(0)

        return self._finish(index, start_time)

    def _index_batch(self, index: InvertedIndex, batch: List[Document]) -> None:
        """Index one batch; a failing document is logged and skipped."""
        self._last_stats.batches += 1
        for doc in batch:
            try:
                analyzed = self._analyze_document(doc)
            except Exception:
                logger.exception(f"Failed to index document {doc.id}, skipping")
                self._last_stats.skipped += 1
                continue

            for field_name, group, tokens in analyzed:
                index.add_field(doc.id, field_name, group, tokens)
            self._last_stats.documents += 1

    def _analyze_document(self, doc: Document) -> List[Tuple[str, FieldGroup, List[str]]]:
        """Normalize every field before anything is written to the index."""
        return [
            (f.name, f.group, self._analyzer.get_terms(f.text))
            for f in doc.iter_fields()
        ]

    def _finish(self, index: InvertedIndex, start_time: float) -> InvertedIndex:
        self._last_stats.term_count = index.term_count
        self._last_stats.took_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Index built: {self._last_stats.documents} documents, "
            f"{self._last_stats.term_count} terms in {self._last_stats.took_ms:.1f}ms"
        )
        return index


__all__ = ["IndexBuilder", "BuildStats"]
