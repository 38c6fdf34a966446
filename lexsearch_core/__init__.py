"""LexSearch - Multilingual Legal Article Search for BlackRoad OS.

Full-text search over a small corpus of legal articles kept in
Croatian, English and Spanish, tolerant of typos and of queries typed
in a different language than the article that answers them.

Architecture:
┌─────────────────────────────────────────────────────────────────────┐
│                          LexSearch Engine                           │
├─────────────────────────────────────────────────────────────────────┤
│                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐   │
│   │                      Query Pipeline                         │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐             │   │
│   │  │   Parse    │→ │ Translate  │→ │   Score    │             │   │
│   │  └────────────┘  └────────────┘  └────────────┘             │   │
│   └─────────────────────────────────────────────────────────────┘   │
│                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐   │
│   │                      Index Layer                            │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐             │   │
│   │  │ Normalizer │  │  Inverted  │  │   Corpus   │             │   │
│   │  │            │  │   Index    │  │  Snapshot  │             │   │
│   │  └────────────┘  └────────────┘  └────────────┘             │   │
│   └─────────────────────────────────────────────────────────────┘   │
│                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐   │
│   │                      Ranking & Caching                      │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐             │   │
│   │  │   Fuzzy    │  │   Field    │  │   Result   │             │   │
│   │  │  Matcher   │  │  Weights   │  │   Cache    │             │   │
│   │  └────────────┘  └────────────┘  └────────────┘             │   │
│   └─────────────────────────────────────────────────────────────┘   │
│                                                                     │
└─────────────────────────────────────────────────────────────────────┘

Key Features:
- Boolean, phrase and wildcard query syntax
- Cross-language query expansion from a term dictionary
- Levenshtein fuzzy matching with a configurable threshold
- Field-weighted relevance normalized to [0, 1]
- TTL result cache with FIFO eviction
- Non-blocking index builds with readiness callbacks

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from lexsearch_core.engine import (
    EngineState,
    EngineStats,
    SearchConfig,
    SearchEngine,
    SearchResult,
)

# Corpus
from lexsearch_core.corpus import (
    Document,
    FieldGroup,
    load_documents,
    sample_documents,
)

# Index components
from lexsearch_core.index import (
    BuildStats,
    IndexBuilder,
    InvertedIndex,
)

# Query components
from lexsearch_core.query import (
    FallbackSearch,
    QueryExecutor,
    QueryParser,
    QueryTranslator,
    SearchOptions,
    StructuredQuery,
    TranslationTable,
    default_translation_table,
)

# Analyzers
from lexsearch_core.analyzers import (
    Analyzer,
    LegalTextAnalyzer,
    Token,
    TokenStream,
    normalize,
)

# Ranking
from lexsearch_core.ranking import (
    FieldWeights,
    FuzzyMatcher,
    Highlighter,
    RelevanceScorer,
    ScoredResult,
    TermWeights,
    similarity,
)

# Cache
from lexsearch_core.cache import ResultCache, fingerprint

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "EngineState",
    "EngineStats",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    # Corpus
    "Document",
    "FieldGroup",
    "load_documents",
    "sample_documents",
    # Index
    "BuildStats",
    "IndexBuilder",
    "InvertedIndex",
    # Query
    "FallbackSearch",
    "QueryExecutor",
    "QueryParser",
    "QueryTranslator",
    "SearchOptions",
    "StructuredQuery",
    "TranslationTable",
    "default_translation_table",
    # Analyzers
    "Analyzer",
    "LegalTextAnalyzer",
    "Token",
    "TokenStream",
    "normalize",
    # Ranking
    "FieldWeights",
    "FuzzyMatcher",
    "Highlighter",
    "RelevanceScorer",
    "ScoredResult",
    "TermWeights",
    "similarity",
    # Cache
    "ResultCache",
    "fingerprint",
]
