"""LexSearch Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsearch_core.query.executor import (
    ExecutionPhase,
    ExecutionResult,
    ExecutionStats,
    QueryExecutor,
)
from lexsearch_core.query.fallback import FallbackResult, FallbackSearch
from lexsearch_core.query.options import SearchOptions
from lexsearch_core.query.parser import (
    BooleanOperator,
    Occur,
    QueryLexer,
    QueryParser,
    StructuredQuery,
    WildcardKind,
    WildcardPattern,
)
from lexsearch_core.query.translator import (
    QueryTranslator,
    TranslationTable,
    default_translation_table,
)

__all__ = [
    "BooleanOperator",
    "ExecutionPhase",
    "ExecutionResult",
    "ExecutionStats",
    "FallbackResult",
    "FallbackSearch",
    "Occur",
    "QueryExecutor",
    "QueryLexer",
    "QueryParser",
    "QueryTranslator",
    "SearchOptions",
    "StructuredQuery",
    "TranslationTable",
    "WildcardKind",
    "WildcardPattern",
    "default_translation_table",
]
