"""LexSearch Analyzers - Text Normalization Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsearch_core.analyzers.base import (
    Analyzer,
    Token,
    TokenStream,
    Tokenizer,
    TokenFilter,
    get_analyzer,
    register_analyzer,
)
from lexsearch_core.analyzers.filters import (
    AlphanumericFilter,
    LengthFilter,
    LowercaseFilter,
)
from lexsearch_core.analyzers.standard import (
    LegalTextAnalyzer,
    MIN_TOKEN_LENGTH,
    analyze,
    clean_word,
    normalize,
)
from lexsearch_core.analyzers.tokenizers import WhitespaceTokenizer

__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "get_analyzer",
    "register_analyzer",
    "AlphanumericFilter",
    "LengthFilter",
    "LowercaseFilter",
    "LegalTextAnalyzer",
    "MIN_TOKEN_LENGTH",
    "analyze",
    "clean_word",
    "normalize",
    "WhitespaceTokenizer",
]
