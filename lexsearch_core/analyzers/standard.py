"""LexSearch Standard Analyzers - Pre-configured Analyzers.

The legal-text analyzer is the single normalizer used for documents and
queries in every supported language. It never stems, so index keys stay
character-stable across Croatian, English and Spanish.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List, Optional

from lexsearch_core.analyzers.base import (
    Analyzer,
    TokenStream,
    get_analyzer,
    register_analyzer,
)
from lexsearch_core.analyzers.tokenizers import WhitespaceTokenizer
from lexsearch_core.analyzers.filters import (
    AlphanumericFilter,
    LengthFilter,
    LowercaseFilter,
)

# Tokens shorter than this carry no search signal ("o", "na", "de", "of").
MIN_TOKEN_LENGTH = 3


@register_analyzer("legal")
class LegalTextAnalyzer(Analyzer):
    """Whitespace split, lowercase, strip punctuation, drop short tokens."""

    def __init__(self, min_token_length: int = MIN_TOKEN_LENGTH):
        """Initialize legal text analyzer.

        Args:
            min_token_length: Shortest token kept
        """
        super().__init__(
            tokenizer=WhitespaceTokenizer(),
            token_filters=[
                LowercaseFilter(),
                AlphanumericFilter(),
                LengthFilter(min_length=min_token_length),
            ],
        )


def analyze(text: Optional[str]) -> TokenStream:
    """Analyze text with the legal analyzer, keeping offsets."""
    return get_analyzer("legal").analyze(text)


def normalize(text: Optional[str]) -> List[str]:
    """Normalize text into index tokens.

    Args:
        text: Raw text, None is treated as empty

    Returns:
        A fresh list of lowercase alphanumeric tokens of length >= 3
    """
    return get_analyzer("legal").get_terms(text)


def clean_word(word: str) -> str:
    """Lowercase a single word and strip its punctuation, keeping any length."""
    return AlphanumericFilter.clean(word.lower())


__all__ = [
    "LegalTextAnalyzer",
    "MIN_TOKEN_LENGTH",
    "analyze",
    "normalize",
    "clean_word",
]
