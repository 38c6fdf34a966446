"""LexSearch Analyzer Base - Normalization Pipeline Primitives.

Indexing and querying share one pipeline: a tokenizer splits raw article
text into tokens that remember where they came from, and token filters
rewrite or drop them. Analyzers are looked up by name so the index
builder and the query side can agree on the same instance.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """A word of source text.

    Attributes:
        text: Current (possibly rewritten) token text
        position: Index in the surviving token sequence
        start_offset: Offset of the first source character
        end_offset: Offset one past the last source character
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0

    def with_text(self, text: str) -> "Token":
        return replace(self, text=text)


class TokenStream:
    """Ordered tokens produced by one analysis run."""

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        self._tokens: List[Token] = list(tokens or ())

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def map_text(self, rewrite: Callable[[str], str]) -> "TokenStream":
        """Rewrite every token text, dropping tokens rewritten to ''."""
        rewritten = (token.with_text(rewrite(token.text)) for token in self._tokens)
        return TokenStream(token for token in rewritten if token.text)

    def get_texts(self) -> List[str]:
        return [token.text for token in self._tokens]

    def renumber(self) -> "TokenStream":
        """Make positions contiguous again after filters dropped tokens."""
        return TokenStream(
            replace(token, position=position)
            for position, token in enumerate(self._tokens)
        )


class Tokenizer(ABC):
    """Splits raw text into a token stream."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        ...


class TokenFilter(ABC):
    """Rewrites or removes tokens of a stream."""

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        ...


class Analyzer:
    """A tokenizer followed by token filters applied in order."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        self._tokenizer = tokenizer
        self._token_filters = list(token_filters or [])

    def analyze(self, text: Optional[str]) -> TokenStream:
        """Run the pipeline over text.

        Args:
            text: Raw text; None and '' yield an empty stream

        Returns:
            Surviving tokens, positions numbered from zero
        """
        if not text:
            return TokenStream()

        stream = self._tokenizer.tokenize(text)
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream.renumber()

    def get_terms(self, text: Optional[str]) -> List[str]:
        """Return only the token texts of analyze(text)."""
        return self.analyze(text).get_texts()


_analyzers: Dict[str, Analyzer] = {}


def register_analyzer(name: str) -> Callable[[type], type]:
    """Class decorator registering a no-argument instance under name."""
    def decorator(cls: type) -> type:
        if name in _analyzers:
            logger.warning(f"Replacing registered analyzer: {name}")
        _analyzers[name] = cls()
        return cls
    return decorator


def get_analyzer(name: str) -> Optional[Analyzer]:
    """Return the analyzer registered under name, or None."""
    return _analyzers.get(name)


__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "register_analyzer",
    "get_analyzer",
]
