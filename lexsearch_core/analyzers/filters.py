"""LexSearch Token Filters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from lexsearch_core.analyzers.base import TokenFilter, TokenStream


class LowercaseFilter(TokenFilter):
    """Lowercases token text."""

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.map_text(str.lower)


class AlphanumericFilter(TokenFilter):
    """Keeps only letters and digits, dropping tokens left empty.

    The letter test is Unicode-aware, so č ć đ š ž ñ á é í ó ú ü survive.
    """

    @staticmethod
    def clean(text: str) -> str:
        return "".join(c for c in text if c.isalnum())

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.map_text(self.clean)


class LengthFilter(TokenFilter):
    """Drops tokens outside [min_length, max_length]."""

    def __init__(self, min_length: int = 1, max_length: int = 255):
        self.min_length = min_length
        self.max_length = max_length

    def filter(self, stream: TokenStream) -> TokenStream:
        return TokenStream(
            token for token in stream
            if self.min_length <= len(token.text) <= self.max_length
        )


__all__ = [
    "LowercaseFilter",
    "AlphanumericFilter",
    "LengthFilter",
]
