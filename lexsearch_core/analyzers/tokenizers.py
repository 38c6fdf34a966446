"""LexSearch Tokenizers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re

from lexsearch_core.analyzers.base import Token, Tokenizer, TokenStream


class WhitespaceTokenizer(Tokenizer):
    """Splits on runs of whitespace and keeps punctuation attached.

    Offsets point into the source text.
    """

    WORD = re.compile(r"\S+")

    def tokenize(self, text: str) -> TokenStream:
        return TokenStream(
            Token(
                text=match.group(),
                position=position,
                start_offset=match.start(),
                end_offset=match.end(),
            )
            for position, match in enumerate(self.WORD.finditer(text))
        )


__all__ = ["WhitespaceTokenizer"]
