"""LexSearch Highlighter - Match Markup.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

# Shorter terms would mark fragments of most words.
MIN_HIGHLIGHT_LENGTH = 3


def _fold(text: str) -> str:
    """Lowercase character by character so offsets stay aligned."""
    return "".join(
        lowered if len(lowered) == 1 else char
        for char, lowered in ((c, c.lower()) for c in text)
    )


class Highlighter:
    """Wraps every occurrence of the given terms in markup tags.

    Matching is case-insensitive literal substring scanning; overlapping
    or touching spans are merged into one.
    """

    def __init__(self, pre_tag: str = "<mark>", post_tag: str = "</mark>"):
        self.pre_tag = pre_tag
        self.post_tag = post_tag

    def spans(self, text: str, terms: Iterable[str]) -> List[Tuple[int, int]]:
        """Find merged (start, end) spans of every term occurrence."""
        folded = _fold(text)
        found = []
        for term in set(_fold(t) for t in terms if t):
            if len(term) < MIN_HIGHLIGHT_LENGTH:
                continue
            pos = folded.find(term)
            while pos >= 0:
                found.append((pos, pos + len(term)))
                pos = folded.find(term, pos + 1)

        merged: List[Tuple[int, int]] = []
        for start, end in sorted(found):
            if merged and start <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))
        return merged

    def highlight(self, text: str, terms: Iterable[str]) -> str:
        """Mark every term occurrence in text.

        Args:
            text: Text to mark up
            terms: Normalized terms

        Returns:
            Text with matches wrapped in the configured tags
        """
        if not text:
            return ""

        parts = []
        last = 0
        for start, end in self.spans(text, terms):
            parts.append(text[last:start])
            parts.append(f"{self.pre_tag}{text[start:end]}{self.post_tag}")
            last = end
        parts.append(text[last:])
        return "".join(parts)


__all__ = ["Highlighter", "MIN_HIGHLIGHT_LENGTH"]
