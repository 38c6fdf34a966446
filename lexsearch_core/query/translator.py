"""LexSearch Query Translator - Cross-Language Term Expansion.

Expands the terms of a parsed query with their counterparts in the
other supported languages, so that a Spanish query finds an article
whose Croatian text answers it. Alternatives are OR-ed with the term
they belong to: a document matching any alternative matches the term.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from lexsearch_core.analyzers.standard import normalize
from lexsearch_core.query.parser import StructuredQuery
from lexsearch_core.query.translations import DEFAULT_TRANSLATIONS

logger = logging.getLogger(__name__)


def _key(text: str) -> str:
    return " ".join(normalize(text))


class TranslationTable:
    """Term to per-language translation candidates.

    Keys and candidates are stored normalized, so lookup is
    case-insensitive and multi-word keys line up with query tokens.
    """

    def __init__(self, entries: Optional[Mapping[str, Mapping[str, Sequence[str]]]] = None):
        """Initialize table.

        Args:
            entries: Term to {language: candidates}, most preferred first
        """
        self._entries: Dict[str, List[Tuple[str, str]]] = {}
        self._max_key_length = 1
        for term, translations in (entries or {}).items():
            self.add(term, translations)

    def add(self, term: str, translations: Mapping[str, Sequence[str]]) -> None:
        """Add candidates for a term, after any it already has.

        Args:
            term: Source term, in any language
            translations: Language code to candidate terms
        """
        key = _key(term)
        if not key:
            logger.warning(f"Ignoring translation for unsearchable term {term!r}")
            return

        candidates = self._entries.setdefault(key, [])
        for language, targets in translations.items():
            if isinstance(targets, str):
                targets = [targets]
            for target in targets:
                value = _key(target)
                if value and value != key and (language, value) not in candidates:
                    candidates.append((language, value))
        self._max_key_length = max(self._max_key_length, len(key.split()))

    def lookup(self, term: str) -> List[Tuple[str, str]]:
        """Get (language, candidate) pairs for a term."""
        return list(self._entries.get(_key(term), ()))

    def translate(self, term: str, target_languages: Optional[Iterable[str]] = None) -> List[str]:
        """Get a term followed by its translations.

        Args:
            term: Term to translate
            target_languages: Restrict candidates to these languages

        Returns:
            De-duplicated candidates in preference order; exactly
            ``[term]`` when nothing is mapped
        """
        languages = set(target_languages) if target_languages is not None else None
        results = [term]
        for language, candidate in self._entries.get(_key(term), ()):
            if languages is not None and language not in languages:
                continue
            if candidate not in results:
                results.append(candidate)
        return results

    @property
    def max_key_length(self) -> int:
        """Token count of the longest key."""
        return self._max_key_length

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and _key(term) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def default_translation_table() -> TranslationTable:
    """Build the table of common labour-law terms."""
    return TranslationTable(DEFAULT_TRANSLATIONS)


class QueryTranslator:
    """Attaches translated alternatives to a parsed query."""

    def __init__(self, table: Optional[TranslationTable] = None):
        """Initialize translator.

        Args:
            table: Translation table, the default legal table when None
        """
        self.table = table if table is not None else default_translation_table()

    def translate(self, term: str, target_languages: Optional[Iterable[str]] = None) -> List[str]:
        """Translate one term; see TranslationTable.translate."""
        return self.table.translate(term, target_languages)

    def expand(
        self,
        query: StructuredQuery,
        target_languages: Optional[Iterable[str]] = None,
    ) -> StructuredQuery:
        """Fill in query.alternatives.

        Required and optional terms get their single-term candidates.
        Runs of adjacent terms and quoted phrases that form a multi-word
        key get the key's candidates; an unquoted run is also added as
        an optional phrase. Excluded clauses are never expanded.

        Args:
            query: Parsed query, updated in place
            target_languages: Restrict candidates to these languages

        Returns:
            The same query
        """
        languages = list(target_languages) if target_languages is not None else None

        for term in query.required + query.optional:
            self._attach(query, term, languages)

        for phrase in query.required_phrases + query.phrases:
            self._attach(query, " ".join(phrase), languages)

        for terms in (query.required, query.optional):
            for run in self._multiword_runs(terms):
                if self._attach(query, " ".join(run), languages):
                    if run not in query.phrases and run not in query.required_phrases:
                        query.phrases.append(run)

        if query.alternatives:
            logger.debug(f"Expanded query {query.original!r}: {query.alternatives}")
        return query

    def _attach(self, query: StructuredQuery, text: str, languages: Optional[List[str]]) -> bool:
        candidates = self.table.translate(text, languages)[1:]
        if not candidates:
            return False
        existing = query.alternatives.setdefault(text, [])
        for candidate in candidates:
            if candidate not in existing:
                existing.append(candidate)
        return True

    def _multiword_runs(self, terms: List[str]) -> List[Tuple[str, ...]]:
        """Get every run of 2 or more adjacent terms that is a table key."""
        runs = []
        longest = min(self.table.max_key_length, len(terms))
        for size in range(longest, 1, -1):
            for start in range(len(terms) - size + 1):
                run = tuple(terms[start:start + size])
                if " ".join(run) in self.table:
                    runs.append(run)
        return runs


__all__ = [
    "QueryTranslator",
    "TranslationTable",
    "default_translation_table",
]
