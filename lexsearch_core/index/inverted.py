"""LexSearch Inverted Index - Token to Document Mapping.

The inverted index maps each normalized token to the documents that
contain it. Postings remember the field and field group a token came
from and its positions, which drives field-weighted scoring and
contiguous phrase matching.

An index is filled once by the IndexBuilder and is read-only afterwards.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Sequence, Set, Tuple

from lexsearch_core.corpus.document import FieldGroup

logger = logging.getLogger(__name__)


@dataclass
class Posting:
    """Occurrences of a token in one field of one document.

    Attributes:
        doc_id: Document ID
        field: Field name
        group: Field group used for scoring
        positions: Token positions within the field
    """

    doc_id: str
    field: str
    group: FieldGroup
    positions: List[int] = field(default_factory=list)

    def __lt__(self, other: "Posting") -> bool:
        """Compare by doc_id then field for sorting."""
        return (self.doc_id, self.field) < (other.doc_id, other.field)


class PostingList:
    """All postings for a single token."""

    def __init__(self, token: str):
        """Initialize posting list.

        Args:
            token: The token
        """
        self.token = token
        self._postings: Dict[Tuple[str, str], Posting] = {}
        self._by_doc: Dict[str, List[Posting]] = {}

    def add(self, doc_id: str, field_name: str, group: FieldGroup, position: int) -> None:
        """Record one occurrence.

        Args:
            doc_id: Document ID
            field_name: Field name
            group: Field group
            position: Token position in the field
        """
        key = (doc_id, field_name)
        posting = self._postings.get(key)
        if posting is None:
            posting = Posting(doc_id=doc_id, field=field_name, group=group)
            self._postings[key] = posting
            self._by_doc.setdefault(doc_id, []).append(posting)
        posting.positions.append(position)

    def get(self, doc_id: str, field_name: str) -> Optional[Posting]:
        """Get the posting for a document field."""
        return self._postings.get((doc_id, field_name))

    def postings_for(self, doc_id: str) -> List[Posting]:
        """Get every posting of a document."""
        return list(self._by_doc.get(doc_id, ()))

    def doc_ids(self) -> Set[str]:
        """Get all document IDs."""
        return set(self._by_doc)

    def __len__(self) -> int:
        """Return number of documents."""
        return len(self._by_doc)

    def __iter__(self) -> Iterator[Posting]:
        """Iterate over postings in document order."""
        return iter(sorted(self._postings.values()))


class InvertedIndex:
    """Token to document index over all indexed fields."""

    def __init__(self):
        """Initialize an empty index."""
        self._posting_lists: Dict[str, PostingList] = {}
        self._doc_ids: Set[str] = set()
        self._total_tokens = 0
        self._sorted_terms: Optional[List[str]] = None

    def add_field(
        self,
        doc_id: str,
        field_name: str,
        group: FieldGroup,
        tokens: Sequence[str],
    ) -> None:
        """Index the normalized tokens of one document field.

        Args:
            doc_id: Document ID
            field_name: Field name
            group: Field group
            tokens: Normalized tokens in field order
        """
        self._doc_ids.add(doc_id)
        for position, token in enumerate(tokens):
            posting_list = self._posting_lists.get(token)
            if posting_list is None:
                posting_list = PostingList(token)
                self._posting_lists[token] = posting_list
            posting_list.add(doc_id, field_name, group, position)
        self._total_tokens += len(tokens)
        self._sorted_terms = None

    def get_posting_list(self, token: str) -> Optional[PostingList]:
        """Get posting list for token."""
        return self._posting_lists.get(token)

    def doc_ids(self, token: str) -> Set[str]:
        """Get the documents containing a token."""
        posting_list = self._posting_lists.get(token)
        return posting_list.doc_ids() if posting_list else set()

    def __contains__(self, token: object) -> bool:
        return token in self._posting_lists

    def __len__(self) -> int:
        """Return the number of distinct tokens."""
        return len(self._posting_lists)

    def terms(self) -> List[str]:
        """Get every indexed token, sorted."""
        if self._sorted_terms is None:
            self._sorted_terms = sorted(self._posting_lists)
        return list(self._sorted_terms)

    def prefix_terms(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """Get terms starting with prefix.

        Args:
            prefix: Term prefix
            limit: Maximum results

        Returns:
            Sorted matching terms
        """
        results = []
        for term in self.terms():
            if term.startswith(prefix):
                results.append(term)
                if limit is not None and len(results) >= limit:
                    break
            elif term > prefix:
                break
        return results

    def wildcard_terms(self, pattern: str) -> List[str]:
        """Get terms matching a glob pattern with ``*`` wildcards.

        Args:
            pattern: Normalized pattern, e.g. ``odmo*`` or ``*ski``

        Returns:
            Sorted matching terms
        """
        return [t for t in self.terms() if fnmatch.fnmatchcase(t, pattern)]

    def phrase_search(self, tokens: Sequence[str]) -> Dict[str, Set[FieldGroup]]:
        """Find documents containing the tokens contiguously within one field.

        Args:
            tokens: Phrase tokens in order

        Returns:
            Mapping of doc_id to the field groups holding the phrase
        """
        if not tokens:
            return {}

        posting_lists = []
        for token in tokens:
            posting_list = self._posting_lists.get(token)
            if posting_list is None:
                return {}
            posting_lists.append(posting_list)

        common_docs = posting_lists[0].doc_ids()
        for posting_list in posting_lists[1:]:
            common_docs &= posting_list.doc_ids()

        results: Dict[str, Set[FieldGroup]] = {}
        for doc_id in common_docs:
            for first in posting_lists[0].postings_for(doc_id):
                postings = [first] + [
                    pl.get(doc_id, first.field) for pl in posting_lists[1:]
                ]
                if not all(postings):
                    continue
                if self._find_phrase_matches([p.positions for p in postings]):
                    results.setdefault(doc_id, set()).add(first.group)

        return results

    def _find_phrase_matches(self, position_lists: List[List[int]]) -> List[int]:
        """Find start positions where each list holds the next position."""
        matches = []
        following = [set(positions) for positions in position_lists[1:]]
        for start_pos in position_lists[0]:
            if all(start_pos + offset in positions
                   for offset, positions in enumerate(following, start=1)):
                matches.append(start_pos)
        return matches

    def field_contains(self, token: str, doc_id: str, field_name: str) -> bool:
        """Check whether a token occurs in a specific document field."""
        posting_list = self._posting_lists.get(token)
        return bool(posting_list and posting_list.get(doc_id, field_name))

    def as_mapping(self) -> Dict[str, FrozenSet[str]]:
        """Get the plain token to document-id-set view of the index."""
        return {
            token: frozenset(posting_list.doc_ids())
            for token, posting_list in self._posting_lists.items()
        }

    @property
    def document_ids(self) -> FrozenSet[str]:
        """Get IDs of every indexed document."""
        return frozenset(self._doc_ids)

    @property
    def document_count(self) -> int:
        """Get total document count."""
        return len(self._doc_ids)

    @property
    def term_count(self) -> int:
        """Get unique term count."""
        return len(self._posting_lists)

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "document_count": self.document_count,
            "term_count": self.term_count,
            "total_tokens": self._total_tokens,
        }


__all__ = [
    "InvertedIndex",
    "Posting",
    "PostingList",
]
