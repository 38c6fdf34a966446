"""LexSearch Relevance Scorer - Field-Weighted Ranking.

Scores documents against a translated StructuredQuery. Every term,
phrase and wildcard of the query forms a term group together with its
translated alternatives. Per document and field group, a group earns
the best credit among its variants: 1.0 for an exact token, the
similarity for a fuzzy token, scaled down for translated variants.

    score = sum(w_t * sum(w_f * credit)) / sum(w_t * sum(w_f))

where w_t is the term-kind weight and w_f the field-group weight, so
a document matching every group in every field group scores 1.0.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from lexsearch_core.corpus.document import SUPPORTED_LANGUAGES, Document, FieldGroup
from lexsearch_core.index.inverted import InvertedIndex
from lexsearch_core.query.options import SearchOptions
from lexsearch_core.query.parser import Occur, StructuredQuery
from lexsearch_core.ranking.fuzzy import FuzzyMatcher
from lexsearch_core.ranking.highlight import Highlighter

logger = logging.getLogger(__name__)

# doc_id -> field group -> best credit
Credits = Dict[str, Dict[FieldGroup, float]]


@dataclass
class FieldWeights:
    """Scoring weight of each field group."""

    title: float = 3.0
    keywords: float = 2.0
    category: float = 1.5
    content: float = 1.0

    def get(self, group: FieldGroup) -> float:
        return getattr(self, group.value)

    @property
    def total(self) -> float:
        return sum(self.get(group) for group in FieldGroup)


@dataclass
class TermWeights:
    """Scoring weight of each clause kind.

    Attributes:
        required: Required terms
        phrase: Phrases, required or optional
        wildcard: Wildcard patterns
        optional: Optional terms
        translation: Factor applied to translated alternatives
    """

    required: float = 2.0
    phrase: float = 1.5
    wildcard: float = 1.3
    optional: float = 1.0
    translation: float = 0.8


@dataclass(frozen=True)
class Variant:
    """One way of satisfying a term group."""

    tokens: Tuple[str, ...] = ()
    factor: float = 1.0
    pattern: Optional[str] = None


@dataclass
class TermGroup:
    """A query clause with its alternatives."""

    label: str
    occur: Occur
    weight: float
    variants: List[Variant] = field(default_factory=list)


@dataclass
class ScoredResult:
    """A ranked search hit.

    Attributes:
        document: Matched document
        score: Relevance in [0, 1]
        highlighted_text: Display text with matches marked
        language: Language of the display text
        matched_terms: Index tokens that matched, sorted
    """

    document: Document
    score: float
    highlighted_text: str = ""
    language: str = "hr"
    matched_terms: List[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.document.id

    @property
    def title(self) -> str:
        return self.document.title

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "score": self.score,
            "language": self.language,
            "highlighted_text": self.highlighted_text,
            "matched_terms": list(self.matched_terms),
        }


class RelevanceScorer:
    """Ranks documents for a structured query."""

    def __init__(
        self,
        field_weights: Optional[FieldWeights] = None,
        term_weights: Optional[TermWeights] = None,
        highlighter: Optional[Highlighter] = None,
        default_language: str = "hr",
    ):
        """Initialize scorer.

        Args:
            field_weights: Field-group weights
            term_weights: Clause-kind weights
            highlighter: Markup for matched terms
            default_language: Display language when nothing decides it
        """
        self.field_weights = field_weights or FieldWeights()
        self.term_weights = term_weights or TermWeights()
        self.highlighter = highlighter or Highlighter()
        self.default_language = default_language

    def score(
        self,
        query: StructuredQuery,
        index: InvertedIndex,
        documents: Mapping[str, Document],
        options: Optional[SearchOptions] = None,
    ) -> List[ScoredResult]:
        """Score, filter, rank and highlight matching documents.

        Args:
            query: Parsed and translated query
            index: Index over documents
            documents: Corpus by id
            options: Filters and thresholds

        Returns:
            Results in the requested order, by default score descending
            with ties by id
        """
        options = options or SearchOptions()
        if not query.has_positive:
            return []

        groups = self.build_groups(query)
        matcher = FuzzyMatcher(options.fuzzy_threshold) if options.fuzzy else None
        fuzzy_cache: Dict[str, List[Tuple[str, float]]] = {}

        credits: List[Credits] = []
        matched: Dict[str, Set[str]] = {}
        for group in groups:
            credits.append(self._match_group(group, index, matcher, fuzzy_cache, matched))

        excluded = self._excluded_docs(query, index)
        candidates: Set[str] = set()
        for credit in credits:
            candidates.update(credit)
        candidates -= excluded

        for group, credit in zip(groups, credits):
            if group.occur == Occur.MUST:
                candidates &= set(credit)

        max_score = sum(group.weight for group in groups) * self.field_weights.total
        highlight_terms = self._query_terms(query)

        results = []
        for doc_id in candidates:
            document = documents.get(doc_id)
            if document is None:
                logger.warning(f"Index references unknown document {doc_id}")
                continue
            if options.section and document.section != options.section:
                continue
            if options.article_type and document.article_type != options.article_type:
                continue

            total = 0.0
            for group, credit in zip(groups, credits):
                by_group = credit.get(doc_id)
                if by_group:
                    total += group.weight * sum(
                        self.field_weights.get(fg) * value for fg, value in by_group.items()
                    )
            score = total / max_score if max_score else 0.0
            if score < options.min_relevance:
                continue

            results.append(ScoredResult(
                document=document,
                score=score,
                matched_terms=sorted(matched.get(doc_id, ())),
            ))

        sort_results(results, options.sort_by, options.sort_order)
        results = results[:options.max_results]

        for result in results:
            result.language = self._display_language(
                result, index, options.target_language
            )
            terms = highlight_terms | set(result.matched_terms)
            result.highlighted_text = self.highlighter.highlight(
                result.document.display_text(result.language), terms
            )

        return results

    def build_groups(self, query: StructuredQuery) -> List[TermGroup]:
        """Turn the positive clauses of a query into term groups."""
        weights = self.term_weights
        groups = []

        for term in query.required:
            groups.append(self._group(query, term, (term,), Occur.MUST, weights.required))
        for term in query.optional:
            groups.append(self._group(query, term, (term,), Occur.SHOULD, weights.optional))
        for phrase in query.required_phrases:
            groups.append(self._group(query, " ".join(phrase), phrase, Occur.MUST, weights.phrase))
        for phrase in query.phrases:
            groups.append(self._group(query, " ".join(phrase), phrase, Occur.SHOULD, weights.phrase))
        for wildcard in query.wildcards:
            if wildcard.occur == Occur.MUST_NOT:
                continue
            groups.append(TermGroup(
                label=wildcard.pattern,
                occur=wildcard.occur,
                weight=weights.wildcard,
                variants=[Variant(pattern=wildcard.pattern)],
            ))
        return groups

    def _group(
        self,
        query: StructuredQuery,
        label: str,
        tokens: Tuple[str, ...],
        occur: Occur,
        weight: float,
    ) -> TermGroup:
        variants = [Variant(tokens=tuple(tokens))]
        for alternative in query.alternatives.get(label, ()):
            alt_tokens = tuple(alternative.split())
            if alt_tokens and alt_tokens != tuple(tokens):
                variants.append(Variant(tokens=alt_tokens, factor=self.term_weights.translation))
        return TermGroup(label=label, occur=occur, weight=weight, variants=variants)

    def _match_group(
        self,
        group: TermGroup,
        index: InvertedIndex,
        matcher: Optional[FuzzyMatcher],
        fuzzy_cache: Dict[str, List[Tuple[str, float]]],
        matched: Dict[str, Set[str]],
    ) -> Credits:
        """Collect the best credit per document and field group."""
        credits: Credits = {}

        def credit(doc_id: str, field_group: FieldGroup, value: float) -> None:
            by_group = credits.setdefault(doc_id, {})
            if value > by_group.get(field_group, 0.0):
                by_group[field_group] = value

        def credit_token(token: str, value: float) -> None:
            posting_list = index.get_posting_list(token)
            if posting_list is None:
                return
            for posting in posting_list:
                credit(posting.doc_id, posting.group, value)
                matched.setdefault(posting.doc_id, set()).add(token)

        for variant in group.variants:
            if variant.pattern is not None:
                for token in index.wildcard_terms(variant.pattern):
                    credit_token(token, variant.factor)
            elif len(variant.tokens) == 1:
                token = variant.tokens[0]
                if matcher is None:
                    credit_token(token, variant.factor)
                    continue
                if token not in fuzzy_cache:
                    fuzzy_cache[token] = matcher.candidates(token, index.terms())
                for candidate, similarity in fuzzy_cache[token]:
                    credit_token(candidate, similarity * variant.factor)
            elif variant.tokens:
                for doc_id, field_groups in index.phrase_search(variant.tokens).items():
                    for field_group in field_groups:
                        credit(doc_id, field_group, variant.factor)
                    matched.setdefault(doc_id, set()).update(variant.tokens)

        return credits

    def _excluded_docs(self, query: StructuredQuery, index: InvertedIndex) -> Set[str]:
        """Documents containing any excluded term, phrase or wildcard."""
        excluded: Set[str] = set()
        for term in query.excluded:
            excluded |= index.doc_ids(term)
        for phrase in query.excluded_phrases:
            excluded.update(index.phrase_search(phrase))
        for wildcard in query.wildcards:
            if wildcard.occur == Occur.MUST_NOT:
                for token in index.wildcard_terms(wildcard.pattern):
                    excluded |= index.doc_ids(token)
        return excluded

    def _query_terms(self, query: StructuredQuery) -> Set[str]:
        terms = set(query.terms())
        for alternatives in query.alternatives.values():
            for alternative in alternatives:
                terms.update(alternative.split())
        return terms

    def _display_language(
        self,
        result: ScoredResult,
        index: InvertedIndex,
        target_language: Optional[str],
    ) -> str:
        """Requested language, else the one whose text matched most tokens."""
        if target_language:
            return target_language

        best_language = self.default_language
        best_count = 0
        for language in SUPPORTED_LANGUAGES:
            count = sum(
                1 for token in result.matched_terms
                if index.field_contains(token, result.id, f"text:{language}")
            )
            if count > best_count:
                best_language, best_count = language, count
        return best_language


def sort_results(
    results: List[ScoredResult],
    sort_by: str = "relevance",
    sort_order: str = "desc",
) -> None:
    """Sort results in place.

    Equal keys keep ascending id order in both directions. Undated
    documents come last when sorting by date.

    Args:
        results: Scored results
        sort_by: "relevance", "date" or "title"
        sort_order: "desc" or "asc"
    """
    descending = sort_order != "asc"
    results.sort(key=lambda r: r.id)

    if sort_by == "date":
        undated = [r for r in results if r.document.last_modified is None]
        dated = [r for r in results if r.document.last_modified is not None]
        dated.sort(key=lambda r: r.document.last_modified.timestamp(), reverse=descending)
        results[:] = dated + undated
    elif sort_by == "title":
        results.sort(key=lambda r: (r.title or "").casefold(), reverse=descending)
    else:
        results.sort(key=lambda r: r.score, reverse=descending)


__all__ = [
    "FieldWeights",
    "RelevanceScorer",
    "ScoredResult",
    "sort_results",
    "TermGroup",
    "TermWeights",
    "Variant",
]
