"""LexSearch Query Parser - Query String Parsing.

Parses raw query strings into a StructuredQuery. The parser never
raises: unbalanced quotes and stray operators degrade to plain terms
or are ignored, and each degradation is recorded as a warning.

Query syntax (keywords are case-insensitive):
- term: optional term, combined with the default operator
- "exact phrase": tokens must appear contiguously in one field
- +term / +"phrase": required
- -term / -"phrase": excluded
- a AND b, a && b: both terms required
- a OR b, a || b: either term
- NOT term, !term: excluded
- term*, *term, *term*: prefix, suffix and infix wildcards

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from lexsearch_core.analyzers.standard import clean_word, normalize

logger = logging.getLogger(__name__)

Phrase = Tuple[str, ...]

# Wildcards need at least this many fixed characters.
MIN_WILDCARD_FIXED = 2


class BooleanOperator(Enum):
    """Boolean query operators."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class Occur(Enum):
    """How a clause participates in matching."""

    MUST = "must"
    SHOULD = "should"
    MUST_NOT = "must_not"


class WildcardKind(Enum):
    """Where the wildcard sits relative to the fixed text."""

    PREFIX = "prefix"  # term*
    SUFFIX = "suffix"  # *term
    INFIX = "infix"  # *term*
    PATTERN = "pattern"  # te*rm


@dataclass(frozen=True)
class WildcardPattern:
    """A wildcard term.

    Attributes:
        raw: Term as typed
        pattern: Normalized glob pattern
        fixed: Normalized non-wildcard characters
        kind: Wildcard placement
        occur: Clause occurrence
    """

    raw: str
    pattern: str
    fixed: str
    kind: WildcardKind
    occur: Occur = Occur.SHOULD

    def matches(self, token: str) -> bool:
        """Check whether an index token matches the pattern."""
        return fnmatch.fnmatchcase(token, self.pattern)


@dataclass
class StructuredQuery:
    """Result of query parsing.

    Attributes:
        original: Original query string
        required: Terms every result must match
        excluded: Terms no result may contain
        optional: Terms that only add score
        phrases: Optional exact phrases
        required_phrases: Phrases every result must contain
        excluded_phrases: Phrases no result may contain
        wildcards: Wildcard patterns
        alternatives: Term or phrase text to its translated candidates
        warnings: Diagnostics about malformed input
        explicit_operators: Whether the query used any boolean operator
    """

    original: str = ""
    required: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)
    optional: List[str] = field(default_factory=list)
    phrases: List[Phrase] = field(default_factory=list)
    required_phrases: List[Phrase] = field(default_factory=list)
    excluded_phrases: List[Phrase] = field(default_factory=list)
    wildcards: List[WildcardPattern] = field(default_factory=list)
    alternatives: Dict[str, List[str]] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    explicit_operators: bool = False

    @property
    def is_empty(self) -> bool:
        """True when the query holds no clause at all."""
        return not (
            self.required or self.excluded or self.optional or self.phrases
            or self.required_phrases or self.excluded_phrases or self.wildcards
        )

    @property
    def has_positive(self) -> bool:
        """True when some clause can make a document match."""
        return bool(
            self.required or self.optional or self.phrases or self.required_phrases
            or any(w.occur != Occur.MUST_NOT for w in self.wildcards)
        )

    def terms(self) -> List[str]:
        """Get every positive term and phrase token, in query order."""
        seen: List[str] = []
        for term in self.required + self.optional:
            if term not in seen:
                seen.append(term)
        for phrase in self.required_phrases + self.phrases:
            for token in phrase:
                if token not in seen:
                    seen.append(token)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "original": self.original,
            "required": list(self.required),
            "excluded": list(self.excluded),
            "optional": list(self.optional),
            "phrases": [list(p) for p in self.phrases],
            "required_phrases": [list(p) for p in self.required_phrases],
            "excluded_phrases": [list(p) for p in self.excluded_phrases],
            "wildcards": [
                {"pattern": w.pattern, "kind": w.kind.value, "occur": w.occur.value}
                for w in self.wildcards
            ],
            "alternatives": {k: list(v) for k, v in self.alternatives.items()},
            "warnings": list(self.warnings),
            "explicit_operators": self.explicit_operators,
        }


class QueryToken:
    """Lexer token."""

    def __init__(self, token_type: str, value: str, position: int):
        """Initialize token.

        Args:
            token_type: Token type
            value: Token value
            position: Position in input
        """
        self.type = token_type
        self.value = value
        self.position = position

    @property
    def end(self) -> int:
        """Position just past the token."""
        return self.position + len(self.value)

    def __repr__(self) -> str:
        return f"QueryToken({self.type}, {self.value!r})"


class QueryLexer:
    """Lexer for query strings."""

    # Tried in order at each position; the first match wins.
    PATTERNS = [
        ("WHITESPACE", r"\s+"),
        ("PHRASE", r'"[^"]*"'),
        ("QUOTE", r'"'),
        ("AND", r'(?i:and)(?=[\s"]|$)|&&'),
        ("OR", r'(?i:or)(?=[\s"]|$)|\|\|'),
        ("NOT", r'(?i:not)(?=[\s"]|$)|!'),
        ("PLUS", r"\+"),
        ("MINUS", r"-"),
        ("TERM", r'[^\s"&|]+'),
    ]

    def __init__(self):
        """Initialize lexer."""
        self._patterns = [
            (name, re.compile(pattern))
            for name, pattern in self.PATTERNS
        ]

    def tokenize(self, query: str, warnings: Optional[List[str]] = None) -> List[QueryToken]:
        """Tokenize query string.

        Args:
            query: Query string
            warnings: List collecting diagnostics for skipped characters

        Returns:
            List of tokens, whitespace dropped
        """
        tokens = []
        position = 0

        while position < len(query):
            for token_type, pattern in self._patterns:
                match = pattern.match(query, position)
                if match:
                    if token_type != "WHITESPACE":
                        tokens.append(QueryToken(token_type, match.group(0), position))
                    position = match.end()
                    break
            else:
                message = f"Ignoring unexpected character {query[position]!r} at position {position}"
                logger.debug(message)
                if warnings is not None:
                    warnings.append(message)
                position += 1

        return tokens


@dataclass
class _Clause:
    """A term or phrase with the modifiers that precede it."""

    kind: str
    value: str
    position: int
    prefix: Optional[str] = None
    negated: bool = False


IMPLICIT = "IMPLICIT"


class QueryParser:
    """Parser for query strings.

    Builds a flat StructuredQuery: every clause is required, optional
    or excluded. A bare term joined to a neighbour by AND is required;
    space-separated terms are joined with the default operator.
    """

    def __init__(self, default_operator: BooleanOperator = BooleanOperator.OR):
        """Initialize parser.

        Args:
            default_operator: Operator joining space-separated terms
        """
        if default_operator == BooleanOperator.NOT:
            raise ValueError("default_operator must be AND or OR")
        self.default_operator = default_operator
        self._lexer = QueryLexer()

    def parse(self, raw_query: Optional[str]) -> StructuredQuery:
        """Parse a query string.

        Args:
            raw_query: Query string

        Returns:
            Parsed query; empty for a blank string
        """
        query = StructuredQuery(original=raw_query or "")
        if not raw_query or not raw_query.strip():
            return query

        tokens = self._lexer.tokenize(raw_query, query.warnings)
        query.explicit_operators = any(
            t.type in ("AND", "OR", "NOT", "PLUS", "MINUS") for t in tokens
        )

        clauses, connectors = self._group(tokens, query.warnings)
        for i, clause in enumerate(clauses):
            occur = self._resolve_occur(clause, connectors[i], connectors[i + 1])
            self._add_clause(query, clause, occur)

        query.optional = [t for t in query.optional if t not in query.required]
        query.phrases = [p for p in query.phrases if p not in query.required_phrases]

        for warning in query.warnings:
            logger.warning(f"Query {raw_query!r}: {warning}")
        logger.debug(f"Parsed query: {query.to_dict()}")
        return query

    def _group(
        self,
        tokens: List[QueryToken],
        warnings: List[str],
    ) -> Tuple[List[_Clause], List[Optional[str]]]:
        """Attach prefixes and operators to clauses.

        An operator without an operand is read as a plain term, which
        survives only if it normalizes to a searchable word.

        Returns:
            (clauses, connectors) where connectors[i] joins clause i-1
            and clause i; the first and last entries are None
        """
        clauses: List[_Clause] = []
        connectors: List[Optional[str]] = [None]
        pending_prefix: Optional[str] = None
        pending_not: Optional[QueryToken] = None
        pending_op: Optional[QueryToken] = None
        literal = set()

        def add_clause(kind: str, token: QueryToken) -> None:
            nonlocal pending_prefix, pending_not, pending_op
            if clauses:
                connectors.append(pending_op.type if pending_op else IMPLICIT)
            clauses.append(_Clause(
                kind=kind,
                value=token.value,
                position=token.position,
                prefix=pending_prefix,
                negated=pending_not is not None,
            ))
            pending_prefix = None
            pending_not = None
            pending_op = None

        def as_term(token: QueryToken, message: str) -> None:
            warnings.append(f"{message} at position {token.position}, reading it as a plain term")
            if normalize(token.value):
                add_clause("term", token)

        for idx, token in enumerate(tokens):
            token_type = "TERM" if idx in literal else token.type
            if token_type in ("PLUS", "MINUS"):
                following = tokens[idx + 1] if idx + 1 < len(tokens) else None
                if following is None or following.position != token.end:
                    warnings.append(f"Ignoring stray {token.value!r} at position {token.position}")
                elif following.type in ("TERM", "PHRASE"):
                    pending_prefix = token.value
                elif following.type in ("AND", "OR", "NOT") and following.value.isalpha():
                    pending_prefix = token.value
                    literal.add(idx + 1)
                else:
                    warnings.append(f"Ignoring stray {token.value!r} at position {token.position}")
            elif token_type == "NOT":
                pending_not = token
            elif token_type in ("AND", "OR"):
                if not clauses:
                    as_term(token, f"Leading {token.type}")
                elif pending_op is not None:
                    as_term(token, "Repeated operator")
                else:
                    pending_op = token
            elif token_type == "QUOTE":
                warnings.append(
                    f"Unbalanced quote at position {token.position}, reading the rest as plain terms"
                )
            else:
                add_clause("phrase" if token_type == "PHRASE" else "term", token)

        trailing = [t for t in (pending_op, pending_not) if t is not None]
        pending_op = pending_not = None
        for token in sorted(trailing, key=lambda t: t.position):
            as_term(token, f"Trailing {token.type}")

        connectors.append(None)
        return clauses, connectors

    def _resolve_occur(
        self,
        clause: _Clause,
        before: Optional[str],
        after: Optional[str],
    ) -> Occur:
        """Decide whether a clause is required, optional or excluded."""
        if clause.prefix == "-" or clause.negated:
            return Occur.MUST_NOT
        if clause.prefix == "+":
            return Occur.MUST

        for connector in (before, after):
            if connector == IMPLICIT:
                connector = self.default_operator.value
            if connector == BooleanOperator.AND.value:
                return Occur.MUST
        return Occur.SHOULD

    def _add_clause(self, query: StructuredQuery, clause: _Clause, occur: Occur) -> None:
        """Normalize a clause and file it under its occurrence."""
        if clause.kind == "phrase":
            tokens = tuple(normalize(clause.value[1:-1]))
            if not tokens:
                query.warnings.append(f"Ignoring phrase without searchable words: {clause.value}")
            elif len(tokens) == 1:
                self._add_term(query, tokens[0], occur)
            else:
                target = {
                    Occur.MUST: query.required_phrases,
                    Occur.SHOULD: query.phrases,
                    Occur.MUST_NOT: query.excluded_phrases,
                }[occur]
                if tokens not in target:
                    target.append(tokens)
            return

        if "*" in clause.value:
            wildcard = self._make_wildcard(clause.value, occur, query.warnings)
            if wildcard is not None and wildcard not in query.wildcards:
                query.wildcards.append(wildcard)
            return

        for token in normalize(clause.value):
            self._add_term(query, token, occur)

    def _add_term(self, query: StructuredQuery, term: str, occur: Occur) -> None:
        target = {
            Occur.MUST: query.required,
            Occur.SHOULD: query.optional,
            Occur.MUST_NOT: query.excluded,
        }[occur]
        if term not in target:
            target.append(term)

    def _make_wildcard(
        self,
        raw: str,
        occur: Occur,
        warnings: List[str],
    ) -> Optional[WildcardPattern]:
        """Build a wildcard pattern, or None when too little text is fixed."""
        segments = [clean_word(segment) for segment in raw.split("*")]
        fixed = "".join(segments)
        if len(fixed) < MIN_WILDCARD_FIXED:
            warnings.append(
                f"Ignoring wildcard {raw!r}: needs at least {MIN_WILDCARD_FIXED} fixed characters"
            )
            return None

        pattern = re.sub(r"\*+", "*", "*".join(segments))
        leading = pattern.startswith("*")
        trailing = pattern.endswith("*")
        if leading and trailing:
            kind = WildcardKind.INFIX
        elif leading:
            kind = WildcardKind.SUFFIX
        elif trailing:
            kind = WildcardKind.PREFIX
        else:
            kind = WildcardKind.PATTERN

        return WildcardPattern(raw=raw, pattern=pattern, fixed=fixed, kind=kind, occur=occur)


__all__ = [
    "BooleanOperator",
    "Occur",
    "QueryLexer",
    "QueryParser",
    "QueryToken",
    "StructuredQuery",
    "WildcardKind",
    "WildcardPattern",
]
