"""LexSearch Corpus Documents - Legal Article Records.

A Document is one legal article stored in every supported language.
Documents are immutable; a corpus is replaced wholesale on reload.
All record-shape ambiguity is resolved here, once, by load_documents().

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("hr", "en", "es")

# Long-form keys used by exported article records.
LANGUAGE_ALIASES: Dict[str, str] = {
    "croatian": "hr",
    "english": "en",
    "spanish": "es",
}

TITLE_PREFIXES: Dict[str, str] = {
    "hr": "",
    "en": "Title: ",
    "es": "Título: ",
}


class FieldGroup(Enum):
    """Groups of document fields that share one scoring weight."""

    TITLE = "title"
    KEYWORDS = "keywords"
    CATEGORY = "category"
    CONTENT = "content"


@dataclass(frozen=True)
class IndexedField:
    """One indexable field value of a document.

    Attributes:
        name: Field name, e.g. "title", "text:en", "keyword:3"
        group: Scoring group the field belongs to
        text: Raw field text
    """

    name: str
    group: FieldGroup
    text: str


@dataclass(frozen=True)
class Document:
    """A legal article.

    Attributes:
        id: Stable document identifier
        texts: Article body per language code
        title: Article title
        section: Section/category tag
        article_type: Article-type tag
        keywords: Ordered free-text keywords
        tags: Ordered classification tags
        last_modified: Last modification time
        number: Short article number, e.g. "Članak 73"
        official_number: Number with gazette references
    """

    id: str
    texts: Mapping[str, str] = field(default_factory=dict)
    title: str = ""
    section: str = ""
    article_type: str = ""
    keywords: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    last_modified: Optional[datetime] = None
    number: str = ""
    official_number: str = ""

    def text(self, language: str) -> str:
        """Get the article body in a language, empty if missing."""
        return self.texts.get(language) or ""

    def iter_fields(self) -> Iterator[IndexedField]:
        """Yield every indexable field with its scoring group."""
        yield IndexedField("title", FieldGroup.TITLE, self.title)
        for i, keyword in enumerate(self.keywords):
            yield IndexedField(f"keyword:{i}", FieldGroup.KEYWORDS, keyword)
        yield IndexedField("section", FieldGroup.CATEGORY, self.section)
        yield IndexedField("article_type", FieldGroup.CATEGORY, self.article_type)
        for i, tag in enumerate(self.tags):
            yield IndexedField(f"tag:{i}", FieldGroup.CATEGORY, tag)
        for language, text in self.texts.items():
            yield IndexedField(f"text:{language}", FieldGroup.CONTENT, text)
        yield IndexedField("number", FieldGroup.CONTENT, self.number)
        yield IndexedField("official_number", FieldGroup.CONTENT, self.official_number)

    def display_text(self, language: str) -> str:
        """Render the full article for display in a language.

        Official number first, then the title with a language prefix,
        then the body. Falls back to English, then Croatian, when the
        requested language has no text.

        Args:
            language: Language code

        Returns:
            Display text
        """
        parts = []
        if self.official_number:
            parts.append(self.official_number)
        if self.title:
            prefix = TITLE_PREFIXES.get(language, TITLE_PREFIXES["en"])
            parts.append(f"{prefix}{self.title}")
        body = self.text(language) or self.text("en") or self.text("hr")
        if body:
            parts.append(body)
        return "\n\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "texts": dict(self.texts),
            "title": self.title,
            "section": self.section,
            "article_type": self.article_type,
            "keywords": list(self.keywords),
            "tags": list(self.tags),
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            "number": self.number,
            "official_number": self.official_number,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], doc_id: Optional[str] = None) -> "Document":
        """Create from a canonical or exported article mapping.

        Accepts both the canonical keys produced by to_dict() and the
        exported article shape (croatian/english/spanish bodies,
        officialNumber, articleType, lastUpdated).

        Args:
            data: Record mapping
            doc_id: Identifier to use when the record carries none

        Returns:
            Document

        Raises:
            ValueError: If no identifier is available
        """
        identifier = data.get("id") or doc_id
        if not identifier:
            raise ValueError("Document record has no id")

        texts: Dict[str, str] = {}
        for language, text in (data.get("texts") or {}).items():
            texts[language] = _as_text(text)
        for alias, language in LANGUAGE_ALIASES.items():
            if alias in data and language not in texts:
                texts[language] = _as_text(data[alias])
        for language in SUPPORTED_LANGUAGES:
            if language in data and language not in texts:
                texts[language] = _as_text(data[language])
            texts.setdefault(language, "")

        return cls(
            id=str(identifier),
            texts=texts,
            title=_as_text(data.get("title")),
            section=_as_text(data.get("section")),
            article_type=_as_text(_first(data, "article_type", "articleType")),
            keywords=_as_tuple(data.get("keywords")),
            tags=_as_tuple(data.get("tags")),
            last_modified=_as_datetime(_first(data, "last_modified", "lastUpdated")),
            number=_as_text(data.get("number")),
            official_number=_as_text(_first(data, "official_number", "officialNumber")),
        )


CorpusSource = Union[
    Iterable[Union[Document, Mapping[str, Any]]],
    Mapping[str, Union[Document, Mapping[str, Any]]],
]


def load_documents(source: CorpusSource) -> List[Document]:
    """Resolve any supported corpus shape into an ordered Document list.

    Args:
        source: Sequence of Documents or record mappings, or a mapping
            of id to Document/record

    Returns:
        Ordered list of Documents

    Raises:
        TypeError: If the source or one of its records has an unsupported type
        ValueError: If a record has no id
    """
    if source is None:
        return []

    if isinstance(source, Mapping):
        items: Iterable[Tuple[Optional[str], Any]] = (
            (str(key), value) for key, value in source.items()
        )
    elif isinstance(source, (str, bytes)):
        raise TypeError("Corpus must be a sequence or mapping of records, not a string")
    else:
        items = ((None, value) for value in source)

    documents = []
    for key, record in items:
        if isinstance(record, Document):
            documents.append(record)
        elif isinstance(record, Mapping):
            documents.append(Document.from_dict(record, doc_id=key))
        else:
            raise TypeError(f"Unsupported corpus record type: {type(record).__name__}")

    logger.debug(f"Loaded {len(documents)} documents")
    return documents


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_tuple(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(_as_text(v) for v in value if v is not None)


def _as_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        logger.warning(f"Ignoring unparseable timestamp: {value!r}")
        return None


__all__ = [
    "Document",
    "FieldGroup",
    "IndexedField",
    "SUPPORTED_LANGUAGES",
    "load_documents",
]
