"""LexSearch Corpus Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsearch_core.corpus.document import (
    Document,
    FieldGroup,
    IndexedField,
    SUPPORTED_LANGUAGES,
    load_documents,
)
from lexsearch_core.corpus.sample import SAMPLE_ARTICLES, sample_documents

__all__ = [
    "Document",
    "FieldGroup",
    "IndexedField",
    "SUPPORTED_LANGUAGES",
    "load_documents",
    "SAMPLE_ARTICLES",
    "sample_documents",
]
