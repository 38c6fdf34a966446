"""LexSearch Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsearch_core.index.builder import BuildStats, IndexBuilder
from lexsearch_core.index.inverted import (
    InvertedIndex,
    Posting,
    PostingList,
)

__all__ = [
    "BuildStats",
    "IndexBuilder",
    "InvertedIndex",
    "Posting",
    "PostingList",
]
