"""Shared fixtures."""

import pytest

from lexsearch_core import SearchEngine, sample_documents
from lexsearch_core.index import IndexBuilder


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def documents():
    return sample_documents()


@pytest.fixture
def documents_by_id(documents):
    return {doc.id: doc for doc in documents}


@pytest.fixture
def index(documents):
    return IndexBuilder().build(documents)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(documents, clock):
    return SearchEngine(documents, clock=clock)
