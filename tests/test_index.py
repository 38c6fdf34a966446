"""Tests for index building and lookup."""

import asyncio

import pytest

from lexsearch_core.analyzers import normalize
from lexsearch_core.corpus import Document, FieldGroup
from lexsearch_core.index import IndexBuilder


def test_every_field_is_indexed(index):
    assert "art_006" in index.doc_ids("odmor")
    assert "art_006" in index.doc_ids("vacaciones")
    assert "art_006" in index.doc_ids("leave")
    assert "art_007" in index.doc_ids("termination")
    assert "art_006" in index.doc_ids("članak")


def test_every_token_maps_to_a_corpus_document(index, documents):
    ids = {d.id for d in documents}
    for doc_ids in index.as_mapping().values():
        assert doc_ids <= ids


def test_indexed_tokens_come_from_the_document(index, documents):
    doc = documents[5]
    tokens = set()
    for f in doc.iter_fields():
        tokens.update(normalize(f.text))
    indexed = {t for t, ids in index.as_mapping().items() if doc.id in ids}
    assert indexed == tokens


def test_build_is_idempotent(documents):
    builder = IndexBuilder()
    assert builder.build(documents).as_mapping() == builder.build(documents).as_mapping()


@pytest.mark.parametrize("batch_size", [1, 3, 100])
def test_batch_size_does_not_change_index(documents, batch_size):
    expected = IndexBuilder(batch_size=2).build(documents).as_mapping()
    assert IndexBuilder(batch_size=batch_size).build(documents).as_mapping() == expected


def test_async_build_matches_sync_build(documents):
    builder = IndexBuilder()
    built = asyncio.run(builder.build_async(documents))
    assert built.as_mapping() == builder.build(documents).as_mapping()
    assert builder.last_stats.batches == 4


def test_build_stats(documents):
    builder = IndexBuilder(batch_size=3)
    index = builder.build(documents)
    stats = builder.last_stats
    assert stats.documents == 8
    assert stats.batches == 3
    assert stats.term_count == index.term_count == len(index)


def test_duplicate_ids_keep_later_record():
    builder = IndexBuilder()
    index = builder.build([
        Document(id="a", title="prvi"),
        Document(id="b", title="drugi"),
        Document(id="a", title="treći"),
    ])
    assert builder.last_stats.duplicates == 1
    assert index.doc_ids("treći") == {"a"}
    assert "prvi" not in index


def test_bad_document_is_skipped():
    builder = IndexBuilder()
    index = builder.build([
        Document(id="bad", texts={"hr": 123}),
        Document(id="good", title="odmor"),
    ])
    assert builder.last_stats.skipped == 1
    assert index.document_ids == frozenset({"good"})


def test_invalid_batch_size():
    with pytest.raises(ValueError):
        IndexBuilder(batch_size=0)


def test_phrase_search_requires_contiguous_tokens(index):
    matches = index.phrase_search(["godišnji", "odmor"])
    assert FieldGroup.TITLE in matches["art_006"]
    assert "art_006" not in index.phrase_search(["odmor", "godišnji"])
    assert index.phrase_search(["odmor", "nepostojeći"]) == {}
    assert index.phrase_search([]) == {}


def test_prefix_and_wildcard_terms(index):
    prefixed = index.prefix_terms("odm")
    assert "odmor" in prefixed
    assert prefixed == sorted(prefixed)
    assert all(t.startswith("odm") for t in prefixed)
    assert index.prefix_terms("odm", limit=1) == prefixed[:1]
    assert "dopust" in index.wildcard_terms("*dopust")
    assert "rodiljski" in index.wildcard_terms("rodilj*")


def test_field_contains(index):
    assert index.field_contains("vacaciones", "art_006", "text:es")
    assert not index.field_contains("vacaciones", "art_006", "text:hr")
