"""Tests for corpus ingestion."""

from datetime import datetime

import pytest

from lexsearch_core.corpus import Document, FieldGroup, load_documents, sample_documents


def test_sample_corpus_has_eight_articles():
    documents = sample_documents()
    assert [d.id for d in documents] == [f"art_00{i}" for i in range(1, 9)]


def test_exported_record_shape_is_resolved():
    doc = Document.from_dict({
        "id": "a1",
        "croatian": "Tekst",
        "english": "Text",
        "officialNumber": "Članak 1 (NN 1/24)",
        "articleType": "scope",
        "lastUpdated": "2024-08-20",
        "keywords": ["k1", None, "k2"],
    })
    assert doc.texts == {"hr": "Tekst", "en": "Text", "es": ""}
    assert doc.official_number == "Članak 1 (NN 1/24)"
    assert doc.article_type == "scope"
    assert doc.last_modified == datetime(2024, 8, 20)
    assert doc.keywords == ("k1", "k2")


def test_canonical_shape_round_trips():
    doc = sample_documents()[5]
    assert Document.from_dict(doc.to_dict()) == doc


def test_mapping_source_supplies_ids():
    documents = load_documents({"x": {"title": "Naslov"}, "y": Document(id="y")})
    assert [d.id for d in documents] == ["x", "y"]


def test_missing_fields_are_empty():
    doc = Document.from_dict({"id": "x", "title": None, "keywords": None})
    assert doc.title == ""
    assert doc.keywords == ()
    assert doc.text("es") == ""


def test_bad_timestamp_is_ignored():
    assert Document.from_dict({"id": "x", "lastUpdated": "yesterday"}).last_modified is None


def test_record_without_id_raises():
    with pytest.raises(ValueError):
        load_documents([{"title": "no id"}])


def test_unsupported_sources_raise():
    with pytest.raises(TypeError):
        load_documents("art_001")
    with pytest.raises(TypeError):
        load_documents([42])


def test_none_source_is_empty():
    assert load_documents(None) == []


def test_iter_fields_groups():
    doc = sample_documents()[5]
    groups = {f.name: f.group for f in doc.iter_fields()}
    assert groups["title"] == FieldGroup.TITLE
    assert groups["keyword:0"] == FieldGroup.KEYWORDS
    assert groups["section"] == FieldGroup.CATEGORY
    assert groups["tag:0"] == FieldGroup.CATEGORY
    assert groups["text:hr"] == FieldGroup.CONTENT
    assert groups["official_number"] == FieldGroup.CONTENT


def test_display_text_layout():
    doc = sample_documents()[5]
    hr = doc.display_text("hr").split("\n\n")
    assert hr[0] == "Članak 73 (NN 93/14, 98/19)"
    assert hr[1] == "Godišnji odmor"
    assert doc.display_text("en").split("\n\n")[1] == "Title: Godišnji odmor"
    assert doc.display_text("es").split("\n\n")[1] == "Título: Godišnji odmor"


def test_display_text_falls_back_to_english():
    doc = Document(id="x", texts={"hr": "Tekst", "en": "Text", "es": ""}, title="T")
    assert doc.display_text("es").endswith("Text")
