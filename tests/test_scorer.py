"""Tests for relevance scoring."""

from datetime import datetime

import pytest

from lexsearch_core.corpus import Document
from lexsearch_core.index import IndexBuilder
from lexsearch_core.query import Occur, QueryParser, QueryTranslator, SearchOptions
from lexsearch_core.ranking import FieldWeights, RelevanceScorer, ScoredResult, sort_results


@pytest.fixture
def run(index, documents_by_id):
    parser = QueryParser()
    translator = QueryTranslator()
    scorer = RelevanceScorer()

    def run(raw, translate=False, **options):
        query = parser.parse(raw)
        if translate:
            translator.expand(query)
        return scorer.score(query, index, documents_by_id, SearchOptions(**options))

    return run


def test_scores_are_normalized_and_ordered(run):
    results = run("godišnji odmor radnik", translate=True)
    assert results
    assert all(0.0 < r.score <= 1.0 for r in results)
    keys = [(-r.score, r.id) for r in results]
    assert keys == sorted(keys)


def test_title_match_ranks_first(run):
    assert run("godišnji odmor")[0].id == "art_006"


def test_required_terms_filter(run, index):
    results = run("+dopust odmor", fuzzy=False)
    assert results
    assert all(r.id in index.doc_ids("dopust") for r in results)


def test_excluded_terms_filter(run, index):
    results = run("odmor -otkazni")
    assert results
    assert not any(r.id in index.doc_ids("otkazni") for r in results)


def test_excluded_phrase_filter(run):
    assert "art_006" not in [r.id for r in run('odmor -"godišnji odmor"')]


def test_empty_and_negative_only_queries(run):
    assert run("") == []
    assert run("-odmor") == []


def test_fuzzy_matching_can_be_disabled(run):
    assert "art_006" in [r.id for r in run("godisnji")]
    assert run("godisnji", fuzzy=False) == []


def test_wildcard_matches(run):
    assert "art_008" in [r.id for r in run("rodilj*")]


def test_filters_and_limits(run):
    assert all(r.document.section == "leave" for r in run("odmor", section="leave"))
    assert all(r.document.article_type == "notice" for r in run("dana", article_type="notice"))
    assert all(r.score >= 0.3 for r in run("odmor", min_relevance=0.3))
    assert len(run("dana radnik odmor", max_results=2)) <= 2


def test_display_language_follows_matched_text(run):
    result = run("annual leave", fuzzy=False)[0]
    assert result.id == "art_006"
    assert result.language == "en"
    assert "Title: Godišnji odmor" in result.highlighted_text
    assert "<mark>annual</mark> <mark>leave</mark>" in result.highlighted_text


def test_target_language_wins(run):
    result = run("odmor", target_language="es")[0]
    assert result.language == "es"
    assert "Título: " in result.highlighted_text


def test_default_language_when_no_text_matches(index, documents_by_id):
    scorer = RelevanceScorer(default_language="en")
    # only a tag of the leave article mentions it
    query = QueryParser().parse("vacation")
    result = scorer.score(query, index, documents_by_id, SearchOptions(fuzzy=False, section="leave"))
    assert result[0].language == "en"


def test_term_groups_carry_kind_weights():
    query = QueryParser().parse('+odmor plaća "otkazni rok" odm* -dopust')
    groups = RelevanceScorer().build_groups(query)
    assert [(g.occur, g.weight) for g in groups] == [
        (Occur.MUST, 2.0),
        (Occur.SHOULD, 1.0),
        (Occur.SHOULD, 1.5),
        (Occur.SHOULD, 1.3),
    ]


def test_translated_variants_are_discounted():
    query = QueryParser().parse("vacaciones")
    QueryTranslator().expand(query)
    group = RelevanceScorer().build_groups(query)[0]
    assert [(v.tokens, v.factor) for v in group.variants] == [
        (("vacaciones",), 1.0),
        (("odmor",), 0.8),
        (("leave",), 0.8),
    ]


def test_field_weights():
    weights = FieldWeights()
    assert weights.total == 7.5


def test_blank_filters_are_ignored(run):
    expected = [r.id for r in run("odmor")]
    assert [r.id for r in run("odmor", section="", article_type="")] == expected


@pytest.fixture
def dated():
    documents = [
        Document(id="a", title="Zakon odmor", last_modified=datetime(2023, 1, 1)),
        Document(id="b", title="Odmor radnika", last_modified=datetime(2024, 5, 1)),
        Document(id="c", title="Plaćeni odmor"),
    ]
    index = IndexBuilder().build(documents)
    by_id = {doc.id: doc for doc in documents}

    def run(**options):
        query = QueryParser().parse("odmor")
        results = RelevanceScorer().score(query, index, by_id, SearchOptions(**options))
        return [r.id for r in results]

    return run


def test_sort_by_date_puts_undated_last(dated):
    assert dated(sort_by="date") == ["b", "a", "c"]
    assert dated(sort_by="date", sort_order="asc") == ["a", "b", "c"]


def test_sort_by_title(dated):
    assert dated(sort_by="title", sort_order="asc") == ["b", "c", "a"]
    assert dated(sort_by="title") == ["a", "c", "b"]


def test_sort_is_applied_before_truncation(dated):
    assert dated(sort_by="date", sort_order="asc", max_results=1) == ["a"]


def test_equal_scores_keep_id_order_in_both_directions():
    results = [
        ScoredResult(Document(id="b"), 0.5),
        ScoredResult(Document(id="a"), 0.5),
        ScoredResult(Document(id="c"), 0.9),
    ]
    sort_results(results)
    assert [r.id for r in results] == ["c", "a", "b"]
    sort_results(results, sort_order="asc")
    assert [r.id for r in results] == ["a", "b", "c"]
