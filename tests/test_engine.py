"""Tests for the search engine."""

import asyncio
import threading

import pytest

from lexsearch_core import Document, EngineState, SearchConfig, SearchEngine, SearchOptions
from lexsearch_core.analyzers import clean_word
from lexsearch_core.query import TranslationTable


def test_annual_leave_ranks_its_article_first(engine):
    ids = engine.search("godišnji odmor").ids
    assert ids[0] == "art_006"
    assert "art_001" in ids
    assert ids.index("art_006") < ids.index("art_001")


def test_spanish_query_overlaps_croatian_results(engine):
    spanish = set(engine.search("vacaciones").ids)
    croatian = set(engine.search("odmor").ids)
    assert spanish
    assert spanish & croatian


def test_translation_finds_untranslated_article():
    table = TranslationTable({"vacaciones": {"hr": ["odmor", "godišnji"]}})
    docs = [
        Document(id="x", texts={"hr": "Pravo na odmor"}),
        Document(id="y", texts={"hr": "Plaća radnika"}),
    ]
    engine = SearchEngine(docs, translations=table)
    assert engine.search("vacaciones", fuzzy=False).ids == ["x"]
    assert engine.search("vacaciones", fuzzy=False, translate=False).ids == []

    untranslated = SearchEngine(docs, translations=table, config=SearchConfig(translate=False))
    assert untranslated.search("vacaciones", fuzzy=False).ids == []


def test_excluded_terms_never_returned(engine, index):
    ids = engine.search("odmor -godišnji").ids
    assert ids
    assert not set(ids) & index.doc_ids("godišnji")


@pytest.mark.parametrize("query", ["odmor", "dana radnik", "ugovor OR plaća", "*dan*"])
def test_result_count_is_bounded(engine, query):
    assert len(engine.search(query, max_results=2)) <= 2
    assert len(engine.search(query)) <= 25


def test_title_words_find_their_article(engine, documents):
    for doc in documents:
        assert doc.id in engine.search(doc.title).ids
        for word in doc.title.split():
            if len(clean_word(word)) >= 3:
                assert doc.id in engine.search(word).ids


def test_warm_cache_returns_identical_results(engine):
    cold = engine.search("otkazni rok")
    warm = engine.search("Otkazni  ROK")
    assert not cold.from_cache
    assert warm.from_cache
    assert [(h.id, h.score) for h in cold] == [(h.id, h.score) for h in warm]


def test_reload_invalidates_cache(engine):
    engine.search("odmor")
    engine.load([Document(id="n1", title="Odmor radnika")])
    result = engine.search("odmor")
    assert not result.from_cache
    assert result.ids == ["n1"]
    assert engine.get_stats().document_count == 1


def test_cache_expires(engine, clock):
    engine.search("odmor")
    clock.advance(3600)
    assert not engine.search("odmor").from_cache


def test_not_ready_before_load():
    engine = SearchEngine()
    result = engine.search("odmor")
    assert engine.state == EngineState.INITIALIZING
    assert not result.ready
    assert result.warnings == ["index not ready"]
    assert len(result) == 0
    assert engine.get_stats().cache_entries == 0


def test_not_ready_while_building(documents):
    engine = SearchEngine()

    async def scenario():
        task = asyncio.ensure_future(engine.load_async(documents))
        await asyncio.sleep(0)
        during = engine.search("odmor")
        state = engine.state
        await task
        return during, state

    during, state = asyncio.run(scenario())
    assert state == EngineState.BUILDING
    assert not during.ready
    assert engine.ready
    assert engine.search("odmor").hits


def test_ready_callbacks(documents):
    engine = SearchEngine()
    calls = []

    def failing(_):
        raise RuntimeError("boom")

    engine.on_ready(failing)
    engine.on_ready(calls.append)
    assert calls == []

    engine.load(documents)
    assert calls == [engine]
    assert engine.ready

    late = []
    engine.on_ready(late.append)
    assert late == [engine]


def test_wait_ready(documents):
    engine = SearchEngine()
    assert not engine.wait_ready(0.01)

    thread = threading.Thread(target=engine.load, args=(documents,))
    thread.start()
    assert engine.wait_ready(5)
    thread.join()


def test_failed_reload_keeps_previous_corpus(engine):
    with pytest.raises(TypeError):
        engine.load("not a corpus")
    assert engine.ready
    assert engine.search("odmor").hits


def test_invalid_options_are_clamped(engine):
    result = engine.search("odmor", max_results=-1)
    assert any("max_results" in w for w in result.warnings)
    assert 0 < len(result) <= 25


@pytest.mark.parametrize("field", ["fuzzy_threshold", "min_relevance"])
def test_nan_thresholds_fall_back_to_defaults(engine, field):
    expected = engine.search("odmor").ids
    result = engine.search("odmor", **{field: float("nan")})
    assert result.ids == expected
    assert any(field in w for w in result.warnings)


def test_blank_filters_match_everything(engine):
    expected = engine.search("odmor").ids
    assert expected
    assert engine.search("odmor", section="", article_type="").ids == expected


def test_sort_by_title(engine):
    result = engine.search("odmor", sort_by="title", sort_order="asc")
    titles = [hit.title.casefold() for hit in result]
    assert titles == sorted(titles)
    assert set(result.ids) == set(engine.search("odmor").ids)


def test_query_warnings_are_reported(engine):
    result = engine.search('"godišnji odmor')
    assert result.warnings
    assert result.hits


def test_slow_searches_are_reported(documents):
    engine = SearchEngine(documents, config=SearchConfig(slow_search_ms=-1))
    assert any(w.startswith("slow search") for w in engine.search("odmor").warnings)


def test_filters(engine):
    hits = engine.search("dana", section="termination")
    assert hits.ids == ["art_007"]
    assert engine.search("dana", SearchOptions(article_type="maternity")).ids == ["art_008"]


def test_hits_are_highlighted(engine):
    hit = engine.search("godišnji odmor")[0]
    assert "<mark>" in hit.highlighted_text
    assert hit.title == "Godišnji odmor"


def test_custom_highlight_tags(documents):
    engine = SearchEngine(documents, config=SearchConfig(highlight_pre_tag="[", highlight_post_tag="]"))
    assert "[odmor]" in engine.search("odmor", fuzzy=False)[0].highlighted_text


def test_stats(engine):
    engine.search("odmor")
    engine.search("odmor")
    stats = engine.get_stats()
    assert stats.state == EngineState.READY
    assert stats.document_count == 8
    assert stats.term_count > 0
    assert (stats.cache_hits, stats.cache_misses, stats.cache_entries) == (1, 1, 1)
    assert stats.total_searches == 2
    assert stats.sections == 6
    assert stats.avg_keywords > 0
    assert stats.to_dict()["state"] == "READY"


def test_suggest(engine):
    assert engine.suggest("o") == []
    assert engine.suggest("") == []
    suggestions = engine.suggest("odm")
    assert "odmor" in suggestions
    assert suggestions[0].startswith("odm")
    assert len(engine.suggest("ra", max_suggestions=3)) == 3
    assert "annual leave" in engine.suggest("annual leave")


def test_related(engine):
    assert [d.id for d in engine.related("art_004")] == ["art_005"]
    assert [d.id for d in engine.related("art_002")] == ["art_003", "art_001"]
    assert engine.related("missing") == []


def test_listings(engine):
    assert engine.sections() == [
        "contracts", "general", "leave", "protection", "termination", "working-time",
    ]
    assert len(engine.article_types()) == 8
    assert engine.get("art_006").title == "Godišnji odmor"
    assert engine.get("missing") is None
    assert [d.id for d in engine.documents_in_section("general")] == ["art_001", "art_002"]


def test_to_dict(engine):
    data = engine.search("odmor").to_dict()
    assert data["ready"] is True
    assert data["hits"][0]["id"] == "art_006"
