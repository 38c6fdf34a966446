"""Tests for search options."""

import pytest

from lexsearch_core.query import SearchOptions


def test_defaults():
    options = SearchOptions()
    assert (options.max_results, options.min_relevance, options.fuzzy_threshold) == (25, 0.0001, 0.5)
    assert options.translate and options.fuzzy


@pytest.mark.parametrize("preset,expected", [
    (SearchOptions.standard, (25, 0.0001, 0.5)),
    (SearchOptions.relaxed, (35, 0.00001, 0.4)),
    (SearchOptions.ultra_relaxed, (45, 0.000001, 0.4)),
    (SearchOptions.auto_search, (8, 0.1, 0.5)),
])
def test_presets(preset, expected):
    options = preset()
    assert (options.max_results, options.min_relevance, options.fuzzy_threshold) == expected


def test_presets_accept_overrides():
    assert SearchOptions.relaxed(section="leave").section == "leave"


@pytest.mark.parametrize("value", [0, -5, "10", True, 2.5])
def test_invalid_max_results(value):
    options, warnings = SearchOptions(max_results=value).clamped()
    assert options.max_results == 25
    assert len(warnings) == 1


def test_clamps_relevance_and_threshold():
    options, warnings = SearchOptions(min_relevance=-1, fuzzy_threshold=1.5).clamped()
    assert options.min_relevance == 0.0
    assert options.fuzzy_threshold == 1.0
    assert len(warnings) == 2
    assert SearchOptions(fuzzy_threshold=0).clamped()[0].fuzzy_threshold == 0.5


def test_target_language():
    assert SearchOptions(target_language="EN").clamped() == (SearchOptions(target_language="en"), [])
    options, warnings = SearchOptions(target_language="de").clamped()
    assert options.target_language is None
    assert warnings


def test_valid_options_are_unchanged():
    options = SearchOptions(section="leave")
    assert options.clamped() == (options, [])


def test_with_overrides():
    options = SearchOptions().with_overrides(max_results=3)
    assert options.max_results == 3
    with pytest.raises(TypeError):
        SearchOptions().with_overrides(colour="red")


def test_to_dict():
    assert SearchOptions().to_dict()["max_results"] == 25
    assert set(SearchOptions().to_dict()) == {
        "max_results", "min_relevance", "fuzzy_threshold", "section",
        "article_type", "target_language", "translate", "fuzzy",
        "sort_by", "sort_order",
    }


@pytest.mark.parametrize("field", ["min_relevance", "fuzzy_threshold"])
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_are_replaced(field, value):
    options, warnings = SearchOptions(**{field: value}).clamped()
    assert getattr(options, field) == (0.0 if field == "min_relevance" else 0.5)
    assert len(warnings) == 1


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_filters_mean_any(value):
    options, warnings = SearchOptions(section=value, article_type=value).clamped()
    assert options.section is None
    assert options.article_type is None
    assert warnings == []


def test_sort_options():
    options = SearchOptions()
    assert (options.sort_by, options.sort_order) == ("relevance", "desc")
    assert SearchOptions(sort_by="DATE", sort_order="Asc").clamped() == (
        SearchOptions(sort_by="date", sort_order="asc"), [],
    )
    options, warnings = SearchOptions(sort_by="author", sort_order="up").clamped()
    assert (options.sort_by, options.sort_order) == ("relevance", "desc")
    assert len(warnings) == 2
