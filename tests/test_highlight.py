"""Tests for match highlighting."""

from lexsearch_core.ranking import Highlighter


def test_marks_every_occurrence():
    text = "Odmor i odmor"
    assert Highlighter().highlight(text, ["odmor"]) == "<mark>Odmor</mark> i <mark>odmor</mark>"


def test_overlapping_and_touching_spans_merge():
    highlighter = Highlighter()
    assert highlighter.highlight("Godišnji odmor", ["godišnji", "godi"]) == "<mark>Godišnji</mark> odmor"
    assert highlighter.highlight("abcdef", ["abc", "def"]) == "<mark>abcdef</mark>"


def test_short_terms_are_not_marked():
    assert Highlighter().highlight("na odmor", ["na", "od"]) == "na odmor"


def test_terms_are_literal():
    assert Highlighter().highlight("a (b) c.*d", [".*d"]) == "a (b) c<mark>.*d</mark>"


def test_custom_tags():
    highlighter = Highlighter("<em>", "</em>")
    assert highlighter.highlight("Rodiljski dopust", ["dopust"]) == "Rodiljski <em>dopust</em>"


def test_empty_text():
    assert Highlighter().highlight("", ["odmor"]) == ""
    assert Highlighter().spans("odmor", []) == []
