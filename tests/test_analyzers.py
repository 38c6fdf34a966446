"""Tests for the legal text normalizer."""

from lexsearch_core.analyzers import (
    LegalTextAnalyzer,
    analyze,
    clean_word,
    get_analyzer,
    normalize,
)


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Radnik ima pravo, na GODIŠNJI odmor!") == [
        "radnik", "ima", "pravo", "godišnji", "odmor",
    ]


def test_normalize_keeps_diacritics_and_digits():
    assert normalize("Članak 73 (NN 93/14)") == ["članak", "9314"]
    assert normalize("Título: vacaciones años") == ["título", "vacaciones", "años"]


def test_normalize_drops_short_tokens():
    assert normalize("o na de of the") == ["the"]


def test_normalize_empty_input():
    assert normalize(None) == []
    assert normalize("") == []
    assert normalize("   \n\t ") == []


def test_normalize_returns_fresh_list():
    first = normalize("godišnji odmor")
    first.append("extra")
    assert normalize("godišnji odmor") == ["godišnji", "odmor"]


def test_analyze_keeps_offsets_and_renumbers_positions():
    stream = analyze("a  Godišnji odmor.")
    assert stream.get_texts() == ["godišnji", "odmor"]
    assert [t.position for t in stream] == [0, 1]
    assert stream[0].start_offset == 3
    assert stream[1].end_offset == len("a  Godišnji odmor.")


def test_legal_analyzer_is_registered():
    assert isinstance(get_analyzer("legal"), LegalTextAnalyzer)


def test_custom_min_token_length():
    assert LegalTextAnalyzer(min_token_length=2).get_terms("na odmor") == ["na", "odmor"]


def test_clean_word_keeps_short_words():
    assert clean_word("Odmor,") == "odmor"
    assert clean_word("OD") == "od"
    assert clean_word("...") == ""
