"""
Tests for query-mode classification.
"""

from fulltext_search import QueryMode, classify_query


def test_quote_selects_phrase():
    assert classify_query('"domestic cat"') == QueryMode.PHRASE


def test_quote_wins_over_star():
    assert classify_query('"cat*"') == QueryMode.PHRASE


def test_star_selects_wildcard():
    assert classify_query("cat*") == QueryMode.WILDCARD


def test_plain_text_selects_keyword():
    assert classify_query("small wild cat") == QueryMode.KEYWORD
    assert classify_query("") == QueryMode.KEYWORD


def test_mode_values():
    assert QueryMode("phrase") is QueryMode.PHRASE
    assert QueryMode.WILDCARD.value == "wildcard"
