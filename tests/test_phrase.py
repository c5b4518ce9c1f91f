"""
Tests for exact phrase search.
"""

import pytest

from fulltext_search.phrase import contains_exact_phrase, strip_quotes


@pytest.fixture
def mat_engine(make_engine):
    return make_engine([
        ("Mat", "", "the cat sat on the mat"),
        ("Dog", "", "the dog sat on the cat"),
        ("Rug", "", "a cat sat quietly on a rug"),
    ])


class TestContainsExactPhrase:
    """Tests for the sliding-window matcher."""

    def test_contiguous_match(self):
        assert contains_exact_phrase(["cat", "sat", "mat"], ["cat", "sat"])
        assert contains_exact_phrase(["cat", "sat", "mat"], ["sat", "mat"])

    def test_order_matters(self):
        assert not contains_exact_phrase(["cat", "sat", "mat"], ["sat", "cat"])

    def test_gap_does_not_match(self):
        assert not contains_exact_phrase(["cat", "sat", "mat"], ["cat", "mat"])

    def test_phrase_longer_than_document(self):
        assert not contains_exact_phrase(["cat"], ["cat", "sat"])

    def test_empty_phrase(self):
        assert not contains_exact_phrase(["cat"], [])

    def test_whole_document(self):
        assert contains_exact_phrase(["cat", "sat"], ["cat", "sat"])


class TestSearchPhrase:
    """Tests for SearchEngine.search_phrase."""

    def test_exact_phrase(self, mat_engine):
        assert mat_engine.search_phrase('"cat sat"') == [0, 2]

    def test_reversed_phrase(self, mat_engine):
        assert mat_engine.search_phrase('"sat cat"') == []

    def test_non_contiguous_phrase(self, mat_engine):
        assert mat_engine.search_phrase('"cat mat"') == []

    def test_case_and_quotes_ignored(self, mat_engine):
        assert mat_engine.search_phrase('"Cat SAT"') == [0, 2]
        assert mat_engine.search_phrase("cat sat") == [0, 2]

    def test_stop_words_dropped_from_phrase(self, mat_engine):
        assert mat_engine.search_phrase('"sat on the mat"') == [0]

    def test_absent_first_token(self, mat_engine):
        assert mat_engine.search_phrase('"zebra cat"') == []

    def test_empty_phrase(self, mat_engine):
        assert mat_engine.search_phrase('""') == []
        assert mat_engine.search_phrase('"the on"') == []

    def test_single_token_phrase_returns_posting_order(self, mat_engine):
        assert mat_engine.search_phrase('"cat"') == [0, 1, 2]


def test_strip_quotes():
    assert strip_quotes('"cat sat"') == "cat sat"
    assert strip_quotes('say "hi" now') == "say hi now"
