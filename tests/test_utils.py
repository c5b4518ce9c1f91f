"""
Tests for result formatting.
"""

import pytest


@pytest.fixture
def formatter(fox_engine):
    return fox_engine.result_formatter


class TestHighlight:
    """Tests for ResultFormatter.highlight_words."""

    def test_matches_analyzed_form(self, formatter):
        assert formatter.highlight_words("The Cats sat", ["cat"]) == "The [[Cats]] sat"

    def test_no_tokens(self, formatter):
        assert formatter.highlight_words("The cats sat", []) == "The cats sat"

    def test_stop_words_never_highlighted(self, formatter):
        assert formatter.highlight_words("the fox", ["the", "fox"]) == "the [[fox]]"


class TestSnippet:
    """Tests for ResultFormatter.make_snippet."""

    def test_short_text(self, formatter):
        assert formatter.make_snippet("quick\nfox", ["fox"]) == "quick [[fox]]"

    def test_long_text_centered_on_match(self, formatter):
        text = "filler " * 100 + "fox " + "filler " * 100
        snippet = formatter.make_snippet(text, ["fox"], max_chars=60)
        assert snippet.startswith("…")
        assert snippet.endswith("…")
        assert "[[fox]]" in snippet

    def test_long_text_without_match(self, formatter):
        snippet = formatter.make_snippet("word " * 100, ["fox"], max_chars=20)
        assert snippet == ("word " * 4) + "…"


class TestPrinting:
    """Tests for console rendering."""

    def test_table(self, fox_engine, capsys):
        results, tokens = fox_engine.evaluate("quick fox")
        fox_engine.result_formatter.print_results_table(results, fox_engine.documents, tokens)
        out = capsys.readouterr().out
        assert "=== Top Results ===" in out
        assert "Brown fox" in out
        assert "http://example.com/0" in out

    def test_table_unranked_scores(self, fox_engine, capsys):
        fox_engine.result_formatter.print_results_table([(2, None)], fox_engine.documents, [])
        out = capsys.readouterr().out
        assert "Turtle" in out
        assert " - " in out

    def test_empty_results(self, formatter, fox_engine, capsys):
        formatter.print_results_table([], fox_engine.documents, [])
        assert "No results found." in capsys.readouterr().out

    def test_list_format(self, make_engine, capsys):
        engine = make_engine([("Fox", "u0", "quick fox"), ("", "", "slow turtle")], RESULT_FORMAT="list")
        results, tokens = engine.evaluate("fox")
        engine.result_formatter.print_results(results, engine.documents, tokens)
        out = capsys.readouterr().out
        assert "#1  id=0" in out
        assert "quick [[fox]]" in out
