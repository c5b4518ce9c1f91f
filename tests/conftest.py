"""Test fixtures for the full-text search engine."""

import gzip

import pytest

from fulltext_search import Analyzer, SearchEngine, documents_from_records


@pytest.fixture
def analyzer():
    return Analyzer()


@pytest.fixture
def make_engine():
    """Build an engine from (title, url, text) records and config overrides."""

    def _make(records, **overrides):
        return SearchEngine(documents_from_records(records), config_dict=overrides or None)

    return _make


@pytest.fixture
def fox_engine(make_engine):
    """Three-document corpus used for boolean AND tests."""
    return make_engine([
        ("Quick fox", "http://example.com/0", "the quick fox"),
        ("Brown fox", "http://example.com/1", "the quick brown fox"),
        ("Turtle", "http://example.com/2", "a slow turtle"),
    ])


@pytest.fixture
def write_dump(tmp_path):
    """Write an XML abstract dump, gzip-compressed when the name ends in .gz."""

    def _write(docs, name="dump.xml.gz"):
        parts = ["<feed>"]
        for title, url, abstract in docs:
            parts.append(
                f"<doc><title>{title}</title><url>{url}</url><abstract>{abstract}</abstract></doc>"
            )
        parts.append("</feed>")
        data = "\n".join(parts).encode("utf-8")

        path = tmp_path / name
        if name.endswith(".gz"):
            with gzip.open(path, "wb") as f:
                f.write(data)
        else:
            path.write_bytes(data)
        return path

    return _write
