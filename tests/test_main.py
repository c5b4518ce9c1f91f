"""
Tests for the command-line interface.
"""

import gzip

import pytest

import main


DOCS = [
    ("Quick fox", "http://example.com/0", "the quick fox"),
    ("Brown fox", "http://example.com/1", "the quick brown fox"),
    ("Turtle", "http://example.com/2", "a slow turtle"),
]


def test_single_keyword_query(write_dump, capsys):
    path = write_dump(DOCS)
    main.main(["--file", str(path), "--query", "quick fox"])
    out = capsys.readouterr().out
    assert "Indexed 3 documents" in out
    assert "Quick fox" in out
    assert "Brown fox" in out
    assert "Turtle" not in out


def test_phrase_query(write_dump, capsys):
    path = write_dump(DOCS)
    main.main(["--file", str(path), "--query", '"quick brown"'])
    out = capsys.readouterr().out
    assert "Brown fox" in out
    assert "http://example.com/0" not in out


def test_forced_mode(write_dump, capsys):
    path = write_dump(DOCS)
    main.main(["--file", str(path), "--query", "turtl*", "--mode", "wildcard"])
    assert "Turtle" in capsys.readouterr().out


def test_no_results(write_dump, capsys):
    path = write_dump(DOCS)
    main.main(["--file", str(path), "--query", "zebra"])
    assert "No results found." in capsys.readouterr().out


def test_stats_only(write_dump, capsys):
    path = write_dump(DOCS)
    main.main(["--file", str(path), "--stats"])
    out = capsys.readouterr().out
    assert "=== Index Statistics ===" in out
    assert "documents_indexed: 3" in out


def test_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--file", str(tmp_path / "missing.xml.gz"), "--query", "fox"])
    assert exc.value.code == 1
    assert "Error loading corpus" in capsys.readouterr().out


def test_corrupted_gzip_exits(tmp_path, capsys):
    docs = "".join(f"<doc><title>fox {i}</title><abstract>body {i}</abstract></doc>" for i in range(200))
    data = bytearray(gzip.compress(f"<feed>{docs}</feed>".encode("utf-8")))
    for i in range(20, 60):
        data[i] ^= 0xFF
    path = tmp_path / "dump.xml.gz"
    path.write_bytes(bytes(data))
    with pytest.raises(SystemExit) as exc:
        main.main(["--file", str(path), "--query", "fox"])
    assert exc.value.code == 1
    assert "Error loading corpus" in capsys.readouterr().out
