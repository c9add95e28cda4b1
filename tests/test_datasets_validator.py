from pathlib import Path

import pytest
from packages.datasets import validate_dictionary, pretty_summary, load_corpus
from packages.engine import CorpusLoadError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["cat", "car", "can", "apple"])

    rep = validate_dictionary(str(d))
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert rep["lengths"] == {3: 3, 5: 1}
    s = pretty_summary(rep)
    assert "words=4" in s and "lengths 3..5" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    # 'Cat' is not lowercase, "don't" has an apostrophe, blank line is invalid
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\nCat\ndon't\n\ndog\ndog\n", encoding="utf-8")

    rep = validate_dictionary(str(d))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_with_length(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["cat", "apple"])

    rep = validate_dictionary(str(d), N=3)
    assert rep["count"] == 1 and rep["invalid_lines"] == 1
    assert pretty_summary(rep).startswith("N=3 | ")


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_corpus_normalizes_and_keeps_order(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("Cat\n\n  dog \napple\r\n", encoding="utf-8")
    assert load_corpus(d) == ["cat", "dog", "apple"]


def test_load_corpus_failures(tmp_path: Path):
    with pytest.raises(CorpusLoadError, match="Could not open"):
        load_corpus(tmp_path / "missing.txt")

    empty = tmp_path / "empty.txt"
    empty.write_text("\n  \n", encoding="utf-8")
    with pytest.raises(CorpusLoadError, match="empty"):
        load_corpus(empty)

    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(CorpusLoadError, match="Could not read"):
        load_corpus(binary)
