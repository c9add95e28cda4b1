import sys

from script import prepare_dictionary
from script.prepare_dictionary import clean_words
from script.fetch_dictionary import extract_words


def test_clean_words_normalizes_filters_and_dedupes():
    lines = ["Cat", "  dog ", "", "don't", "cat", "a", "elephant", "café"]
    assert clean_words(lines) == ["cat", "dog", "a", "elephant"]
    assert clean_words(lines, min_len=2, max_len=3) == ["cat", "dog"]


def test_extract_words_from_html_and_text():
    html = "<html><body><h1>Words</h1><ul><li>Apple</li><li>pear</li></ul><script></script></body></html>"
    assert extract_words(html, html=True) == ["words", "apple", "pear"]
    assert extract_words("one\ntwo three\n", html=False) == ["one", "two", "three"]


def test_prepare_dictionary_main_writes_clean_file(tmp_path, monkeypatch, capsys):
    raw = tmp_path / "raw.txt"
    raw.write_text("Zebra\ncat\n\ndon't\ncat\napple\n", encoding="utf-8")
    out = tmp_path / "out" / "dictionary.txt"
    monkeypatch.setattr(sys, "argv", ["prepare_dictionary", "--in", str(raw),
                                      "--out", str(out), "--sort"])
    prepare_dictionary.main()
    assert out.read_text(encoding="utf-8") == "apple\ncat\nzebra\n"
    assert "3 words" in capsys.readouterr().out
