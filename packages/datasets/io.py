from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine.errors import CorpusLoadError

DEFAULT_DICTIONARY = "dictionary.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_corpus(p: Path | str = DEFAULT_DICTIONARY) -> List[str]:
    """
    Load the dictionary: one word per line, lowercased, blanks dropped,
    file order kept.

    Raises CorpusLoadError if the file is missing, unreadable, or holds no
    words; no round can start without a corpus.
    """
    try:
        lines = read_lines(p)
    except FileNotFoundError as e:
        raise CorpusLoadError(f"Could not open dictionary file: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"Could not read dictionary file: {p} ({e})") from e

    words = [w.strip().lower() for w in lines if w.strip()]
    if not words:
        raise CorpusLoadError(f"The dictionary is empty: {p}")
    return words
