"""
Clean a word list into a Knowsall dictionary.

Features:
- Lowercases and strips every line; drops blank lines.
- Drops tokens that are not purely a–z (apostrophes, digits, accents).
- Optional length window (--min-len / --max-len).
- Stable dedupe (keeps first occurrence order); optional alphabetical sort.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.prepare_dictionary --in raw_words.txt --out dictionary.txt --min-len 3
"""

import argparse
import re
from pathlib import Path

from packages.datasets.io import read_lines, write_lines

WORD_RE = re.compile(r"^[a-z]+$")


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean_words(lines: list[str], *, min_len: int = 1, max_len: int | None = None) -> list[str]:
    """Normalize, keep a–z words inside the length window, dedupe in order."""
    words = []
    for s in lines:
        w = s.strip().lower()
        if not WORD_RE.match(w):
            continue
        if len(w) < min_len or (max_len is not None and len(w) > max_len):
            continue
        words.append(w)
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Clean a word list into a Knowsall dictionary.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-len", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--max-len", type=int, help="drop words longer than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp
    if not inp.exists():
        raise FileNotFoundError(inp)

    lines = read_lines(inp)
    out = clean_words(lines, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
