"""
Download a word list and write it as a Knowsall dictionary.

What it does:
- Downloads the URL (plain-text list or an HTML page).
- HTML pages are reduced to their visible text first.
- Keeps lowercase a–z tokens inside the length window, de-duplicated in
  page order, and writes one word per line.

Usage:
    python -m script.fetch_dictionary --url https://example.org/words.txt --out dictionary.txt
    # only 4..8 letter words, alphabetically sorted:
    python -m script.fetch_dictionary --url ... --min-len 4 --max-len 8 --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets.io import write_lines
from script.prepare_dictionary import clean_words

TOKEN_RE = re.compile(r"[A-Za-z]+")


def extract_words(body: str, *, html: bool) -> list[str]:
    """Pull word tokens out of a response body (page order, lowercased)."""
    text = BeautifulSoup(body, "html.parser").get_text("\n", strip=True) if html else body
    return [m.group(0).lower() for m in TOKEN_RE.finditer(text)]


def fetch_words(url: str, *, min_len: int = 1, max_len: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    html = "html" in r.headers.get("Content-Type", "")
    return clean_words(extract_words(r.text, html=html), min_len=min_len, max_len=max_len)


def main():
    ap = argparse.ArgumentParser(description="Download a word list as a Knowsall dictionary")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="dictionary.txt")
    ap.add_argument("--min-len", type=int, default=1)
    ap.add_argument("--max-len", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
