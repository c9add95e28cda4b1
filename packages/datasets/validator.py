"""
Dictionary validator for knowsall.

What this module does:
- Validate a dictionary file (one word per line).
- Enforce formatting rules (lowercase, a–z only, optionally exact length N).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Report how many words there are of each length (rounds only use words
  with the secret's length).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: int | None        # required word length (None = any)
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> count
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int | None) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N (when N is given)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            ok = w.isascii() and w.isalpha() and w == w.lower()
            if ok and (N is None or len(w) == N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str, N: int | None = None) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the dictionary (one word per line).
    N : int, optional
        Required word length; by default any length is accepted.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema) with:
          - counts, SHA-256, invalid-line count, length histogram
          - `passed` boolean (strict: requires non-empty and no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path=path, exists=False, N=N, count=0, unique_count=0,
                               invalid_lines=0, sha256="",
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    lengths = Counter(len(w) for w in words)

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        lengths=dict(sorted(lengths.items())),
    )

    if rep.count == 0:
        rep.issues.append("dictionary contains 0 valid words")
    if invalid:
        rep.issues.append(f"dictionary has {invalid} invalid line(s)")
    # Duplicates are reported but do not fail validation
    if rep.count != rep.unique_count:
        rep.issues.append("dictionary contains duplicate lines")

    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=dictionary.txt | words=3000 (uniq=3000, sha=abc123...) | lengths 3..12 | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = report.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    line = (
        f"dictionary={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | lengths {span} "
        f"| invalid={report['invalid_lines']} | {status}"
    )
    if report.get("N") is not None:
        line = f"N={report['N']} | " + line
    return line
