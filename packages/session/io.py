"""
I/O utilities for rounds and simulation runs.

Responsibilities:
- GuessLog:      append-only record of every answered question.
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- summarize:     solve rate and question-count statistics for a batch.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np

DEFAULT_LOG_PATH = "knowsall_log.txt"


class GuessLog:
    """
    Append one line per answered question:
        Guess: <letter or word>, Response: <raw answer>

    Writing is best effort: an unwritable log never interrupts a round.
    """

    def __init__(self, path: Path | str = DEFAULT_LOG_PATH):
        self.path = Path(path)

    def append(self, guess: str, response: str) -> None:
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(f"Guess: {guess}, Response: {response}\n")
        except OSError:
            pass


def write_csv(results: List[Dict], path: str, max_questions: int) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      mode, answer, outcome, success, questions, asked, time_ms,
      q_1, a_1, q_2, a_2, ..., q_max_questions, a_max_questions

    Args:
      results      : list of dicts returned by Session.run().
      path         : output CSV path.
      max_questions: number of question/answer column pairs.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["mode", "answer", "outcome", "success", "questions", "asked", "time_ms"]
    for i in range(1, max_questions + 1):
        fields += [f"q_{i}", f"a_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "mode": r.get("mode", "?"),
                "answer": r["answer"],
                "outcome": r["outcome"],
                "success": r["success"],
                "questions": r["questions"],
                "asked": r["asked"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_questions + 1):
                if i <= len(hist):
                    q, a = hist[i - 1]
                    row[f"q_{i}"] = q
                    row[f"a_{i}"] = a
                else:
                    row[f"q_{i}"] = ""
                    row[f"a_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary report.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (modes, dictionary, seed, sample, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: solve rate, question counts over solved rounds, and
    how many rounds ended in each outcome.
    """
    outcomes = Counter(r["outcome"] for r in results)
    solved = np.array([r["questions"] for r in results if r["success"]], dtype=float)

    def _stat(fn) -> float | None:
        return round(float(fn(solved)), 3) if solved.size else None

    return {
        "rounds": len(results),
        "solve_rate": round(len(solved) / len(results), 4) if results else 0.0,
        "mean_questions": _stat(np.mean),
        "median_questions": _stat(np.median),
        "p90_questions": _stat(lambda a: np.percentile(a, 90)),
        "outcomes": dict(sorted(outcomes.items())),
    }


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except Exception:
        return "unknown"
