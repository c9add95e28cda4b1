"""
Candidate filtering given the current knowledge state.

Given:
  - a pool of words (the corpus, or an already filtered candidate list)
  - the revealed pattern ('_' for blanks)
  - the set of letters tried so far

Return:
  - words that are still consistent with everything recorded.

A word survives iff it has the pattern's length, matches every revealed slot
exactly, and holds no tried letter in a blank slot. A tried letter is either
absent from the secret or already revealed at all of its positions, so it can
never fill a blank.

The result may be empty; that means the recorded answers contradict each
other (or the word is not in the corpus) and is for the caller to handle.
"""

from typing import AbstractSet, Iterable, List, Sequence
from .knowledge import BLANK


def filter_candidates(words: Iterable[str], pattern: Sequence[str],
                      tried: AbstractSet[str]) -> List[str]:
    """
    Keep only words consistent with `pattern` and `tried`.

    Args:
      words   : iterable of candidate words
      pattern : sequence of revealed letters / BLANK (a str like 'ca_' works too)
      tried   : letters already asked about

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    N = len(pattern)
    out: List[str] = []

    for w in words:
        if len(w) != N:
            continue

        consistent = True
        for p, ch in zip(pattern, w):
            if p == BLANK:
                if ch in tried:
                    consistent = False
                    break
            elif p != ch:
                consistent = False
                break

        if consistent:
            out.append(w)

    return out
