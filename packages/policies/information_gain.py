"""
Information-gain ("AI") policy.

Every question:
  1) Filter the round corpus down to the words consistent with the current
     pattern and tried letters (recomputed from scratch, never patched).
  2) Count the untried letters over those candidates.
  3) Ask the letter with the highest count; ties go to the alphabetically
     first letter.

Signals:
  - ContradictionError : no candidate survives the filter (recorded answers
                         are inconsistent, or the word is not in the corpus)
  - NoCandidateLetter  : candidates remain but contain only tried letters

Example:
  corpus {cat, car, can}, nothing tried -> counts a:3 c:3 n:1 r:1 t:1
  -> 'a' (tie with 'c' broken alphabetically)
"""

from __future__ import annotations
from typing import List
from packages.engine import filter_candidates, letter_frequencies, best_letter
from packages.engine.errors import ContradictionError, NoCandidateLetter
from .base import BasePolicy, register


@register
class InformationGainPolicy(BasePolicy):
    id = "information_gain"
    name = "Information Gain (candidate letter frequency)"
    version = "1.0.0"
    kind = "letter"

    def candidates(self, state: dict) -> List[str]:
        return filter_candidates(state["corpus"], state["pattern"], state["tried"])

    def next_question(self, state: dict) -> str:
        candidates = self.candidates(state)
        if not candidates:
            raise ContradictionError("Knowsall has no more possible words to guess.")

        counts = letter_frequencies(candidates, state["tried"])
        letter = best_letter(counts)
        if letter is None:
            raise NoCandidateLetter("Knowsall has run out of letters to guess.")
        return letter
