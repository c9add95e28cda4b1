"""
Fixed-order letter policies.

  - sequential_letter : a, b, c, ... z
  - random_letter     : one uniformly shuffled alphabet per round (seeded)
  - static_freq       : English letter-frequency ranking, most common first

None of them look at the corpus. Each proposes the first letter of its order
that has not been tried yet, so a letter is never asked twice; after all 26
letters they raise NoCandidateLetter.
"""

from __future__ import annotations
from typing import List
from packages.engine.errors import NoCandidateLetter
from .base import ALPHABET, BasePolicy, first_untried, register

ENGLISH_FREQUENCY = "etaoinshrdlcumwfgypbvkjxqz"


class _OrderedLetterPolicy(BasePolicy):
    kind = "letter"

    def _order(self) -> List[str]:
        raise NotImplementedError

    def next_question(self, state: dict) -> str:
        letter = first_untried(self._order(), state["tried"])
        if letter is None:
            raise NoCandidateLetter("Knowsall has run out of letters to guess.")
        return letter


@register
class SequentialLetterPolicy(_OrderedLetterPolicy):
    id = "sequential_letter"
    name = "Sequential Letters (a..z)"
    version = "1.0.0"

    def _order(self) -> List[str]:
        return list(ALPHABET)


@register
class RandomLetterPolicy(_OrderedLetterPolicy):
    id = "random_letter"
    name = "Randomized Letters"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._alphabet: List[str] = list(ALPHABET)

    def reset(self, *, corpus: List[str], N: int, seed: int | None = None) -> None:
        super().reset(corpus=corpus, N=N, seed=seed)
        # Shuffle once per round
        self._alphabet = list(ALPHABET)
        self.rng.shuffle(self._alphabet)

    def _order(self) -> List[str]:
        return self._alphabet


@register
class StaticFrequencyPolicy(_OrderedLetterPolicy):
    id = "static_freq"
    name = "Static English Letter Frequency"
    version = "1.0.0"

    def _order(self) -> List[str]:
        return list(ENGLISH_FREQUENCY)
