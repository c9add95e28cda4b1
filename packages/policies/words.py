"""
Whole-word policies.

  - sequential_word   : round corpus in its original order
  - random_word_order : round corpus shuffled once per round (seeded)
  - random_word       : a uniformly random corpus word every question, drawn
                        with replacement (may repeat a rejected word)

The first two never repeat a word: they propose the first word of their
order not yet asked, skipping none, and raise PolicyExhausted when the list
is used up.
"""

from __future__ import annotations
from typing import List
from packages.engine.errors import PolicyExhausted
from .base import BasePolicy, first_untried, register


@register
class SequentialWordPolicy(BasePolicy):
    id = "sequential_word"
    name = "Sequential Words"
    version = "1.0.0"
    kind = "word"

    def _order(self) -> List[str]:
        return self.corpus

    def next_question(self, state: dict) -> str:
        word = first_untried(self._order(), state["asked"])
        if word is None:
            raise PolicyExhausted("Knowsall has run out of words to guess.")
        return word


@register
class RandomWordOrderPolicy(SequentialWordPolicy):
    id = "random_word_order"
    name = "Randomized Word Order"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._shuffled: List[str] = []

    def reset(self, *, corpus: List[str], N: int, seed: int | None = None) -> None:
        super().reset(corpus=corpus, N=N, seed=seed)
        self._shuffled = list(self.corpus)
        self.rng.shuffle(self._shuffled)

    def _order(self) -> List[str]:
        return self._shuffled


@register
class RandomWordPolicy(BasePolicy):
    id = "random_word"
    name = "Random Word (with replacement)"
    version = "1.0.0"
    kind = "word"

    def next_question(self, state: dict) -> str:
        """
        Pick any corpus word uniformly at random (seeded RNG).

        Ignores everything learned so far, including rejected words.
        """
        corpus: List[str] = state["corpus"]
        if not corpus:
            raise PolicyExhausted("Knowsall has no words to guess from.")
        i = self.rng.randrange(len(corpus))
        return corpus[i]
