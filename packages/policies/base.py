from __future__ import annotations
import random
import string
from typing import Dict, List, Type

ALPHABET = string.ascii_lowercase

# ---- Global policy registry ----
REGISTRY: Dict[str, Type["BasePolicy"]] = {}


def register(cls: Type["BasePolicy"]) -> Type["BasePolicy"]:
    """
    Decorator: @register on a policy class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate policy id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that policies inherit ----
class BasePolicy:
    id = "base"
    name = "Base"
    version = "0.0.0"
    # "letter": asks "is letter x in your word?"; "word": asks "is your word w?"
    kind = "letter"

    def __init__(self):
        self.N: int = 0
        self.corpus: List[str] = []
        self.rng = random.Random()

    def reset(self, *, corpus: List[str], N: int, seed: int | None = None) -> None:
        """Called once per round, before the first question. Every corpus word has length N."""
        self.N = int(N)
        wrong = [w for w in corpus if len(w) != self.N]
        if wrong:
            raise ValueError(f"corpus words must have length {self.N}; got {wrong[:5]}")
        self.corpus = list(corpus)
        if seed is not None:
            self.rng.seed(seed)

    def next_question(self, state: dict) -> str:
        """
        Propose the next letter or word.

        Args:
            state: dict with keys:
                - "N":       word length
                - "pattern": revealed pattern string ('_' for blanks)
                - "tried":   letters already asked about (set)
                - "asked":   words already proposed this round (set)
                - "corpus":  round corpus (words of length N)

        Raises:
            PolicyExhausted (or a subclass) when nothing is left to propose.
        """
        raise NotImplementedError("Override in subclass")


def first_untried(order, tried) -> str | None:
    """First item of `order` that is not in `tried` (None if all are)."""
    for x in order:
        if x not in tried:
            return x
    return None
