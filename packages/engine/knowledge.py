"""
Knowledge State: what the engine currently knows about the secret word.

  - pattern : one slot per position, either a revealed letter or BLANK
  - tried   : every letter already asked about (present or not)

Both only ever grow: a revealed slot is never blanked again and letters are
never removed from `tried`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Set

BLANK = "_"


@dataclass
class KnowledgeState:
    pattern: List[str]
    tried: Set[str] = field(default_factory=set)

    @classmethod
    def blank(cls, length: int) -> "KnowledgeState":
        return cls(pattern=[BLANK] * int(length))

    @property
    def length(self) -> int:
        return len(self.pattern)

    @property
    def masked(self) -> str:
        """Pattern as a string, e.g. 'ca_'."""
        return "".join(self.pattern)

    def is_revealed(self) -> bool:
        return BLANK not in self.pattern

    def reveal(self, letter: str, secret: str) -> int:
        """
        Record `letter` as tried and fill it in wherever `secret` has it.
        Returns the number of newly revealed positions.
        """
        assert len(secret) == self.length, "Secret and pattern must be the same length"
        self.tried.add(letter)
        n = 0
        for i, ch in enumerate(secret):
            if ch == letter and self.pattern[i] == BLANK:
                self.pattern[i] = letter
                n += 1
        return n

    def miss(self, letter: str) -> None:
        self.tried.add(letter)
