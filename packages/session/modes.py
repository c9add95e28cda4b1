"""
Guessing modes: a policy plus the round rules that go with it.

Menu numbers follow the interactive command surface (0 is exit). Modes
without a menu number are still available to the simulator.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

DEFAULT_BUDGET = 20
CHALLENGING_BUDGET = 10
CHALLENGING_PENALTY = 2


@dataclass(frozen=True)
class Mode:
    id: str
    policy: str
    intro: str
    budget: int = DEFAULT_BUDGET
    penalty: int = 0                 # extra budget units per wrong letter
    timeout: float | None = None     # seconds to wait for an answer
    log: bool = False                # append guesses to the guess log
    menu: int | None = None
    label: str = ""


_ALL = [
    Mode("letter", "sequential_letter",
         "Knowsall will guess your word letter by letter.",
         label="Letter-by-Letter Guessing"),
    Mode("random_letter", "random_letter",
         "Knowsall will guess your word letter by letter in random order.",
         menu=1, label="Randomized Letter-by-Letter Guessing"),
    Mode("word", "sequential_word",
         "Knowsall will guess your word word by word.",
         label="Word-by-Word Guessing"),
    Mode("random_word_order", "random_word_order",
         "Knowsall will guess your word word by word in random order.",
         menu=2, label="Randomized Word-by-Word Guessing"),
    Mode("frequency", "static_freq",
         "Knowsall will guess your word based on letter frequency.",
         menu=3, label="Frequency-Based Guessing"),
    Mode("random_word", "random_word",
         "Knowsall will guess random words from the dictionary.",
         menu=4, label="Random Word Guessing"),
    Mode("ai", "information_gain",
         "Knowsall will guess your word using AI-like features.",
         timeout=10.0, log=True, menu=5, label="AI Guessing with Enhancements"),
    Mode("challenging", "information_gain",
         "Knowsall will guess your word in Challenging Mode!\n"
         f"Rules: Knowsall has only {CHALLENGING_BUDGET} guesses, "
         "and incorrect guesses will cost extra.",
         budget=CHALLENGING_BUDGET, penalty=CHALLENGING_PENALTY, timeout=5.0,
         menu=6, label="Challenging Mode"),
]

MODES: Dict[str, Mode] = {m.id: m for m in _ALL}


def get_mode(mode_id: str) -> Mode:
    try:
        return MODES[mode_id]
    except KeyError as e:
        raise ValueError(f"Unknown mode id: {mode_id}. Available: {sorted(MODES)}") from e


def menu_modes() -> List[Mode]:
    """Modes offered by the interactive menu, ordered by menu number."""
    return sorted((m for m in _ALL if m.menu is not None), key=lambda m: m.menu)
