"""
Input validation at the human boundary.

  - validate_answer : a raw answer token must be exactly 'yes' or 'no'
                      (surrounding whitespace ignored)
  - validate_secret : the secret word must be non-empty, alphabetic and
                      present in the corpus

Both raise InputValidationError with a message suitable to show the user;
callers re-prompt and nothing is consumed.
"""

from typing import Iterable
from .errors import InputValidationError

YES = "yes"
NO = "no"


def validate_answer(raw: str) -> bool:
    """Return True for 'yes', False for 'no'; raise on anything else."""
    token = raw.strip() if isinstance(raw, str) else raw
    if token == YES:
        return True
    if token == NO:
        return False
    raise InputValidationError("Invalid response. Please answer 'yes' or 'no'.")


def validate_secret(word: str, corpus: Iterable[str]) -> str:
    """
    Return the normalized (stripped, lowercase) secret word.

    Notes:
      - `corpus` may be a large list; pass a set if you validate in a loop.
    """
    w = word.strip() if isinstance(word, str) else ""

    if not w:
        raise InputValidationError("Invalid input. Please enter a non-empty word.")
    if not w.isalpha():
        raise InputValidationError("Invalid input. Please enter a word containing only letters.")

    w = w.lower()
    if w not in corpus:
        raise InputValidationError("The word is not in the dictionary. Please choose a valid word.")
    return w
