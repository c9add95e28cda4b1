"""
Letter statistics over a candidate set.

  - letter_frequencies : occurrence counts of every untried letter
  - best_letter        : highest count wins; ties go to the alphabetically
                         first letter

The comparator is explicit (count descending, then letter ascending) so the
choice never depends on mapping iteration order.
"""

from collections import Counter
from typing import AbstractSet, Dict, Iterable, List, Optional


def letter_frequencies(candidates: Iterable[str], excluded: AbstractSet[str]) -> Dict[str, int]:
    """
    Count every occurrence of every letter in every candidate, skipping
    letters in `excluded`.

    Example:
      letter_frequencies(["cat", "car", "can"], set())
        -> {'c': 3, 'a': 3, 't': 1, 'r': 1, 'n': 1}
    """
    counts: Counter = Counter()
    for w in candidates:
        counts.update(ch for ch in w if ch not in excluded)
    return dict(counts)


def rank_letters(counts: Dict[str, int]) -> List[str]:
    """Letters with a positive count, best first."""
    return sorted((ch for ch, c in counts.items() if c > 0), key=lambda ch: (-counts[ch], ch))


def best_letter(counts: Dict[str, int]) -> Optional[str]:
    """Return the top-ranked letter, or None if no letter has a positive count."""
    ranked = rank_letters(counts)
    return ranked[0] if ranked else None
