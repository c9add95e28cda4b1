from .knowledge import KnowledgeState, BLANK
from .constraints import filter_candidates
from .frequency import letter_frequencies, best_letter, rank_letters
from .validation import validate_answer, validate_secret, YES, NO
from .errors import (InputValidationError, CorpusLoadError, PolicyExhausted,
                     ContradictionError, NoCandidateLetter)

__all__ = [
    "KnowledgeState", "BLANK", "filter_candidates", "letter_frequencies", "best_letter",
    "rank_letters", "validate_answer", "validate_secret", "YES", "NO",
    "InputValidationError", "CorpusLoadError", "PolicyExhausted", "ContradictionError",
    "NoCandidateLetter",
]
