"""
Error taxonomy for the guessing engine.

  - InputValidationError : malformed answer token or secret word (recoverable,
                           the caller re-prompts; no budget is consumed)
  - CorpusLoadError      : dictionary missing/unreadable/empty (fatal at start)
  - PolicyExhausted      : a policy has nothing left to propose
      - ContradictionError : the candidate set became empty
      - NoCandidateLetter  : no untried letter occurs in the candidates

Running out of budget is a normal outcome, not an exception.
"""


class InputValidationError(ValueError):
    pass


class CorpusLoadError(RuntimeError):
    pass


class PolicyExhausted(RuntimeError):
    pass


class ContradictionError(PolicyExhausted):
    pass


class NoCandidateLetter(PolicyExhausted):
    pass
