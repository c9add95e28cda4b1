"""
Session state machine: one guessing round for one secret word.

- Session:   drives the policy, the answer channel and the knowledge state.
- run_round: build and run a session for a named mode.
- run_batch: run many rounds against a truthful oracle (simulation).

States: active -> solved | budget_exceeded | exhausted (all terminal).

Per question:
  1) the policy proposes a letter or a word (PolicyExhausted -> exhausted)
  2) the channel answers; anything but yes/no is re-asked, costing nothing
  3) yes on a letter reveals it; a full reveal (or yes on a word) -> solved
  4) no on a letter records it as tried; in penalized modes it also costs
     `penalty` extra budget units
  5) budget units used >= budget -> budget_exceeded

The secret is only used to place revealed letters; no decision reads it.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List, Tuple

from packages.engine import KnowledgeState, validate_answer, YES, NO
from packages.engine.errors import InputValidationError, PolicyExhausted
from packages.policies import create_policy
from packages.policies.base import BasePolicy
from .channel import OracleChannel
from .modes import DEFAULT_BUDGET, get_mode

ACTIVE = "active"
SOLVED = "solved"
BUDGET_EXCEEDED = "budget_exceeded"
EXHAUSTED = "exhausted"


class Session:
    def __init__(
            self,
            secret: str,
            corpus: Iterable[str],
            policy: BasePolicy,
            *,
            channel,
            budget: int = DEFAULT_BUDGET,
            penalty: int = 0,
            log=None,
            display: Callable[[str], None] | None = None,
            seed: int | None = None,
            mode: str = "custom",
    ):
        """
        Args:
            secret:   the word to reconstruct (non-empty, alphabetic)
            corpus:   all dictionary words; the round uses those of len(secret)
            policy:   a BasePolicy instance (reset here)
            channel:  object with ask(question, prompt) -> raw answer token
            budget:   question budget in units
            penalty:  extra units charged per wrong letter
            log:      optional GuessLog receiving (question, raw answer)
            display:  optional sink for progress messages (e.g. print)
            seed:     RNG seed for randomized policies
        """
        if not secret or not secret.isalpha():
            raise ValueError(f"secret must be a non-empty alphabetic word; got {secret!r}")

        self.secret = secret
        self.N = len(secret)
        self.corpus: List[str] = [w for w in corpus if len(w) == self.N]
        if not self.corpus:
            raise ValueError(f"corpus has no words of length {self.N}")

        self.policy = policy
        self.channel = channel
        self.budget = int(budget)
        self.penalty = int(penalty)
        self.log = log
        self.display = display
        self.mode = mode

        self.state = KnowledgeState.blank(self.N)
        self.questions = 0          # budget units consumed
        self.asked: List[str] = []  # whole words proposed so far
        self.history: List[Tuple[str, str]] = []
        self.status = ACTIVE
        self.word: str | None = None
        self.reason: str | None = None
        self.time_ms = 0.0

        self.policy.reset(corpus=self.corpus, N=self.N, seed=seed)

    # ---- helpers ----
    @property
    def remaining(self) -> int:
        return self.budget - self.questions

    @property
    def done(self) -> bool:
        return self.status != ACTIVE

    def _show(self, msg: str) -> None:
        if self.display is not None:
            self.display(msg)

    def _policy_state(self) -> Dict:
        return {
            "N": self.N,
            "pattern": self.state.masked,
            "tried": set(self.state.tried),
            "asked": set(self.asked),
            "corpus": self.corpus,
        }

    def _prompt(self, question: str) -> str:
        if self.policy.kind == "word":
            return f"Is your word '{question}'? (yes/no): "
        return f"Is the letter '{question}' in your word? (yes/no): "

    def _ask(self, question: str) -> Tuple[bool, str]:
        """Ask until a valid token arrives; returns (is_yes, raw token)."""
        prompt = self._prompt(question)
        while True:
            raw = self.channel.ask(question, prompt)
            try:
                yes = validate_answer(raw)
            except InputValidationError as e:
                self._show(str(e))
                continue
            raw = raw.strip()
            if self.log is not None:
                self.log.append(question, raw)
            return yes, raw

    # ---- transitions ----
    def step(self) -> str:
        """Ask one question and apply the answer. Returns the new status."""
        if self.done:
            return self.status

        try:
            question = self.policy.next_question(self._policy_state())
        except PolicyExhausted as e:
            self.reason = str(e)
            self._show(self.reason)
            self.status = EXHAUSTED
            return self.status

        yes, _ = self._ask(question)
        self.history.append((question, YES if yes else NO))

        cost = 1
        solved = False
        if self.policy.kind == "word":
            self.asked.append(question)
            if yes:
                self.word = question
                solved = True
        elif yes:
            self.state.reveal(question, self.secret)
            self._show("Current Word: " + " ".join(self.state.pattern))
            if self.state.is_revealed():
                self.word = self.state.masked
                solved = True
        else:
            self.state.miss(question)
            if self.penalty:
                self._show("Incorrect guess! Knowsall loses an extra chance.")
                cost += self.penalty

        self.questions += cost
        if self.policy.kind == "letter":
            self._show(f"Questions remaining: {self.remaining}")

        if solved:
            self.status = SOLVED
        elif self.questions >= self.budget:
            self.status = BUDGET_EXCEEDED
        return self.status

    def run(self) -> Dict:
        """Step until a terminal state; return the round result."""
        t0 = time.perf_counter_ns()
        while not self.done:
            self.step()
        self.time_ms += (time.perf_counter_ns() - t0) / 1_000_000.0
        return self.result()

    def result(self) -> Dict:
        return {
            "mode": self.mode,
            "policy": self.policy.id,
            "answer": self.secret,
            "word": self.word,
            "outcome": self.status,
            "success": self.status == SOLVED,
            "questions": self.questions,
            "asked": len(self.history),
            "pattern": self.state.masked,
            "tried": sorted(self.state.tried),
            "history": list(self.history),
            "reason": self.reason,
            "time_ms": self.time_ms,
        }


def create_session(mode_id: str, secret: str, corpus: Iterable[str], *, channel,
                   seed: int | None = None, log=None,
                   display: Callable[[str], None] | None = None) -> Session:
    """Build a Session with the policy, budget and penalty of `mode_id`."""
    mode = get_mode(mode_id)
    return Session(
        secret, corpus, create_policy(mode.policy),
        channel=channel, budget=mode.budget, penalty=mode.penalty,
        log=log if mode.log else None, display=display, seed=seed, mode=mode.id,
    )


def run_round(mode_id: str, secret: str, corpus: Iterable[str], *, channel,
              seed: int | None = None, log=None,
              display: Callable[[str], None] | None = None) -> Dict:
    """Play one round of `mode_id` to completion."""
    session = create_session(mode_id, secret, corpus, channel=channel, seed=seed,
                             log=log, display=display)
    return session.run()


def run_batch(
        mode_id: str,
        cases: List[str],
        corpus: List[str],
        *,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play one round per secret in `cases` against a truthful oracle. If
    'sample' is provided, only the first K cases are used.

    Each round's seed is derived from the base seed (seed + index) so runs
    are reproducible but not identical across rounds.
    """
    pool = list(cases) if sample is None else list(cases)[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_round(mode_id, secret, corpus, channel=OracleChannel(secret),
                             seed=case_seed))
    return out
