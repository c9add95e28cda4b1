"""
Answer channels: where the yes/no answers come from.

Every channel implements `ask(question, prompt) -> str` and returns ONE raw
token. Validation (and re-asking on garbage) is the session's job, so a
channel may return anything.

  - ConsoleChannel  : a human at the terminal, with an optional bounded wait
  - ScriptedChannel : replays a fixed list of tokens (tests, wrong answers)
  - OracleChannel   : answers truthfully for a known secret (simulation)
"""

from __future__ import annotations
import queue
import sys
import threading
from typing import Callable, Iterable, List

from packages.engine.validation import YES, NO

TIMEOUT_NOTICE = "\nTime's up! Proceeding automatically..."

_EOF = object()


class ConsoleChannel:
    """
    Read answers from a line reader (stdin by default).

    With `timeout` set, lines are read by a daemon thread into a queue and the
    prompt waits at most `timeout` seconds; on expiry the answer is 'no' and
    whatever arrives before the next prompt is treated as that late answer and
    dropped. Lines already buffered are kept, one per prompt. The
    reader thread keeps running between prompts, so every other stdin read in
    the program must go through `read_line()` to avoid racing it.
    """

    def __init__(self, *, timeout: float | None = None,
                 reader: Callable[[], str] | None = None,
                 out: Callable[..., None] = print):
        self.timeout = timeout
        self._reader = reader or sys.stdin.readline
        self._out = out
        self._lines: "queue.Queue" = queue.Queue()
        self._thread: threading.Thread | None = None
        # set when the previous prompt expired; its late answer is stale
        self._expired = False

    # -- reader thread --
    def _pump(self) -> None:
        while True:
            line = self._reader()
            if not line:
                self._lines.put(_EOF)
                return
            self._lines.put(line)

    def _ensure_thread(self) -> None:
        if self._thread is None:
            self._thread = threading.Thread(target=self._pump, name="answer-reader", daemon=True)
            self._thread.start()

    def _unwrap(self, item) -> str:
        if item is _EOF:
            # Leave the marker for any later read
            self._lines.put(_EOF)
            raise EOFError("end of input")
        return item.rstrip("\r\n")

    def _drain(self) -> None:
        """Drop lines that arrived after the previous prompt expired."""
        while True:
            try:
                item = self._lines.get_nowait()
            except queue.Empty:
                return
            if item is _EOF:
                self._lines.put(_EOF)
                return

    # -- public --
    def read_line(self, prompt: str = "") -> str:
        """Blocking read of one line (no timeout). Raises EOFError at end of input."""
        if self._thread is not None and self._expired:
            self._drain()
            self._expired = False
        if prompt:
            self._out(prompt, end="", flush=True)
        if self._thread is not None:
            return self._unwrap(self._lines.get())
        line = self._reader()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def ask(self, question: str, prompt: str) -> str:
        if self.timeout is None:
            return self.read_line(prompt)

        self._ensure_thread()
        if self._expired:
            self._drain()
            self._expired = False
        self._out(prompt, end="", flush=True)
        try:
            item = self._lines.get(timeout=self.timeout)
        except queue.Empty:
            self._out(TIMEOUT_NOTICE)
            self._expired = True
            return NO
        return self._unwrap(item)


class ScriptedChannel:
    """Replay `answers` in order; raises EOFError once they run out."""

    def __init__(self, answers: Iterable[str]):
        self._answers = list(answers)
        self._i = 0
        self.prompts: List[str] = []

    def ask(self, question: str, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._i >= len(self._answers):
            raise EOFError("scripted answers exhausted")
        a = self._answers[self._i]
        self._i += 1
        return a


class OracleChannel:
    """
    Truthful answerer for a known secret.

    A single character is treated as a letter question, anything longer as a
    whole-word question.
    """

    def __init__(self, secret: str):
        self.secret = secret

    def ask(self, question: str, prompt: str) -> str:
        if len(question) == 1:
            return YES if question in self.secret else NO
        return YES if question == self.secret else NO
