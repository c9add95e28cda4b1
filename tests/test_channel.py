import queue
import threading
import time

import pytest
from packages.session import ConsoleChannel, ScriptedChannel, OracleChannel
from packages.session.channel import TIMEOUT_NOTICE


class _Out:
    def __init__(self):
        self.lines = []

    def __call__(self, *args, **kwargs):
        self.lines.append(args[0] if args else "")


def test_console_channel_reads_one_line():
    lines = iter(["yes\n", "no\n"])
    out = _Out()
    ch = ConsoleChannel(reader=lambda: next(lines), out=out)
    assert ch.ask("a", "Is the letter 'a' in your word? (yes/no): ") == "yes"
    assert ch.read_line("again: ") == "no"
    assert out.lines == ["Is the letter 'a' in your word? (yes/no): ", "again: "]


def test_console_channel_eof():
    ch = ConsoleChannel(reader=lambda: "", out=_Out())
    with pytest.raises(EOFError):
        ch.ask("a", "? ")


def test_console_channel_timeout_defaults_to_no():
    release = threading.Event()
    out = _Out()
    ch = ConsoleChannel(timeout=0.05, reader=lambda: (release.wait(), "")[1], out=out)
    try:
        assert ch.ask("a", "? ") == "no"
        assert TIMEOUT_NOTICE in out.lines
    finally:
        release.set()


def test_console_channel_answer_within_timeout():
    feed = queue.Queue()
    ch = ConsoleChannel(timeout=5.0, reader=feed.get, out=_Out())
    timer = threading.Timer(0.05, feed.put, args=("yes\n",))
    timer.start()
    try:
        assert ch.ask("a", "? ") == "yes"
    finally:
        timer.cancel()
        feed.put("")  # let the reader thread finish


def test_scripted_channel_replays_then_raises():
    ch = ScriptedChannel(["yes", "no"])
    assert ch.ask("a", "p1") == "yes"
    assert ch.ask("b", "p2") == "no"
    assert ch.prompts == ["p1", "p2"]
    with pytest.raises(EOFError):
        ch.ask("c", "p3")


def test_oracle_channel_answers_truthfully():
    ch = OracleChannel("car")
    assert ch.ask("a", "") == "yes"
    assert ch.ask("z", "") == "no"
    assert ch.ask("car", "") == "yes"
    assert ch.ask("cat", "") == "no"


def test_console_channel_timed_keeps_buffered_answers():
    lines = iter(["yes\n", "no\n", ""])
    ch = ConsoleChannel(timeout=2.0, reader=lambda: next(lines), out=_Out())
    assert ch.ask("a", "? ") == "yes"
    assert ch.ask("b", "? ") == "no"
    with pytest.raises(EOFError):
        ch.ask("c", "? ")


def test_console_channel_drops_late_answer_after_timeout():
    feed = queue.Queue()
    ch = ConsoleChannel(timeout=0.05, reader=feed.get, out=_Out())
    assert ch.ask("a", "? ") == "no"

    # answer to the expired prompt arrives late
    feed.put("yes\n")
    deadline = time.time() + 2.0
    while ch._lines.empty() and time.time() < deadline:
        time.sleep(0.01)

    ch.timeout = 5.0
    timer = threading.Timer(0.05, feed.put, args=("no\n",))
    timer.start()
    try:
        assert ch.ask("b", "? ") == "no"
    finally:
        timer.cancel()
        feed.put("")
