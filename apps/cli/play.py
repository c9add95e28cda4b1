# apps/cli/play.py
"""
Interactive Knowsall game.

This script:
  1) Loads the dictionary (fatal if missing or empty).
  2) Asks for a secret word (non-empty, letters only, in the dictionary).
  3) Offers the guessing-mode menu (0 exits) and plays one round, asking
     yes/no questions on the console.
  4) Offers a replay.

Usage:
    python -m apps.cli.play --dictionary dictionary.txt
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Dict, Set

from packages.datasets import load_corpus, DEFAULT_DICTIONARY
from packages.engine import validate_secret, validate_answer
from packages.engine.errors import CorpusLoadError, InputValidationError
from packages.session import (ConsoleChannel, GuessLog, Mode, menu_modes, run_round,
                              SOLVED, BUDGET_EXCEEDED)
from packages.session.io import DEFAULT_LOG_PATH


def _ask_secret(console: ConsoleChannel, lookup: Set[str]) -> str:
    while True:
        print("Think of a word from the dictionary and Knowsall will try to guess it.")
        raw = console.read_line("Enter your secret word (Knowsall won't peek!): ")
        try:
            return validate_secret(raw, lookup)
        except InputValidationError as e:
            print(e)


def _ask_mode(console: ConsoleChannel) -> Mode | None:
    """Show the menu until a valid choice arrives; None means exit."""
    modes = {m.menu: m for m in menu_modes()}
    top = max(modes)
    while True:
        print("\nChoose a guessing mode:")
        print("0. Exit")
        for n, m in sorted(modes.items()):
            print(f"{n}. {m.label}")
        raw = console.read_line(f"Enter your choice (0-{top}): ").strip()
        try:
            choice = int(raw)
        except ValueError:
            choice = -1
        if choice == 0:
            return None
        if choice in modes:
            return modes[choice]
        print(f"Invalid choice. Please enter a number between 0 and {top}.")


def _ask_replay(console: ConsoleChannel) -> bool:
    while True:
        raw = console.read_line("\nDo you want to play again? (yes/no): ")
        try:
            return validate_answer(raw)
        except InputValidationError:
            print("Invalid response. Please enter 'yes' or 'no'.")


def _report(result: Dict, mode: Mode) -> None:
    if result["outcome"] == SOLVED:
        print(f"Knowsall guessed your word: {result['word']}")
    elif result["outcome"] == BUDGET_EXCEEDED:
        print(f"Knowsall couldn't guess your word within {mode.budget} questions.")
    else:
        print("Knowsall couldn't guess your word: no guess left that fits your answers.")


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary and run rounds until the player exits.
    Returns the process exit code.
    """
    ap = argparse.ArgumentParser(description="Knowsall — think of a word, Knowsall guesses it")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to the word list (one word per line)")
    ap.add_argument("--seed", type=int, help="base RNG seed for the randomized modes")
    ap.add_argument("--log", default=DEFAULT_LOG_PATH,
                    help="guess/answer log written by the AI mode")
    ap.add_argument("--no-timer", action="store_true",
                    help="wait indefinitely for answers in the timed modes")
    args = ap.parse_args(argv)

    try:
        corpus = load_corpus(args.dictionary)
    except CorpusLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Failed to load the dictionary. Exiting...", file=sys.stderr)
        return 1

    lookup = set(corpus)
    console = ConsoleChannel()
    log = GuessLog(args.log)
    rng = random.Random(args.seed)

    try:
        while True:
            secret = _ask_secret(console, lookup)
            mode = _ask_mode(console)
            if mode is None:
                print("Exiting the game. Thank you for playing Knowsall!")
                break

            print(f"\n{mode.intro}")
            console.timeout = None if args.no_timer else mode.timeout
            try:
                result = run_round(mode.id, secret, corpus, channel=console,
                                   seed=rng.randrange(2 ** 31), log=log, display=print)
            finally:
                console.timeout = None
            _report(result, mode)

            if not _ask_replay(console):
                break
    except (EOFError, KeyboardInterrupt):
        print()

    print("Thank you for playing Knowsall! Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
