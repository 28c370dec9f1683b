# apps/cli/play.py
"""
CLI entry point for the word-guessing game.

This script:
  1) Loads the word list (default: word_list.txt in the working directory)
     and picks the secret with a time-seeded or --seed'ed RNG.
  2) Runs one interactive session over whitespace-delimited stdin tokens.
  3) Exits 0 when the game is won or the attempts are exhausted, 1 when the
     word list is unusable or input ends mid-game.

With --check it only validates the word list and prints a one-line summary.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from packages.config import GameConfig, DEFAULT_WORD_LIST, MAX_ATTEMPTS, WORD_LENGTH, default_presenter
from packages.errors import FatalConfigError
from packages.presenter import create_presenter, get_presenter_ids
from packages.session import Session, SessionState, iter_tokens, run_session
from packages.wordlist import choose_secret, load_words, pretty_summary, validate_wordlist


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Guess the secret word in a limited number of attempts.")
    ap.add_argument("--words", default=DEFAULT_WORD_LIST,
                    help="path to the word list, one word per line")
    ap.add_argument("--seed", type=int,
                    help="RNG seed for a reproducible secret (default: current time)")
    ap.add_argument("--presenter", choices=get_presenter_ids(),
                    help="feedback style (default: ansi on a terminal, plain otherwise)")
    ap.add_argument("--check", action="store_true",
                    help="validate the word list and exit")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load the word list and play one game. Returns the exit status.
    """
    args = build_parser().parse_args(argv)
    cfg = GameConfig(
        word_list=args.words,
        word_length=WORD_LENGTH,
        max_attempts=MAX_ATTEMPTS,
        seed=args.seed,
        presenter=args.presenter or default_presenter(),
    )

    if args.check:
        rep = validate_wordlist(cfg.word_length, cfg.word_list, cfg.max_words)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            sys.stderr.write(f"  - {issue}\n")
        return 0 if rep["passed"] else 1

    try:
        words = load_words(cfg.word_list, cfg.word_length, cfg.max_words)
    except FatalConfigError as e:
        sys.stderr.write(f"{e}\n")
        return 1

    secret = choose_secret(words, cfg.word_length, cfg.make_rng())
    session = Session(secret, max_attempts=cfg.max_attempts)
    result = run_session(
        session,
        iter_tokens(sys.stdin),
        presenter=create_presenter(cfg.presenter),
        write=sys.stdout.write,
    )
    sys.stdout.flush()

    if result["state"] == SessionState.IN_PROGRESS.value:
        sys.stderr.write("Input ended before the game finished.\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
