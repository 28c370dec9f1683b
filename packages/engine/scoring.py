"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

Conventions (pattern codes kept for compact display and tests):
  - 'G' : CORRECT_POSITION = correct letter in the correct position
  - 'Y' : WRONG_POSITION   = letter present elsewhere in the secret
  - '-' : ABSENT           = letter not present (or present fewer times than guessed)

Algorithm (two-pass):
  1) First pass marks exact matches and consumes those secret positions.
  2) Second pass walks the remaining guess positions left to right and
     consumes the leftmost unconsumed secret position holding the same
     letter. Each secret letter is credited to at most one guess position.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple


class LetterScore(Enum):
    """Classification of one guess letter; the value is its pattern code."""
    ABSENT = "-"
    WRONG_POSITION = "Y"
    CORRECT_POSITION = "G"


# One LetterScore per guess position, in guess order.
ScoreRow = Tuple[LetterScore, ...]


def score(secret: str, guess: str) -> ScoreRow:
    """
    Compute the feedback row for `guess` against `secret`.

    Preconditions:
      - len(secret) == len(guess); malformed guesses are rejected upstream.

    Examples:
      pattern(score("crane", "crate")) -> "GGG-G"
      pattern(score("level", "belle")) -> "-GYYY"
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"secret and guess must be the same length; got {len(secret)} and {len(guess)}")

    # Case-insensitive, one position at a time (lower() can widen a character)
    secret_letters = [ch.lower() for ch in secret]
    guess_letters = [ch.lower() for ch in guess]

    n = len(guess)
    row: List[LetterScore] = [LetterScore.ABSENT] * n
    consumed = [False] * n

    # Pass 1: exact matches
    for i in range(n):
        if guess_letters[i] == secret_letters[i]:
            row[i] = LetterScore.CORRECT_POSITION
            consumed[i] = True

    # Pass 2: misplaced letters take the leftmost unconsumed occurrence
    for i in range(n):
        if row[i] is LetterScore.CORRECT_POSITION:
            continue
        for j in range(n):
            if not consumed[j] and secret_letters[j] == guess_letters[i]:
                row[i] = LetterScore.WRONG_POSITION
                consumed[j] = True
                break

    return tuple(row)


def is_win(row: Iterable[LetterScore]) -> bool:
    """True iff every position is CORRECT_POSITION (and the row is non-empty)."""
    row = tuple(row)
    return bool(row) and all(s is LetterScore.CORRECT_POSITION for s in row)


def pattern(row: Iterable[LetterScore]) -> str:
    """Collapse a ScoreRow into its 'G'/'Y'/'-' string, e.g. "GGG-G"."""
    return "".join(s.value for s in row)
