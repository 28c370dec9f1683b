"""
Guess shape validation.

A guess is well-formed iff, after trimming surrounding whitespace, it has
exactly N characters. There is no dictionary membership or alphabet check:
anything of the right length is scored.
"""

from __future__ import annotations

from packages.errors import UserInputError


def validate_guess(word: str, N: int) -> bool:
    """Return True if `word` is a well-formed guess of length N."""
    if not isinstance(word, str):
        return False
    return len(word.strip()) == N


def check_guess(word: str, N: int) -> str:
    """
    Return the trimmed guess, or raise UserInputError if it is malformed.
    Case is preserved; scoring compares case-insensitively.
    """
    if not validate_guess(word, N):
        raise UserInputError(word if isinstance(word, str) else repr(word), N)
    return word.strip()
