"""
Error taxonomy for the game.

Two families exist:
  - FatalConfigError : the word list is unusable; the CLI aborts with a
                       diagnostic and a failure exit status.
  - UserInputError   : a malformed guess; recoverable, the driver re-prompts
                       without consuming an attempt.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every error raised by this project."""


class FatalConfigError(WordleError):
    """The game cannot start (missing or empty word list)."""


class WordListLoadError(FatalConfigError):
    """The word list could not be opened or read."""

    def __init__(self, path, reason: str = "cannot be read"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to open word list '{self.path}': {reason}")


class EmptyWordListError(FatalConfigError):
    """No candidate of the required length was found."""

    def __init__(self, N: int, source: str | None = None):
        self.N = N
        self.source = source
        where = f" in '{source}'" if source else ""
        super().__init__(f"No valid {N}-letter words found{where}.")


class UserInputError(WordleError, ValueError):
    """A guess was rejected before scoring (wrong length)."""

    def __init__(self, guess: str, N: int):
        self.guess = guess
        self.N = N
        super().__init__(f"Please enter a {N}-letter word.")
