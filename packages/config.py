"""
Game configuration.

Module constants are the single source of truth for the classic rules;
`GameConfig` bundles them with the run-time options the CLI exposes.
"""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field

WORD_LENGTH = 5
MAX_ATTEMPTS = 6
MAX_WORDS = 1500  # cap on usable entries read from the word list
DEFAULT_WORD_LIST = "word_list.txt"


def default_presenter() -> str:
    """Coloured tiles on a terminal, plain text when output is redirected."""
    return "ansi" if sys.stdout.isatty() else "plain"


@dataclass
class GameConfig:
    word_list: str = DEFAULT_WORD_LIST
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS
    max_words: int = MAX_WORDS
    seed: int | None = None
    presenter: str = field(default_factory=default_presenter)

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive; got {self.max_attempts}")
        if self.max_words < 1:
            raise ValueError(f"max_words must be positive; got {self.max_words}")

    def make_rng(self) -> random.Random:
        """
        Build the random source for one session.

        An explicit seed gives a reproducible game; without one the generator
        is seeded from the current time, so repeated runs differ.
        """
        seed = self.seed if self.seed is not None else time.time_ns()
        return random.Random(seed)
