"""
Word source: load candidate words and pick the secret for a session.

Lines are kept only when their length (after trimming the line ending)
equals N; everything else is skipped silently. Comparison elsewhere is
case-insensitive, so words are kept exactly as written in the file.

The random source is always passed in by the caller (see
GameConfig.make_rng), so a seeded run is reproducible.
"""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Iterable, List

from packages.config import MAX_WORDS, WORD_LENGTH
from packages.errors import EmptyWordListError
from .io import read_lines


def filter_words(words: Iterable[str], N: int = WORD_LENGTH, max_words: int | None = None) -> List[str]:
    """Keep entries of length N (order preserved), stopping after `max_words`."""
    out: List[str] = []
    for w in words:
        if len(w) != N:
            continue
        out.append(w)
        if max_words is not None and len(out) >= max_words:
            break
    return out


def load_words(path: Path | str, N: int = WORD_LENGTH, max_words: int = MAX_WORDS) -> List[str]:
    """
    Load the usable words from a line-delimited list.

    Raises:
      WordListLoadError  : the file cannot be opened or read
      EmptyWordListError : no line has exactly N characters
    """
    words = filter_words(read_lines(path), N, max_words)
    if not words:
        raise EmptyWordListError(N, str(path))
    return words


def choose_secret(words: Iterable[str], N: int = WORD_LENGTH, rng: random.Random | None = None) -> str:
    """
    Pick one word of length N uniformly at random.

    Args:
      words : candidate strings (anything of the wrong length is ignored)
      N     : required word length
      rng   : injected random source; a time-seeded one is built if omitted
    """
    pool = filter_words(words, N)
    if not pool:
        raise EmptyWordListError(N)
    if rng is None:
        rng = random.Random(time.time_ns())
    return pool[rng.randrange(len(pool))]
