from __future__ import annotations
from typing import Dict, Sequence, Type

from packages.engine.scoring import LetterScore

# ---- Global presenter registry ----
REGISTRY: Dict[str, Type["BasePresenter"]] = {}


def register(cls: Type["BasePresenter"]) -> Type["BasePresenter"]:
    """
    Decorator: @register on a presenter class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate presenter id: {pid}")
    missing = [s for s in LetterScore if s not in getattr(cls, "markers", {})]
    if missing:
        raise ValueError(f"{cls.__name__} has no marker for {[s.name for s in missing]}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that presenters inherit ----
class BasePresenter:
    """
    Turns a guess and its ScoreRow into one line of feedback.

    Subclasses only supply `markers`: a lookup from LetterScore to a format
    string with a single `{letter}` field. Letters are shown upper-cased.
    """
    id = "base"
    name = "Base"
    prefix = "Result: "
    separator = " "
    markers: Dict[LetterScore, str] = {}

    def tile(self, letter: str, s: LetterScore) -> str:
        return self.markers[s].format(letter=letter.upper())

    def render(self, guess: str, row: Sequence[LetterScore]) -> str:
        if len(guess) != len(row):
            raise ValueError(f"guess has {len(guess)} letters but row has {len(row)} scores")
        tiles = [self.tile(ch, s) for ch, s in zip(guess, row)]
        return self.prefix + self.separator.join(tiles)
