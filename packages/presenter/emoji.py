from __future__ import annotations

from typing import Sequence

from packages.engine.scoring import LetterScore
from .base import BasePresenter, register


@register
class EmojiPresenter(BasePresenter):
    """Letters followed by a row of share-style tiles."""
    id = "emoji"
    name = "Emoji tiles"
    markers = {
        LetterScore.CORRECT_POSITION: "🟩",
        LetterScore.WRONG_POSITION: "🟨",
        LetterScore.ABSENT: "⬛",
    }

    def render(self, guess: str, row: Sequence[LetterScore]) -> str:
        if len(guess) != len(row):
            raise ValueError(f"guess has {len(guess)} letters but row has {len(row)} scores")
        letters = " ".join(ch.upper() for ch in guess)
        tiles = "".join(self.markers[s] for s in row)
        return f"{self.prefix}{letters}  {tiles}"
