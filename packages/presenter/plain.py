from __future__ import annotations

from packages.engine.scoring import LetterScore
from .base import BasePresenter, register


@register
class PlainPresenter(BasePresenter):
    """Colour-free output: [C] correct, (R) misplaced, bare letter absent."""
    id = "plain"
    name = "Plain text"
    markers = {
        LetterScore.CORRECT_POSITION: "[{letter}]",
        LetterScore.WRONG_POSITION: "({letter})",
        LetterScore.ABSENT: " {letter} ",
    }
