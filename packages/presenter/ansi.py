"""
ANSI terminal presenter: each letter on a coloured background tile.

  green  background : correct letter, correct position
  yellow background : correct letter, wrong position
  grey   background : letter not in the word

Colours are plain escape codes and may not render on every terminal;
use the `plain` or `emoji` presenters there.
"""

from __future__ import annotations

from packages.engine.scoring import LetterScore
from .base import BasePresenter, register

RESET = "\033[0m"
WHITE_TEXT = "\033[97m"
GREEN_BACKGROUND = "\033[42m"
YELLOW_BACKGROUND = "\033[43m"
GREY_BACKGROUND = "\033[100m"


@register
class AnsiPresenter(BasePresenter):
    id = "ansi"
    name = "ANSI colours"
    markers = {
        LetterScore.CORRECT_POSITION: GREEN_BACKGROUND + WHITE_TEXT + "{letter}" + RESET,
        LetterScore.WRONG_POSITION: YELLOW_BACKGROUND + WHITE_TEXT + "{letter}" + RESET,
        LetterScore.ABSENT: GREY_BACKGROUND + WHITE_TEXT + "{letter}" + RESET,
    }
