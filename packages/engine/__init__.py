from .scoring import LetterScore, ScoreRow, score, is_win, pattern
from .validation import validate_guess, check_guess

__all__ = ["LetterScore", "ScoreRow", "score", "is_win", "pattern",
           "validate_guess", "check_guess"]
