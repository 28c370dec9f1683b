import random
from collections import Counter

import pytest
from packages.engine import LetterScore, score, is_win, pattern, validate_guess, check_guess
from packages.errors import UserInputError

C, W, A = LetterScore.CORRECT_POSITION, LetterScore.WRONG_POSITION, LetterScore.ABSENT


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("crane", "crate", "GGG-G"),
    ("crane", "canoe", "GYY-G"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("level", "belle", "-GYYY"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("robot", "ooooo", "-G-G-"),
    ("apple", "papal", "YYG-Y"),
    ("abbey", "babes", "YYGG-"),
    ("hello", "hello", "GGGGG"),
])
def test_score_n5_golden(secret, guess, expected):
    assert pattern(score(secret, guess)) == expected


def test_score_returns_letter_scores():
    assert score("crane", "crate") == (C, C, C, A, C)
    assert score("crane", "canoe") == (C, W, W, A, C)


def test_score_is_case_insensitive():
    assert score("CRANE", "crate") == score("crane", "CRATE") == (C, C, C, A, C)
    assert is_win(score("hello", "HeLLo"))


def test_score_handles_letters_that_widen_when_lowered():
    # "İ".lower() is two code points; each position still scores as one letter
    assert pattern(score("crane", "İrane")) == "-GGGG"
    assert pattern(score("İrane", "crane")) == "-GGGG"
    assert is_win(score("İrane", "İRANE"))


def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cran")


def test_is_win_only_when_all_correct():
    assert is_win((C,) * 5)
    assert not is_win((C, C, C, C, W))
    assert not is_win(())


# --- properties over seeded random words (small alphabet forces duplicates) ---
def _random_pairs(n=500, seed=1234):
    rng = random.Random(seed)
    for _ in range(n):
        secret = "".join(rng.choice("abcde") for _ in range(5))
        guess = "".join(rng.choice("abcde") for _ in range(5))
        yield secret, guess


def test_correct_count_equals_exact_matches():
    for secret, guess in _random_pairs():
        row = score(secret, guess)
        exact = sum(1 for s, g in zip(secret, guess) if s == g)
        assert row.count(C) == exact


def test_no_double_credit_for_duplicate_letters():
    for secret, guess in _random_pairs():
        row = score(secret, guess)
        overlap = sum((Counter(secret) & Counter(guess)).values())
        assert row.count(C) + row.count(W) <= overlap


def test_win_iff_words_equal():
    for secret, guess in _random_pairs():
        assert is_win(score(secret, guess)) == (secret == guess)
        assert is_win(score(secret, secret.upper()))


def test_scoring_is_idempotent():
    for secret, guess in _random_pairs(n=100):
        assert score(secret, guess) == score(secret, guess)


def test_validate_guess_n5():
    assert validate_guess("CRANE", N=5) is True
    assert validate_guess(" crane\n", N=5) is True
    assert validate_guess("12345", N=5) is True  # shape only, no alphabet check
    assert validate_guess("cranes", N=5) is False
    assert validate_guess("???", N=5) is False
    assert validate_guess(None, N=5) is False


def test_check_guess_raises_user_input_error():
    assert check_guess(" Crane ", 5) == "Crane"
    with pytest.raises(UserInputError, match="Please enter a 5-letter word."):
        check_guess("cran", 5)
