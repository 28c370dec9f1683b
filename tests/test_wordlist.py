import random
from pathlib import Path

import pytest
from packages.errors import EmptyWordListError, FatalConfigError, WordListLoadError
from packages.wordlist import (choose_secret, filter_words, load_words, pretty_summary,
                               read_lines, validate_wordlist)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_read_lines_strips_line_endings(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\r\nslate\n")
    assert read_lines(p) == ["crane", "slate"]


def test_read_lines_splits_on_line_feeds_only(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("ab\x0ccd\nhello x\nplant\n", encoding="utf-8")
    assert read_lines(p) == ["ab\x0ccd", "hello x", "plant"]
    assert load_words(p, 5) == ["ab\x0ccd", "plant"]


def test_load_words_skips_wrong_lengths(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["hello", "hi", "worlds", "", "World", "slate "])
    assert load_words(p, 5) == ["hello", "World"]


def test_load_words_caps_at_max_words(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "slate", "stare", "raise", "trace"])
    assert load_words(p, 5, max_words=3) == ["crane", "slate", "stare"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(WordListLoadError) as ei:
        load_words(tmp_path / "nope.txt")
    assert isinstance(ei.value, FatalConfigError)
    assert "nope.txt" in str(ei.value)


def test_load_words_no_usable_entries(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["cat", "planet", ""])
    with pytest.raises(EmptyWordListError):
        load_words(p, 5)


def test_filter_words_preserves_order():
    assert filter_words(["b", "crane", "abc", "slate"], 5) == ["crane", "slate"]


def test_choose_secret_is_reproducible_with_seed():
    words = ["crane", "slate", "stare", "raise", "trace", "cared"]
    a = choose_secret(words, 5, random.Random(42))
    b = choose_secret(words, 5, random.Random(42))
    assert a == b and a in words


def test_choose_secret_covers_pool():
    words = ["crane", "slate", "stare"]
    rng = random.Random(7)
    seen = {choose_secret(words, 5, rng) for _ in range(200)}
    assert seen == set(words)


def test_choose_secret_ignores_wrong_lengths():
    assert choose_secret(["hi", "crane", "planet"], 5, random.Random(1)) == "crane"


def test_choose_secret_without_rng_still_picks():
    assert choose_secret(["crane"], 5) == "crane"


def test_choose_secret_empty_pool():
    with pytest.raises(EmptyWordListError):
        choose_secret(["hi", "planet"], 5, random.Random(1))


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "word_list.txt"
    _write(p, ["crane", "raise", "stare"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["skipped_lines"] == 0
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_skips_and_duplicates(tmp_path: Path):
    p = tmp_path / "word_list.txt"
    _write(p, ["crane", "CRANE", "planet", "cat"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["unique_count"] == 1
    assert any("skipped" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_and_empty(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "missing.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert pretty_summary(rep).endswith("FAIL")

    p = tmp_path / "word_list.txt"
    _write(p, ["planet"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert any("0 words" in msg for msg in rep["issues"])
