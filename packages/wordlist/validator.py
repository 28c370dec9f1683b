"""
Word list checker.

What this module does:
- Inspect a word list for length N the same way the game loads it
  (one word per line, exact length N after trimming the line ending).
- Count usable, unique and skipped lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.wordlist import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "word_list.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.config import MAX_WORDS
from packages.errors import WordListLoadError
from .io import read_lines
from .source import filter_words


@dataclass
class WordListReport:
    """Diagnostics for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # could the file be read?
    count: int           # usable words (length N), before the MAX_WORDS cap
    unique_count: int    # usable words after case-insensitive dedupe
    skipped_lines: int   # lines of the wrong length
    capped: bool         # True if the game will only see the first MAX_WORDS
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(N: int, path: str, max_words: int = MAX_WORDS) -> Dict:
    """
    Check the word list at `path` for length N.

    Returns a JSON-serializable dict (see WordListReport). `passed` is True
    when the file is readable and holds at least one usable word; skipped
    lines and duplicates are reported as issues but do not fail the check.
    """
    issues: List[str] = []
    p = Path(path)

    try:
        lines = read_lines(p)
    except WordListLoadError as e:
        issues.append(str(e))
        rep = WordListReport(N, path, False, 0, 0, 0, False, "", False, issues)
        return asdict(rep)

    words = filter_words(lines, N)
    skipped = len(lines) - len(words)
    unique = {w.lower() for w in words}

    if not words:
        issues.append(f"word list contains 0 words of length {N}")
    if skipped:
        issues.append(f"{skipped} line(s) skipped (length != {N})")
    if len(unique) != len(words):
        issues.append("word list contains duplicate words")
    capped = len(words) > max_words
    if capped:
        issues.append(f"only the first {max_words} of {len(words)} words will be used")

    rep = WordListReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        skipped_lines=skipped,
        capped=capped,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        N=5 | word_list.txt: words=120 (uniq=120, skipped=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | {report['path']}: words={report['count']} "
        f"(uniq={report['unique_count']}, skipped={report['skipped_lines']}, sha={sha}) "
        f"| {status}"
    )
