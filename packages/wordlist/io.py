from __future__ import annotations
from pathlib import Path
from typing import List

from packages.errors import WordListLoadError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, split on line feeds only and
    stripping a trailing CR.
    Raises WordListLoadError if the path is missing or unreadable.
    """
    p = Path(p)
    if not p.is_file():
        raise WordListLoadError(p, "no such file")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListLoadError(p, str(e)) from e
    lines = text.split("\n")
    # a final newline ends the last line; it does not start an empty one
    if lines and lines[-1] == "":
        lines.pop()
    return [ln.rstrip("\r") for ln in lines]
