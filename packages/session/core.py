"""
Game session: state machine plus the interactive driver loop.

- Session:     holds the secret, the attempt counter and the game state;
               `submit` applies one guess and returns its ScoreRow.
- iter_tokens: split an input stream into whitespace-delimited guesses.
- run_session: prompt / score / render until the game ends or input runs out.

The driver never touches stdin/stdout directly: tokens come in as an
iterable and output goes through a `write` callable, so the same loop serves
the CLI and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, TextIO, Tuple

from packages.config import MAX_ATTEMPTS
from packages.engine import ScoreRow, check_guess, is_win, pattern, score
from packages.errors import UserInputError


class SessionState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    EXHAUSTED = "exhausted"


@dataclass
class Session:
    secret: str
    max_attempts: int = MAX_ATTEMPTS
    attempts: int = 0
    state: SessionState = SessionState.IN_PROGRESS
    history: List[Tuple[str, ScoreRow]] = field(default_factory=list)

    def __post_init__(self):
        if not self.secret:
            raise ValueError("secret must be a non-empty word")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive; got {self.max_attempts}")

    @property
    def N(self) -> int:
        return len(self.secret)

    @property
    def finished(self) -> bool:
        return self.state is not SessionState.IN_PROGRESS

    def submit(self, guess: str) -> ScoreRow:
        """
        Score one guess and advance the state machine.

        Raises:
          UserInputError : wrong length; nothing changes and no attempt is used
          RuntimeError   : the session already reached WON or EXHAUSTED
        """
        if self.finished:
            raise RuntimeError(f"session is over ({self.state.value})")

        guess = check_guess(guess, self.N)
        row = score(self.secret, guess)
        self.history.append((guess, row))

        if is_win(row):
            self.state = SessionState.WON
        else:
            self.attempts += 1
            if self.attempts == self.max_attempts:
                self.state = SessionState.EXHAUSTED
        return row

    def result(self) -> Dict:
        """Summary dict (same shape whether the game ended or was abandoned)."""
        return {
            "answer": self.secret,
            "success": self.state is SessionState.WON,
            "guesses": len(self.history),
            "attempts": self.attempts,
            "state": self.state.value,
            "history": [(g, pattern(row)) for g, row in self.history],
        }


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens; several on one line are several guesses."""
    for line in stream:
        yield from line.split()


def run_session(
        session: Session,
        tokens: Iterable[str],
        *,
        presenter,
        write: Callable[[str], object],
) -> Dict:
    """
    Play `session` to completion against the given guesses.

    Args:
        session:   a fresh Session
        tokens:    guesses in submission order (e.g. iter_tokens(sys.stdin))
        presenter: object with render(guess, row) -> str
        write:     output sink taking raw text (e.g. sys.stdout.write)

    Returns:
        session.result(); state stays "in_progress" if input ran out first.
    """
    N, limit = session.N, session.max_attempts
    write("Welcome to Wordle!\n")
    write(f"Guess the {N}-letter word. You have {limit} attempts.\n")

    it = iter(tokens)
    while not session.finished:
        write(f"Attempt {session.attempts + 1} of {limit}: ")
        guess = next(it, None)
        if guess is None:
            write("\n")
            break

        try:
            row = session.submit(guess)
        except UserInputError as e:
            write(f"{e}\n")
            continue

        write(presenter.render(guess.strip(), row) + "\n")

    if session.state is SessionState.WON:
        write("Congratulations! You've guessed the word!\n")
    elif session.state is SessionState.EXHAUSTED:
        write(f"Sorry, you've run out of attempts. The word was '{session.secret}'.\n")

    return session.result()
