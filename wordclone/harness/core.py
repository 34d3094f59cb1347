"""
Game session primitives.

- GameSession: one puzzle (one hidden secret) played turn by turn.
- compute_score: turn count -> leaderboard score.
- run_case: play a scripted list of guesses through a session.

These are UI-agnostic: the terminal app in apps/cli/play.py drives a
GameSession, and tests drive run_case without any I/O.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..constants import MAX_GUESSES
from ..engine import AvailableLetters, GuessResult, evaluate, validate_guess
from ..errors import GameOverError, ValidationError
from ..leaderboard import Leaderboard, ScoreEntry

logger = logging.getLogger(__name__)


def compute_score(turns_used: int) -> int:
    """
    Winning on the first guess scores MAX_GUESSES, on the last guess 1.
    """
    if not 1 <= turns_used <= MAX_GUESSES:
        raise ValueError(f"turns_used must be in [1, {MAX_GUESSES}]; got {turns_used}")
    return MAX_GUESSES - turns_used + 1


class GameSession:
    def __init__(self, vocab, *, secret: Optional[str] = None):
        self.vocab = vocab
        self.secret = secret if secret is not None else vocab.random_secret()
        self.history: List[GuessResult] = []
        self.letters = AvailableLetters()
        logger.debug("new session (%d secret candidates)", len(vocab.secrets))

    @property
    def turns_used(self) -> int:
        return len(self.history)

    @property
    def guesses_left(self) -> int:
        return MAX_GUESSES - self.turns_used

    @property
    def won(self) -> bool:
        return bool(self.history) and self.history[-1].won

    @property
    def over(self) -> bool:
        return self.won or self.guesses_left == 0

    @property
    def score(self) -> Optional[int]:
        return compute_score(self.turns_used) if self.won else None

    def submit(self, raw_guess: str) -> GuessResult:
        """
        Validate and score one guess.

        Raises:
          GameOverError   if the session already ended
          ValidationError if the guess is rejected (no turn is used)
        """
        if self.over:
            raise GameOverError("the game is over; start a new session")

        guess = validate_guess(raw_guess, self.vocab)
        result = evaluate(guess, self.secret)
        self.history.append(result)
        self.letters.update(result)
        logger.debug("turn %d: %s -> %s", self.turns_used, guess, result.pattern)
        return result

    def record_score(self, leaderboard: Leaderboard, username: str) -> Optional[int]:
        """
        Put a won game on the leaderboard (and persist it).
        Returns the 0-based rank, or None if the game was lost or didn't place.
        """
        if not self.won:
            return None
        rank = leaderboard.try_insert(ScoreEntry(username, self.score))
        logger.info("recorded %s=%d on the leaderboard (rank %s)", username, self.score, rank)
        return rank


def run_case(vocab, secret: str, guesses: Iterable[str]) -> Dict:
    """
    Feed `guesses` into a session until it ends or the guesses run out.
    Rejected guesses are skipped without using a turn.

    Returns:
        dict with keys:
            success (bool), guesses (int), score (int | None),
            history (list[(guess, pattern)]), rejected (list[str]), answer (str)
    """
    session = GameSession(vocab, secret=secret)
    rejected: List[str] = []

    for raw in guesses:
        if session.over:
            break
        try:
            session.submit(raw)
        except ValidationError:
            rejected.append(raw)

    return {
        "success": session.won,
        "guesses": session.turns_used,
        "score": session.score,
        "history": [(r.guess, r.pattern) for r in session.history],
        "rejected": rejected,
        "answer": session.secret,
    }
