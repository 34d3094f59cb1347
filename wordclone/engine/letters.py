"""Letters the player has not ruled out yet (the on-screen keyboard)."""

from __future__ import annotations

from typing import Set, Tuple

from ..constants import ALPHABET
from .scoring import GuessResult


class AvailableLetters:
    def __init__(self):
        self._eliminated: Set[str] = set()

    def update(self, result: GuessResult) -> None:
        self._eliminated.update(result.eliminated)

    @property
    def available(self) -> Tuple[str, ...]:
        return tuple(ch for ch in ALPHABET if ch not in self._eliminated)

    @property
    def eliminated(self) -> Tuple[str, ...]:
        return tuple(sorted(self._eliminated))

    def __contains__(self, letter: str) -> bool:
        return letter in ALPHABET and letter not in self._eliminated
