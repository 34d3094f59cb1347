"""
Wordle-style evaluation of a single (guess, secret) pair.

Conventions (pattern characters, as used in logs and tests):
  - 'G'  : CORRECT  = letter in the right position
  - 'Y'  : PRESENT  = letter elsewhere in the secret, not yet consumed
  - '-'  : ABSENT   = letter not in the secret (or all its copies consumed)

Algorithm (two-pass, duplicate-safe):
  1) Start a remaining-count histogram from the whole secret. Mark every
     exact-position match CORRECT and consume one copy of its letter.
  2) Walk the other positions left to right. A letter that still has copies
     left becomes PRESENT and consumes one; everything else is ABSENT.

Because both passes consume from the same histogram, a letter is never
credited (CORRECT + PRESENT) more times than it occurs in the secret; when
a guess repeats a letter too often, the leftmost copies win.

`evaluate` is a pure function. It also reports which guessed letters are
absent from the secret altogether so the caller can grey them out.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ..constants import ALPHABET, WORD_LENGTH
from ..errors import InvariantViolation


class Verdict(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def char(self) -> str:
        return self.value


@dataclass(frozen=True)
class LetterVerdict:
    letter: str
    verdict: Verdict


@dataclass(frozen=True)
class GuessResult:
    letters: Tuple[LetterVerdict, ...]
    won: bool
    eliminated: FrozenSet[str]

    def __post_init__(self):
        if len(self.letters) != WORD_LENGTH:
            raise InvariantViolation(
                f"a result needs {WORD_LENGTH} letters, got {len(self.letters)}")
        if self.won != all(lv.verdict is Verdict.CORRECT for lv in self.letters):
            raise InvariantViolation(f"won={self.won} contradicts pattern {self.pattern!r}")

    @classmethod
    def from_slots(
            cls,
            guess: str,
            slots: Sequence[Optional[Verdict]],
            eliminated: FrozenSet[str] = frozenset(),
    ) -> "GuessResult":
        """
        Freeze a slot list into a result. Every slot must be assigned; the win
        flag is derived from the slots, never passed in.
        """
        if len(slots) != len(guess):
            raise InvariantViolation(
                f"{len(slots)} verdicts for a {len(guess)}-letter guess")
        missing = [i for i, v in enumerate(slots) if v is None]
        if missing:
            raise InvariantViolation(f"unassigned verdict slot(s) {missing} for {guess!r}")

        letters = tuple(LetterVerdict(ch, v) for ch, v in zip(guess, slots))
        won = all(v is Verdict.CORRECT for v in slots)
        return cls(letters=letters, won=won, eliminated=frozenset(eliminated))

    @property
    def guess(self) -> str:
        return "".join(lv.letter for lv in self.letters)

    @property
    def verdicts(self) -> Tuple[Verdict, ...]:
        return tuple(lv.verdict for lv in self.letters)

    @property
    def pattern(self) -> str:
        """e.g. '-YYGY' for shell vs hello."""
        return "".join(lv.verdict.char for lv in self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self):
        return iter(self.letters)


def _check_word(word: str, role: str) -> None:
    if not isinstance(word, str):
        raise InvariantViolation(f"{role} must be a str, got {type(word).__name__}")
    if len(word) != WORD_LENGTH:
        raise InvariantViolation(
            f"{role} {word!r} has length {len(word)}, expected {WORD_LENGTH}")
    if any(ch not in ALPHABET for ch in word):
        raise InvariantViolation(f"{role} {word!r} must be lowercase a-z")


def evaluate(guess: str, secret: str) -> GuessResult:
    """
    Score `guess` against `secret`.

    Preconditions (not coerced):
      - both words are exactly WORD_LENGTH lowercase letters a-z

    Raises:
      InvariantViolation if a precondition does not hold. Upstream
      validation should make that unreachable.

    Examples:
      evaluate("tenet", "catch").pattern -> "Y----"
      evaluate("shell", "hello").pattern -> "-YYGY"
    """
    _check_word(guess, "guess")
    _check_word(secret, "secret")

    slots: List[Optional[Verdict]] = [None] * WORD_LENGTH
    remaining = Counter(secret)

    # Pass 1: exact positions
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            slots[i] = Verdict.CORRECT
            remaining[g] -= 1

    # Pass 2: left to right over what is left
    for i, g in enumerate(guess):
        if slots[i] is not None:
            continue
        if remaining[g] > 0:
            slots[i] = Verdict.PRESENT
            remaining[g] -= 1
        else:
            slots[i] = Verdict.ABSENT

    eliminated = frozenset(g for g in guess if g not in secret)
    return GuessResult.from_slots(guess, slots, eliminated)


def score(guess: str, secret: str) -> str:
    """Pattern string for `guess` against `secret` (see module docstring)."""
    return evaluate(guess, secret).pattern
