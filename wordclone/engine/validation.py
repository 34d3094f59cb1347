"""
Input validation for the interactive layer.

A guess is accepted iff, after stripping surrounding whitespace:
  - it has exactly WORD_LENGTH characters      (else LengthMismatch)
  - every character is an ASCII letter a–z/A–Z (else NonAlphabetic)
  - its lowercase form is in the allowed list  (else NotInVocabulary)

The checks run in that order, so the player always sees the first problem.
Each failure is a ValidationError; the prompt that produced the input
catches it and asks again.
"""

from __future__ import annotations

import string

from ..constants import USERNAME_LENGTH, WORD_LENGTH
from ..errors import InvalidUsername, LengthMismatch, NonAlphabetic, NotInVocabulary, ValidationError

_ASCII_LETTERS = frozenset(string.ascii_letters)


def validate_guess(word: str, vocab) -> str:
    """
    Return the normalized (stripped, lowercased) guess or raise.

    Args:
      word  : raw text typed by the player
      vocab : anything with is_allowed(word) -> bool (a VocabularyStore)
    """
    w = word.strip()

    if len(w) != WORD_LENGTH:
        raise LengthMismatch(w)

    if not all(ch in _ASCII_LETTERS for ch in w):
        raise NonAlphabetic(w)

    w = w.lower()
    if not vocab.is_allowed(w):
        raise NotInVocabulary(w)

    return w


def is_valid_guess(word: str, vocab) -> bool:
    """Boolean form of validate_guess."""
    if not isinstance(word, str):
        return False
    try:
        validate_guess(word, vocab)
    except ValidationError:
        return False
    return True


def validate_username(name: str) -> str:
    """Usernames are stored as one whitespace-free token of USERNAME_LENGTH characters."""
    n = name.strip()
    if len(n) != USERNAME_LENGTH or any(ch.isspace() for ch in n):
        raise InvalidUsername(n)
    return n
