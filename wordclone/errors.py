"""
Error taxonomy for wordclone.

  - ResourceLoadError   : a word list or the leaderboard file can't be read/created
  - ValidationError     : bad user input; the prompt that produced it re-asks
  - CorruptedStateError : malformed leaderboard record on load
  - InvariantViolation  : the evaluator was called with out-of-contract input
  - GameOverError       : a guess was submitted to a finished session

Library code only raises these. The CLI decides what is fatal.
"""

from __future__ import annotations

from pathlib import Path

from .constants import WORD_LENGTH, USERNAME_LENGTH


class WordCloneError(Exception):
    """Base class for every error raised by this package."""


class ResourceLoadError(WordCloneError, OSError):
    pass


class CorruptedStateError(WordCloneError):
    def __init__(self, path: Path | str, lineno: int, reason: str):
        self.path = str(path)
        self.lineno = lineno
        self.reason = reason
        super().__init__(f"{self.path}:{lineno}: {reason}")


class InvariantViolation(WordCloneError, AssertionError):
    pass


class GameOverError(WordCloneError):
    pass


# -----------------------------
# Validation errors (recoverable)
# -----------------------------

class ValidationError(WordCloneError, ValueError):
    """Rejected user input. `str(err)` is the message shown to the player."""


class LengthMismatch(ValidationError):
    def __init__(self, word: str = ""):
        self.word = word
        super().__init__(f"The guessed word must have {WORD_LENGTH} characters only.")


class NonAlphabetic(ValidationError):
    def __init__(self, word: str = ""):
        self.word = word
        super().__init__("The guessed word must contain alphabetical characters only.")


class NotInVocabulary(ValidationError):
    def __init__(self, word: str = ""):
        self.word = word
        super().__init__("The guessed word is not a valid English word.")


class InvalidUsername(ValidationError):
    def __init__(self, username: str = ""):
        self.username = username
        super().__init__(
            f"Username must have {USERNAME_LENGTH} characters only, with no spaces."
        )


class InvalidCommand(ValidationError):
    def __init__(self, valid_commands):
        self.valid_commands = list(valid_commands)
        super().__init__(
            f"Invalid command. Choose only from the following commands: {self.valid_commands}."
        )
