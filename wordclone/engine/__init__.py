from .scoring import Verdict, LetterVerdict, GuessResult, evaluate, score
from .validation import validate_guess, is_valid_guess, validate_username
from .letters import AvailableLetters

__all__ = [
    "Verdict", "LetterVerdict", "GuessResult", "evaluate", "score",
    "validate_guess", "is_valid_guess", "validate_username", "AvailableLetters",
]
