from .errors import (
    AnswersHiddenError,
    ExhaustionError,
    GameOverError,
    InvalidWordError,
    QWordleError,
)
from .letters import filter_letter_unique, has_repeats, is_letter_unique, repeated_letters
from .scoring import GuessOutcome, LetterOutcome, ScoredLetter, score
from .selection import MAX_PAIR_ATTEMPTS, select_pair
from .validation import require_valid_guess, validate_guess

__all__ = [
    "score", "GuessOutcome", "LetterOutcome", "ScoredLetter",
    "repeated_letters", "has_repeats", "is_letter_unique", "filter_letter_unique",
    "select_pair", "MAX_PAIR_ATTEMPTS",
    "validate_guess", "require_valid_guess",
    "QWordleError", "ExhaustionError", "InvalidWordError", "GameOverError",
    "AnswersHiddenError",
]
