"""
Error types raised by the engine and the game session.

Only two of these are expected during normal play:
  - ExhaustionError  : setup-time, the answer pool cannot yield a disjoint pair
  - InvalidWordError : per-guess, the word is not in the valid-guess pool

The other two guard against caller mistakes on a finished / running game.
"""

from __future__ import annotations


class QWordleError(Exception):
    """Base class for all game errors."""


class ExhaustionError(QWordleError, RuntimeError):
    """No letter-disjoint answer pair was found within the attempt budget."""

    def __init__(self, attempts: int, pool_size: int):
        self.attempts = attempts
        self.pool_size = pool_size
        super().__init__(
            f"could not find two non-overlapping words in {attempts} attempts "
            f"(answer pool size {pool_size})"
        )


class InvalidWordError(QWordleError, ValueError):
    """The guess is not in the valid-guess pool; the session is left untouched."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"not a valid word: {word!r}")


class GameOverError(QWordleError, RuntimeError):
    """A guess was submitted after the game already ended."""


class AnswersHiddenError(QWordleError, RuntimeError):
    """The answers were requested while the game is still in progress."""
