"""
Guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length N
  - it exists in the valid-guess pool

Guesses reach this point already trimmed and lowercased by the caller;
no normalization happens here.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from .errors import InvalidWordError


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : valid-guess pool; pass a set/frozenset to avoid a copy
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    if len(word) != N or not (word.isascii() and word.isalpha() and word.islower()):
        return False

    allowed_set: AbstractSet[str] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return word in allowed_set


def require_valid_guess(word: str, allowed: Iterable[str], N: int) -> str:
    """Same check as validate_guess, raising InvalidWordError on failure."""
    if not validate_guess(word, allowed, N):
        raise InvalidWordError(word)
    return word
