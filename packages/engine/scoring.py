"""
Dual-answer scoring (feedback) for a guess against two hidden answers.

Conventions (same characters as classic single-answer Wordle patterns):
  - 'G'  : exact   = letter matches an answer at this position
  - 'Y'  : present = letter occurs in an answer at another position
  - '-'  : absent  = letter occurs in neither answer

Rules:
  - Answers never contain repeated letters, so a letter repeated in the guess
    is only scored at its FIRST position; later occurrences emit nothing.
  - Precedence per position is strict and asymmetric:
        exact in A > exact in B > present in A > present in B > absent
    i.e. exact for either answer outranks present for either, and within
    the same tier answer A outranks answer B. The branch taken decides
    which answer counts as "touched".
  - both_words is True iff both answers were touched by some position.

score() is pure: found/eliminated letter tracking is applied by the session
from the returned GuessOutcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, NamedTuple, Optional, Tuple

from .letters import repeated_letters

logger = logging.getLogger(__name__)

ANSWER_A = 0
ANSWER_B = 1


class LetterOutcome(str, Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"


class ScoredLetter(NamedTuple):
    """One scored guess position."""
    position: int                 # index into the guess
    letter: str
    outcome: LetterOutcome
    answer: Optional[int]         # ANSWER_A / ANSWER_B that was touched, None if absent


@dataclass(frozen=True)
class GuessOutcome:
    guess: str
    letters: Tuple[ScoredLetter, ...]
    both_words: bool

    @property
    def outcomes(self) -> Tuple[LetterOutcome, ...]:
        return tuple(s.outcome for s in self.letters)

    @property
    def pattern(self) -> str:
        """Scored outcomes as a compact 'G'/'Y'/'-' string (skipped positions omitted)."""
        return "".join(s.outcome.value for s in self.letters)

    @property
    def found_letters(self) -> FrozenSet[str]:
        return frozenset(s.letter for s in self.letters if s.outcome is not LetterOutcome.ABSENT)

    @property
    def eliminated_letters(self) -> FrozenSet[str]:
        return frozenset(s.letter for s in self.letters if s.outcome is LetterOutcome.ABSENT)

    def by_position(self) -> Tuple[Optional[ScoredLetter], ...]:
        """One entry per guess position; None where a repeated letter was skipped."""
        slots: list = [None] * len(self.guess)
        for s in self.letters:
            slots[s.position] = s
        return tuple(slots)


def _classify(letter: str, i: int, answer_a: str, answer_b: str) -> Tuple[LetterOutcome, Optional[int]]:
    # Order matters: every exact check runs before any present check.
    if letter == answer_a[i]:
        return LetterOutcome.EXACT, ANSWER_A
    if letter == answer_b[i]:
        return LetterOutcome.EXACT, ANSWER_B
    if letter in answer_a:
        return LetterOutcome.PRESENT, ANSWER_A
    if letter in answer_b:
        return LetterOutcome.PRESENT, ANSWER_B
    return LetterOutcome.ABSENT, None


def score(guess: str, answer_a: str, answer_b: str) -> GuessOutcome:
    """
    Score `guess` against both answers.

    Preconditions:
      - guess, answer_a and answer_b have the same length (callers validate
        the guess against the word pool first; a mismatch is a ValueError)

    Examples (answers "arise", "count"):
      score("stack", ...).pattern     -> "YYYY-", both_words=True
      score("count", ...).pattern     -> "GGGGG", both_words=False
      score("sassy", ...).pattern     -> "YY-"   (positions 2, 3 skipped)
    """
    if not (len(guess) == len(answer_a) == len(answer_b)):
        raise ValueError(
            f"guess and answers must be the same length; got "
            f"{len(guess)}, {len(answer_a)}, {len(answer_b)}"
        )

    repeats = repeated_letters(guess)
    touched = [False, False]
    letters = []

    for i, ch in enumerate(guess):
        # Only the first occurrence of a repeated letter carries information.
        if repeats and repeats[ch][0] != i:
            continue

        outcome, which = _classify(ch, i, answer_a, answer_b)
        if which is not None:
            touched[which] = True
        letters.append(ScoredLetter(i, ch, outcome, which))

    result = GuessOutcome(guess=guess, letters=tuple(letters), both_words=all(touched))
    logger.debug("scored %s -> %s (both_words=%s)", guess, result.pattern, result.both_words)
    return result
