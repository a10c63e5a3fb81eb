"""
Game session: one QWordle game as a small state machine.

    IN_PROGRESS --submit(answer)-------------------------> WON
    IN_PROGRESS --submit(non-answer), last attempt-------> LOST
    IN_PROGRESS --submit(non-answer), attempts left------> IN_PROGRESS
    IN_PROGRESS --submit(unknown word)-------------------> IN_PROGRESS (InvalidWordError, nothing changes)

WON and LOST are terminal. Every accepted guess increments guess_count
exactly once and grows the found/eliminated letter sets, which only ever
get bigger.

The session is UI-agnostic: it composes plain-text messages, while colouring
and input handling live in packages.game.render and apps/cli/play.py.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Set, Tuple

from packages.datasets.corpus import WordCorpus, load_corpus
from packages.engine import (
    AnswersHiddenError,
    GameOverError,
    GuessOutcome,
    MAX_PAIR_ATTEMPTS,
    require_valid_guess,
    score,
    select_pair,
)

logger = logging.getLogger(__name__)

# Default guess budget for one game.
MAX_GUESSES = 6


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


def _check_max_guesses(max_guesses: int) -> None:
    """Guardrail: a game needs at least one guess."""
    if max_guesses < 1:
        raise ValueError(f"max_guesses must be >= 1; got {max_guesses}")


@dataclass
class GameSession:
    """
    One game. `answers` is stored as a tuple and never reassigned after
    construction. The hint sets are private; `found_letters` and
    `eliminated_letters` are the read-only (frozenset) views for the UI.
    """
    answers: Tuple[str, str]
    allowed: FrozenSet[str]
    max_guesses: int = MAX_GUESSES
    guess_count: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS
    _found: Set[str] = field(init=False, default_factory=set, repr=False)
    _eliminated: Set[str] = field(init=False, default_factory=set, repr=False)
    history: List[GuessOutcome] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_max_guesses(self.max_guesses)
        a, b = self.answers
        if len(a) != len(b):
            raise ValueError(f"answers must have the same length; got {a!r}, {b!r}")
        self.answers = (a, b)
        self.allowed = frozenset(self.allowed)

    # ---- transitions ----

    def submit(self, guess: str) -> GuessOutcome:
        """
        Play one guess. `guess` must already be trimmed and lowercased.

        Raises:
          GameOverError    if the game has already ended
          InvalidWordError if `guess` is not in the valid-guess pool
                           (guess_count and letter sets are left unchanged)
        """
        if self.is_over:
            raise GameOverError(f"game already {self.status.value}")

        require_valid_guess(guess, self.allowed, self.word_length)

        outcome = score(guess, *self.answers)
        self._found.update(outcome.found_letters)
        self._eliminated.update(outcome.eliminated_letters)
        self.history.append(outcome)
        self.guess_count += 1

        if self.is_correct(guess):
            self.status = GameStatus.WON
        elif self.guess_count >= self.max_guesses:
            self.status = GameStatus.LOST

        logger.debug("guess %d/%d %s -> %s [%s]", self.guess_count, self.max_guesses,
                     guess, outcome.pattern, self.status.value)
        return outcome

    # ---- queries ----

    @property
    def word_length(self) -> int:
        return len(self.answers[0])

    @property
    def is_won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self.status is GameStatus.LOST

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def attempts_remaining(self) -> int:
        return self.max_guesses - self.guess_count

    @property
    def found_letters(self) -> FrozenSet[str]:
        return frozenset(self._found)

    @property
    def eliminated_letters(self) -> FrozenSet[str]:
        return frozenset(self._eliminated)

    def is_correct(self, guess: str) -> bool:
        """A guess wins iff it is textually one of the two answers."""
        return guess in self.answers

    def reveal_answers(self) -> Tuple[str, str]:
        if not self.is_over:
            raise AnswersHiddenError("answers are hidden until the game ends")
        return self.answers

    # ---- messages ----

    def guess_prompt(self) -> str:
        return f"Guess {self.guess_count + 1}/{self.max_guesses}:"

    def won_message(self) -> str:
        a, b = self.reveal_answers()
        return f"Congratulations! The answers were {a.upper()} and {b.upper()}"

    def lost_message(self) -> str:
        a, b = self.reveal_answers()
        return f"Bad luck! The answers were {a.upper()} and {b.upper()}"

    def result_suffix(self, outcome: GuessOutcome) -> str:
        """Tell the player whether the guess hit one answer or both."""
        if self.is_correct(outcome.guess):
            return ""
        return "  (both words)" if outcome.both_words else "  (same word)"


def new_session(
        max_guesses: int = MAX_GUESSES,
        *,
        corpus: WordCorpus | None = None,
        rng: random.Random | None = None,
        max_attempts: int = MAX_PAIR_ATTEMPTS,
) -> GameSession:
    """
    Start a game with a freshly selected, letter-disjoint answer pair.

    Args:
      max_guesses  : guess budget (>= 1)
      corpus       : word corpus; the packaged default lists when None
      rng          : random.Random used by the pair selector (seed it for tests)
      max_attempts : pair-selection draw budget

    Raises ExhaustionError when the answer pool cannot yield a disjoint pair.
    """
    _check_max_guesses(max_guesses)
    if corpus is None:
        corpus = load_corpus()

    answers = select_pair(corpus.answers, max_attempts=max_attempts, rng=rng)
    logger.info("new game: N=%d, %d guesses", corpus.N, max_guesses)
    return GameSession(answers=answers, allowed=corpus.allowed, max_guesses=max_guesses)


def submit(session: GameSession, guess: str) -> GuessOutcome:
    """Functional alias for GameSession.submit."""
    return session.submit(guess)
