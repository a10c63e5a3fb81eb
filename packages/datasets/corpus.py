"""
The word corpus: answer pool + valid-guess pool, loaded once at startup.

The answer pool is supposed to arrive already filtered (letter-unique words,
see script/build_wordlists.py), but we re-check it here instead of trusting
the offline step. Scoring relies on answers never repeating a letter, so a
bad answer is a hard error; everything else is repaired with a warning:

  - duplicate answers / allowed words   -> deduplicated
  - allowed words of the wrong shape    -> dropped
  - answers missing from allowed        -> added to allowed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Tuple

from packages.engine.letters import is_letter_unique
from .io import load_words, normalize_words, unique_preserve_order

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ANSWERS_PATH = DATA_DIR / "answers_5.txt"
DEFAULT_ALLOWED_PATH = DATA_DIR / "allowed_5.txt"


@dataclass(frozen=True)
class WordCorpus:
    answers: Tuple[str, ...]        # letter-unique, deduplicated, corpus order
    allowed: FrozenSet[str]         # valid-guess pool, superset of answers
    N: int                          # word length

    def is_valid(self, word: str) -> bool:
        return word in self.allowed


def _is_clean(word: str, N: int) -> bool:
    return len(word) == N and word.isascii() and word.isalpha()


def build_corpus(answers: Iterable[str], allowed: Iterable[str], N: int | None = None) -> WordCorpus:
    """
    Build a validated WordCorpus from in-memory word lists.

    N defaults to the length of the first answer.
    Raises ValueError when the answer pool cannot be used for a game.
    """
    raw_answers = normalize_words(answers)
    ans = unique_preserve_order(raw_answers)
    if len(ans) != len(raw_answers):
        logger.warning("answer pool: dropped %d duplicate word(s)", len(raw_answers) - len(ans))

    if len(ans) < 2:
        raise ValueError(f"answer pool needs at least 2 words; got {len(ans)}")

    N = len(ans[0]) if N is None else int(N)

    bad_shape = [w for w in ans if not _is_clean(w, N)]
    if bad_shape:
        raise ValueError(f"answers must be {N}-letter a–z words (e.g., {bad_shape[:5]})")
    repeats = [w for w in ans if not is_letter_unique(w)]
    if repeats:
        raise ValueError(f"answers must not repeat letters (e.g., {repeats[:5]})")

    raw_allowed = normalize_words(allowed)
    allowed_set = {w for w in raw_allowed if _is_clean(w, N)}
    dropped = len(set(raw_allowed)) - len(allowed_set)
    if dropped:
        logger.warning("valid-guess pool: dropped %d word(s) that are not %d-letter a–z", dropped, N)

    missing = [w for w in ans if w not in allowed_set]
    if missing:
        logger.warning(
            "valid-guess pool: added %d answer(s) it was missing (e.g., %s)",
            len(missing), missing[:5],
        )
        allowed_set.update(missing)

    logger.debug("corpus: N=%d answers=%d allowed=%d", N, len(ans), len(allowed_set))
    return WordCorpus(answers=tuple(ans), allowed=frozenset(allowed_set), N=N)


def load_corpus(
        answers_path: Path | str = DEFAULT_ANSWERS_PATH,
        allowed_path: Path | str = DEFAULT_ALLOWED_PATH,
        N: int | None = None,
) -> WordCorpus:
    """Read both word lists from disk (FileNotFoundError if missing) and build the corpus."""
    return build_corpus(load_words(answers_path), load_words(allowed_path), N=N)
