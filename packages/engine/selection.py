"""
Answer-pair selection.

Draw two distinct words from the answer pool, uniformly at random, until
their concatenation has no repeated letter (the two words partition 2*N
distinct letters). Running out of attempts means the pool is too small or
too homogeneous: that is a configuration problem, so we raise instead of
degrading to an overlapping pair.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence, Tuple

from .errors import ExhaustionError
from .letters import has_repeats

logger = logging.getLogger(__name__)

# Draw budget before giving up on the pool.
MAX_PAIR_ATTEMPTS = 100


def is_disjoint_pair(a: str, b: str) -> bool:
    """True iff `a + b` contains no repeated letter."""
    return not has_repeats(a + b)


def select_pair(
        pool: Sequence[str],
        max_attempts: int = MAX_PAIR_ATTEMPTS,
        rng: random.Random | None = None,
) -> Tuple[str, str]:
    """
    Pick two letter-disjoint words from `pool`.

    Args:
      pool         : answer pool (letter-unique words of one length)
      max_attempts : number of draws before raising ExhaustionError
      rng          : random.Random to draw from; pass a seeded one for
                     reproducible selection

    Returns:
      (answer_a, answer_b) in draw order.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")

    words = list(pool)
    if len(words) < 2:
        raise ExhaustionError(0, len(words))

    rng = rng or random.Random()
    for attempt in range(1, max_attempts + 1):
        a, b = rng.sample(words, 2)
        if is_disjoint_pair(a, b):
            logger.debug("selected pair after %d attempt(s)", attempt)
            return a, b
        logger.debug("attempt %d rejected: %s/%s share letters", attempt, a, b)

    raise ExhaustionError(max_attempts, len(words))
