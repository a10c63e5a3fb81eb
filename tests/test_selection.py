import random

import pytest
from packages.engine import ExhaustionError, repeated_letters, select_pair
from packages.engine.selection import is_disjoint_pair

POOL = ["arise", "count", "stack", "lymph", "crane", "adieu", "bumpy", "world"]


class CountingRandom(random.Random):
    """random.Random that records how many pair draws were made."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws = 0

    def sample(self, population, k, **kwargs):
        self.draws += 1
        return super().sample(population, k, **kwargs)


@pytest.mark.parametrize("seed", range(20))
def test_selected_pair_is_letter_disjoint(seed):
    a, b = select_pair(POOL, rng=random.Random(seed))
    assert a != b
    assert a in POOL and b in POOL
    assert repeated_letters(a + b) == {}


def test_seeded_selection_is_reproducible():
    first = select_pair(POOL, rng=random.Random(1234))
    second = select_pair(POOL, rng=random.Random(1234))
    assert first == second


def test_two_word_pool_yields_that_pair():
    a, b = select_pair(["arise", "count"], rng=random.Random(0))
    assert {a, b} == {"arise", "count"}


def test_exhaustion_after_max_attempts():
    # every pair shares the letter 'a'
    pool = ["arise", "alone", "adept", "cigar"]
    rng = CountingRandom(7)
    with pytest.raises(ExhaustionError) as ei:
        select_pair(pool, max_attempts=25, rng=rng)
    assert rng.draws == 25
    assert ei.value.attempts == 25
    assert ei.value.pool_size == 4


def test_tiny_pool_raises_exhaustion():
    with pytest.raises(ExhaustionError):
        select_pair(["arise"])


def test_bad_attempt_budget():
    with pytest.raises(ValueError):
        select_pair(POOL, max_attempts=0)


def test_is_disjoint_pair():
    assert is_disjoint_pair("arise", "count")
    assert not is_disjoint_pair("arise", "crane")
