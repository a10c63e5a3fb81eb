"""
Pair feasibility for an answer pool.

The pair selector draws random pairs and rejects any that share a letter.
How often a draw succeeds is a property of the pool alone, so we can compute
it up front: encode each word as a 26-bit letter set and AND every pair.

  acceptance_rate      = disjoint pairs / all unordered pairs
  exhaustion_prob(k)   = (1 - acceptance_rate) ** k

Pairs are counted row by row against the words after it, so memory stays
linear in the pool size even for dictionary-sized pools.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np


def letter_masks(words: Iterable[str]) -> np.ndarray:
    """One uint32 per word, bit i set iff chr(ord('a') + i) occurs in it."""
    masks = []
    for w in words:
        m = 0
        for ch in w:
            m |= 1 << (ord(ch) - 97)
        masks.append(m)
    return np.asarray(masks, dtype=np.uint32)


def count_disjoint_pairs(words: Iterable[str]) -> int:
    """Number of unordered pairs {i, j}, i != j, whose letter sets don't intersect."""
    masks = letter_masks(words)
    total = 0
    # one row at a time: O(n) memory instead of an n×n matrix
    for i in range(len(masks) - 1):
        total += int(np.count_nonzero((masks[i + 1:] & masks[i]) == 0))
    return total


def acceptance_rate(words: Iterable[str]) -> float:
    words = list(words)
    n = len(words)
    total = n * (n - 1) // 2
    if total == 0:
        return 0.0
    return count_disjoint_pairs(words) / total


def exhaustion_probability(rate: float, max_attempts: int) -> float:
    """Chance that `max_attempts` independent draws all get rejected."""
    return float((1.0 - rate) ** max_attempts)
