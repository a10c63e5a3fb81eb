"""
Letter-repetition analysis.

Given a word, find every letter that occurs more than once and where it sits.
Two consumers:
  - corpus filtering: the answer pool keeps only words with no repeats
  - scoring: a repeated guess letter is scored at its first position only

Positions are zero-based and recorded in reading order, so every list in the
map is ascending.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

# letter -> positions it occupies; empty when every letter is distinct
RepetitionMap = Dict[str, List[int]]


def repeated_letters(word: str) -> RepetitionMap:
    """
    Return the letter -> positions map for `word`, or {} if it has no repeats.

    Examples:
      repeated_letters("crane") -> {}
      repeated_letters("sassy") -> {"s": [0, 2, 3], "a": [1], "y": [4]}

    Note the map covers ALL letters once any letter repeats, not just the
    repeated ones; lengths of the position lists always sum to len(word).
    """
    if len(set(word)) == len(word):
        return {}

    positions: RepetitionMap = {}
    for i, ch in enumerate(word):
        positions.setdefault(ch, []).append(i)
    return positions


def has_repeats(word: str) -> bool:
    return bool(repeated_letters(word))


def is_letter_unique(word: str) -> bool:
    """True when no letter occurs twice (eligible as a hidden answer)."""
    return not has_repeats(word)


def filter_letter_unique(words: Iterable[str]) -> List[str]:
    """Keep words with all-distinct letters, preserving input order."""
    return [w for w in words if w and is_letter_unique(w)]
