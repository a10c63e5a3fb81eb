"""
Terminal rendering of guesses and keyboard hints (ANSI colours).

  exact   -> bright green
  present -> bright yellow
  absent  -> plain
Positions skipped because the letter repeats earlier in the guess are shown
plain as well, so the rendered word always lines up with what was typed.
"""

from __future__ import annotations

from typing import AbstractSet

from packages.engine import GuessOutcome, LetterOutcome

GREEN = "\x1b[92m"
YELLOW = "\x1b[93m"
GRAY = "\x1b[90m"
RESET = "\x1b[0m"

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

_OUTCOME_STYLE = {
    LetterOutcome.EXACT: GREEN,
    LetterOutcome.PRESENT: YELLOW,
}


def _paint(text: str, style: str | None, color: bool) -> str:
    if not color or not style:
        return text
    return f"{style}{text}{RESET}"


def render_guess(outcome: GuessOutcome, color: bool = True) -> str:
    out = []
    for ch, scored in zip(outcome.guess, outcome.by_position()):
        style = _OUTCOME_STYLE.get(scored.outcome) if scored is not None else None
        out.append(_paint(ch.upper(), style, color))
    return "".join(out)


def render_keyboard(found: AbstractSet[str], eliminated: AbstractSet[str], color: bool = True) -> str:
    """
    QWERTY rows with found letters highlighted and eliminated ones greyed.
    Without colour, eliminated letters are replaced by '·'.
    """
    rows = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = []
        for ch in row:
            key = ch.upper()
            if ch in eliminated:
                keys.append(_paint(key, GRAY, color) if color else "·")
            elif ch in found:
                keys.append(_paint(key, GREEN, color))
            else:
                keys.append(key)
        rows.append(" " * indent + " ".join(keys))
    return "\n".join(rows)
