# apps/cli/play.py
"""
CLI entry point for playing QWordle in the terminal.

This script:
  1) Loads the answer / allowed word lists (packaged defaults or --answers/--allowed).
  2) Picks two hidden answers that share no letters.
  3) Runs the read-guess-print loop until the player finds an answer or
     runs out of guesses, then reveals both answers.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, List

from packages.datasets import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH, load_corpus
from packages.engine import ExhaustionError, InvalidWordError, MAX_PAIR_ATTEMPTS
from packages.game import GameSession, GameStatus, MAX_GUESSES, new_session
from packages.game.render import render_guess, render_keyboard

logger = logging.getLogger("qwordle")

WELCOME = "Welcome to QWordle!"
INVALID_WORD = "Not a valid word! Please guess again"


def play(
        session: GameSession,
        *,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
        color: bool = True,
        hints: bool = True,
) -> GameStatus:
    """
    Drive one game to completion. `read` returns one raw line per call;
    EOF or Ctrl-C ends the game early with the answers revealed.
    """
    write(WELCOME)

    while not session.is_over:
        write(session.guess_prompt())
        try:
            raw = read()
        except (EOFError, KeyboardInterrupt):
            a, b = session.answers
            write(f"Game abandoned. The answers were {a.upper()} and {b.upper()}")
            return session.status

        guess = raw.strip().lower()
        try:
            outcome = session.submit(guess)
        except InvalidWordError:
            write(INVALID_WORD)
            continue

        write(render_guess(outcome, color=color) + session.result_suffix(outcome))
        if hints and not session.is_over:
            write(render_keyboard(session.found_letters, session.eliminated_letters, color=color))
        write("")

    write(session.won_message() if session.is_won else session.lost_message())
    return session.status


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="QWordle — find two hidden words that share no letters")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH),
                    help="path to the answer pool (letter-unique words)")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED_PATH),
                    help="path to allowed guesses (should be a superset of answers)")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES, help="guess budget")
    ap.add_argument("--max-attempts", type=int, default=MAX_PAIR_ATTEMPTS,
                    help="draws allowed when picking the answer pair")
    ap.add_argument("--seed", type=int, help="RNG seed (replay the same answers)")
    ap.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    ap.add_argument("--no-hints", action="store_true", help="don't show the keyboard after each guess")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="diagnostics verbosity (stderr)")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, set up the game and play it. Returns the process exit code.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Load + check the corpus; a broken corpus or pool is fatal
    try:
        corpus = load_corpus(args.answers, args.allowed)
        rng = random.Random(args.seed)
        session = new_session(args.max_guesses, corpus=corpus, rng=rng,
                              max_attempts=args.max_attempts)
    except (FileNotFoundError, ValueError, ExhaustionError) as e:
        logger.error("cannot start game: %s", e)
        return 2

    # 2) Play
    color = not args.no_color and sys.stdout.isatty()
    play(session, color=color, hints=not args.no_hints)
    return 0


if __name__ == "__main__":
    sys.exit(main())
