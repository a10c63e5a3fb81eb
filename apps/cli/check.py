# apps/cli/check.py
"""
Validate a pair of word lists before playing with them.

Prints the one-line summary (counts, SHAs, subset check, pair feasibility)
and any issues. Exit code 1 when validation fails.

Usage:
    python -m apps.cli.check --answers my_answers.txt --allowed my_allowed.txt
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from packages.datasets import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH, pretty_summary, validate_wordlists
from packages.engine import MAX_PAIR_ATTEMPTS


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="QWordle — validate answer/allowed word lists")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH))
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED_PATH))
    ap.add_argument("--max-attempts", type=int, default=MAX_PAIR_ATTEMPTS,
                    help="pair-selector draw budget for the exhaustion estimate")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args(argv)

    rep = validate_wordlists(args.N, args.answers, args.allowed, max_attempts=args.max_attempts)
    if args.json:
        print(json.dumps(rep, indent=2))
    else:
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
