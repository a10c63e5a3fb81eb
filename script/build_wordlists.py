"""
Build the QWordle word lists from a raw dictionary.

What it does:
- Reads a raw word list from a local file (--in) or downloads it (--url).
- Keeps lowercase a–z tokens of length N, de-duplicated in input order.
- Writes the full guess pool (allowed_N.txt) and the answer pool
  (answers_N.txt): the subset whose letters are all distinct, which is what
  lets two answers be picked with no shared letters.

Usage:
    python -m script.build_wordlists --in raw_words.txt
    python -m script.build_wordlists --url https://example.org/words.txt --N 5 \
        --outdir packages/datasets/data
"""

import argparse
from pathlib import Path
from typing import Iterable, List, Tuple

import requests
from tqdm import tqdm

from packages.datasets.io import normalize_words, read_lines, unique_preserve_order, write_lines
from packages.engine.letters import filter_letter_unique


def fetch_words(url: str) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def split_pools(raw: Iterable[str], N: int, progress: bool = False) -> Tuple[List[str], List[str]]:
    """
    Return (answers, allowed) from raw lines.

    allowed : normalized, a–z, length N, de-duplicated (input order kept)
    answers : allowed words with no repeated letter
    """
    words = normalize_words(raw)
    kept = []
    for w in tqdm(words, ncols=80, desc="Filtering", unit="word", disable=not progress):
        if len(w) == N and w.isascii() and w.isalpha():
            kept.append(w)
    allowed = unique_preserve_order(kept)
    answers = filter_letter_unique(allowed)
    return answers, allowed


def main():
    ap = argparse.ArgumentParser(description="Build answer/allowed word lists from a raw dictionary")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="raw word list (one per line)")
    src.add_argument("--url", help="download the raw word list from this URL")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--outdir", default="packages/datasets/data")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping input order")
    args = ap.parse_args()

    raw = fetch_words(args.url) if args.url else read_lines(Path(args.inp))
    answers, allowed = split_pools(raw, args.N, progress=True)
    if args.sort:
        answers, allowed = sorted(answers), sorted(allowed)

    outdir = Path(args.outdir)
    ans_path = write_lines(answers, outdir / f"answers_{args.N}.txt")
    all_path = write_lines(allowed, outdir / f"allowed_{args.N}.txt")
    print(f"Wrote {len(answers)} letter-unique answers -> {ans_path}")
    print(f"Wrote {len(allowed)} allowed guesses -> {all_path}")


if __name__ == "__main__":
    main()
