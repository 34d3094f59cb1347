"""
Clean a word list into the shape VocabularyStore expects.

Features:
- Lowercases and strips every line; drops blanks.
- Keeps only a–z words of the target length (default 5); reports how many were dropped.
- De-duplicates and sorts ascending (the on-disk invariant for word lists).
- Optional --merge: union another list in (e.g. make allowed ⊇ secrets).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.prepare_wordlist --in wordclone/datasets/data/allowed_5.txt \
        --merge wordclone/datasets/data/secrets_5.txt
"""

import argparse
from pathlib import Path

from wordclone.constants import ALPHABET, WORD_LENGTH
from wordclone.datasets.io import read_lines, write_lines


def clean_words(lines: list[str], n: int) -> tuple[list[str], int]:
    """Return (sorted unique valid words, number of rejected non-blank lines)."""
    words, rejected = set(), 0
    for s in lines:
        w = s.strip().lower()
        if not w:
            continue
        if len(w) == n and all(ch in ALPHABET for ch in w):
            words.add(w)
        else:
            rejected += 1
    return sorted(words), rejected


def main():
    ap = argparse.ArgumentParser(description="Sort, dedupe and filter a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--merge", action="append", default=[], help="extra list(s) to union in")
    ap.add_argument("--length", type=int, default=WORD_LENGTH, help="word length to keep")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    for extra in args.merge:
        lines += read_lines(extra)

    out, rejected = clean_words(lines, args.length)
    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words, {rejected} rejected)")


if __name__ == "__main__":
    main()
