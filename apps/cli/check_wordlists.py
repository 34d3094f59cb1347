# apps/cli/check_wordlists.py
"""
Validate the secrets/allowed word lists and print a one-line summary.

Usage:
    python -m apps.cli.check_wordlists
    python -m apps.cli.check_wordlists --secrets my_secrets.txt --allowed my_allowed.txt --json
"""

from __future__ import annotations

import argparse
import json
import sys

from wordclone.config import DEFAULT_ALLOWED_PATH, DEFAULT_SECRETS_PATH
from wordclone.constants import WORD_LENGTH
from wordclone.datasets import pretty_summary, validate_wordlists


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Check the wordclone word lists")
    ap.add_argument("--secrets", default=str(DEFAULT_SECRETS_PATH))
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED_PATH))
    ap.add_argument("--json", action="store_true", help="also dump the full report as JSON")
    args = ap.parse_args(argv)

    rep = validate_wordlists(WORD_LENGTH, args.secrets, args.allowed)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if args.json:
        print(json.dumps(rep, indent=2))

    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
