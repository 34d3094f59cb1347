"""
Build a secret list from a web page that lists past puzzle answers.

What it does:
- Fetches the page (one shared requests.Session, browser-like User-Agent).
- Narrows the parsed HTML to the elements matched by --selector (default: the whole body).
- Takes every standalone 5-letter token from those elements' text. With
  --caps-only (the default), only ALL-CAPS tokens count, which is how
  answer archives usually print the answer next to dates and prose.
- Optionally unions the result into an existing list (--merge).
- Writes the words lowercased, de-duplicated and sorted.

Install the scraping extra first:  pip install -e ".[scrape]"

Usage:
    python -m script.extract_secret_words --out wordclone/datasets/data/secrets_5.txt
    python -m script.extract_secret_words --selector "ul li" --merge \
        --out wordclone/datasets/data/allowed_5.txt
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordclone.constants import WORD_LENGTH
from wordclone.datasets.io import read_words, write_lines

DEFAULT_URL = "https://wordlehints.co.uk/wordle-past-answers/"
TOKEN_RE = re.compile(rf"\b[A-Za-z]{{{WORD_LENGTH}}}\b")
HEADERS = {"User-Agent": "Mozilla/5.0 (wordclone word-list builder)"}


def extract_words(html: str, selector: str | None = None, caps_only: bool = True) -> list[str]:
    """Sorted unique lowercase words found in the selected elements of `html`."""
    soup = BeautifulSoup(html, "html.parser")
    nodes = soup.select(selector) if selector else [soup.body or soup]

    found = set()
    for node in nodes:
        for tok in TOKEN_RE.findall(node.get_text(" ", strip=True)):
            if caps_only and not tok.isupper():
                continue
            found.add(tok.lower())
    return sorted(found)


def fetch_page(url: str, session: requests.Session | None = None) -> str:
    session = session or requests.Session()
    resp = session.get(url, headers=HEADERS, timeout=30)
    resp.raise_for_status()
    return resp.text


def main():
    ap = argparse.ArgumentParser(description="Scrape answer words into a sorted word list")
    ap.add_argument("--url", default=DEFAULT_URL)
    ap.add_argument("--selector", help="CSS selector for the elements holding the answers")
    ap.add_argument("--any-case", action="store_true", help="accept lowercase tokens too")
    ap.add_argument("--merge", action="store_true", help="union with the words already in --out")
    ap.add_argument("--out", default="wordclone/datasets/data/secrets_5.txt")
    args = ap.parse_args()

    words = set(extract_words(fetch_page(args.url), args.selector, caps_only=not args.any_case))
    if args.merge and Path(args.out).exists():
        words.update(read_words(args.out))

    write_lines(sorted(words), args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
