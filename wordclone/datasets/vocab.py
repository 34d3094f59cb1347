"""
Vocabulary store: the secret pool and the allowed-guess universe.

  - secrets : words the game may pick as the hidden word
  - allowed : every word accepted as a guess (a superset of secrets)

Both lists are kept as sorted, de-duplicated tuples so membership is a
binary search. They are sorted here at construction; the word-list files are
expected to be sorted already (see script/prepare_wordlist.py), and a
warning is logged when they are not.
"""

from __future__ import annotations

import logging
import random
from bisect import bisect_left
from pathlib import Path
from typing import Iterable, List, Tuple

from ..constants import ALPHABET, WORD_LENGTH
from ..errors import ResourceLoadError
from .io import read_words

logger = logging.getLogger(__name__)


def _is_word(w: str) -> bool:
    return len(w) == WORD_LENGTH and all(ch in ALPHABET for ch in w)


def _sorted_unique(words: Iterable[str], label: str) -> Tuple[str, ...]:
    words = list(words)
    out = tuple(sorted(set(words)))
    if len(out) != len(words) or list(out) != words:
        logger.warning("%s list was not sorted/unique (%d lines -> %d words); sorted at load",
                       label, len(words), len(out))
    return out


def _contains(pool: Tuple[str, ...], word: str) -> bool:
    i = bisect_left(pool, word)
    return i < len(pool) and pool[i] == word


class VocabularyStore:
    def __init__(self, secrets: Iterable[str], allowed: Iterable[str],
                 rng: random.Random | None = None):
        self._secrets = _sorted_unique(secrets, "secrets")
        self._allowed = _sorted_unique(allowed, "allowed")
        if not self._secrets:
            raise ResourceLoadError("secret word list is empty")
        self._rng = rng if rng is not None else random.Random()

        bad = [w for w in self._secrets + self._allowed if not _is_word(w)]
        if bad:
            logger.warning("%d word(s) are not %d lowercase letters (e.g. %s); "
                           "they can never match a guess", len(bad), WORD_LENGTH, bad[:3])

        unguessable = set(self._secrets).difference(self._allowed)
        if unguessable:
            logger.warning("%d secret(s) are missing from the allowed list (e.g. %s)",
                           len(unguessable), sorted(unguessable)[:3])

    @classmethod
    def load(cls, secrets_path: Path | str, allowed_path: Path | str,
             rng: random.Random | None = None) -> "VocabularyStore":
        """
        Read both word lists (one word per line, UTF-8).

        Raises:
          ResourceLoadError if either file can't be read, or if the secrets
          list has no words.
        """
        secrets: List[str] = read_words(secrets_path)
        allowed: List[str] = read_words(allowed_path)
        store = cls(secrets, allowed, rng=rng)
        logger.info("loaded %d secret(s) from %s and %d allowed word(s) from %s",
                    len(store.secrets), secrets_path, len(store.allowed), allowed_path)
        return store

    @property
    def secrets(self) -> Tuple[str, ...]:
        return self._secrets

    @property
    def allowed(self) -> Tuple[str, ...]:
        return self._allowed

    def random_secret(self) -> str:
        """Uniform pick from the secret pool."""
        return self._secrets[self._rng.randrange(len(self._secrets))]

    def is_allowed(self, word: str) -> bool:
        # No normalization: 'CRANE' or ' crane' are simply not found.
        return _contains(self._allowed, word)

    def is_secret_candidate(self, word: str) -> bool:
        return _contains(self._secrets, word)

    def __repr__(self) -> str:
        return f"VocabularyStore(secrets={len(self._secrets)}, allowed={len(self._allowed)})"
