"""
Bounded, persisted leaderboard.

Records are kept best-first (non-increasing score), at most
LEADERBOARD_CAPACITY of them. Ties keep insertion order: a new score only
moves ahead of entries it strictly beats, so an earlier equal score stays
ranked higher.

On disk (UTF-8), one record per line:

    <username> <score>

The file is owned by this program and rewritten in full on every change.
A line that doesn't parse is CorruptedStateError; nothing is repaired.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ..constants import LEADERBOARD_CAPACITY, LEADERBOARD_FILE_NAME, MAX_GUESSES
from ..errors import CorruptedStateError, ResourceLoadError
from ..datasets.io import write_lines

logger = logging.getLogger(__name__)

_SCORE_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ScoreEntry:
    username: str
    score: int

    def __post_init__(self):
        if not self.username or any(ch.isspace() for ch in self.username):
            raise ValueError(f"username must be one non-empty token, got {self.username!r}")
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise ValueError(f"score must be an int, got {self.score!r}")
        if not 0 <= self.score <= MAX_GUESSES:
            raise ValueError(f"score must be in [0, {MAX_GUESSES}], got {self.score}")

    def to_line(self) -> str:
        return f"{self.username} {self.score}"


class LeaderboardFile:
    """The leaderboard's backing store: a single text file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @classmethod
    def in_dir(cls, resource_dir: Path | str) -> "LeaderboardFile":
        return cls(Path(resource_dir) / LEADERBOARD_FILE_NAME)

    def exists(self) -> bool:
        return self.path.is_file()

    def ensure(self) -> None:
        """Create the resource directory and an empty file if they don't exist yet."""
        if self.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as e:
            raise ResourceLoadError(f"cannot create {self.path}: {e}") from e
        logger.info("created empty leaderboard at %s", self.path)

    def read_lines(self) -> List[str]:
        """
        Raises:
          ResourceLoadError   if the file can't be read
          CorruptedStateError if it isn't valid UTF-8 (this program only writes UTF-8)
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise ResourceLoadError(f"cannot read {self.path}: {e}") from e
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            lineno = raw[:e.start].count(b"\n") + 1
            raise CorruptedStateError(self.path, lineno, "not valid UTF-8") from e
        return [ln.rstrip("\r\n") for ln in text.splitlines()]

    def write_lines(self, lines: List[str]) -> None:
        write_lines(lines, self.path)

    def __repr__(self) -> str:
        return f"LeaderboardFile({str(self.path)!r})"


def parse_record(line: str, lineno: int, path: Path | str) -> ScoreEntry:
    """Parse one '<username> <score>' line."""
    parts = line.split()
    if len(parts) != 2:
        raise CorruptedStateError(path, lineno, f"expected '<username> <score>', got {line!r}")
    name, raw_score = parts
    if not _SCORE_RE.fullmatch(raw_score):
        raise CorruptedStateError(path, lineno, f"score {raw_score!r} is not a non-negative integer")
    value = int(raw_score)
    if value > MAX_GUESSES:
        raise CorruptedStateError(path, lineno, f"score {value} exceeds {MAX_GUESSES}")
    return ScoreEntry(name, value)


class Leaderboard:
    capacity = LEADERBOARD_CAPACITY

    def __init__(self, store: LeaderboardFile, entries: Optional[List[ScoreEntry]] = None):
        entries = list(entries or [])
        if len(entries) > self.capacity:
            raise ValueError(f"at most {self.capacity} entries, got {len(entries)}")
        if any(cur.score > prev.score for prev, cur in zip(entries, entries[1:])):
            raise ValueError("entries must be ordered best score first")
        self.store = store
        self._entries: List[ScoreEntry] = entries

    @classmethod
    def load(cls, store: LeaderboardFile) -> "Leaderboard":
        """
        Read the board from `store`. A missing file yields an empty board and
        an empty file is created for later persist() calls.

        Raises:
          ResourceLoadError   if the file can't be read or created
          CorruptedStateError on the first malformed record
        """
        if not store.exists():
            store.ensure()
            return cls(store)

        entries = [parse_record(line, lineno, store.path)
                   for lineno, line in enumerate(store.read_lines(), start=1)]

        if len(entries) > cls.capacity:
            raise CorruptedStateError(store.path, cls.capacity + 1,
                                      f"more than {cls.capacity} records")
        for lineno, (prev, cur) in enumerate(zip(entries, entries[1:]), start=2):
            if cur.score > prev.score:
                raise CorruptedStateError(store.path, lineno, "records are not ordered by score")

        logger.debug("loaded %d leaderboard record(s) from %s", len(entries), store.path)
        return cls(store, entries)

    def top_entries(self) -> Tuple[ScoreEntry, ...]:
        return tuple(self._entries)

    def qualifies(self, score: int) -> bool:
        """Would a new entry with this score stay on the board?"""
        if len(self._entries) < self.capacity:
            return True
        return any(score > e.score for e in self._entries)

    def insert(self, entry: ScoreEntry) -> Optional[int]:
        """
        Place `entry` before the first record it strictly beats (or at the end)
        and drop the lowest record if the board overflows.

        Returns the 0-based rank of the new entry, or None if it fell off.
        Does not persist; see try_insert.
        """
        pos = len(self._entries)
        for i, existing in enumerate(self._entries):
            if entry.score > existing.score:
                pos = i
                break

        self._entries.insert(pos, entry)
        if len(self._entries) > self.capacity:
            self._entries.pop()

        return pos if pos < self.capacity else None

    def persist(self) -> None:
        """Overwrite the backing file with the current records."""
        self.store.write_lines([e.to_line() for e in self._entries])
        logger.debug("persisted %d leaderboard record(s) to %s", len(self._entries), self.store.path)

    def try_insert(self, entry: ScoreEntry) -> Optional[int]:
        """insert() then persist()."""
        rank = self.insert(entry)
        self.persist()
        return rank

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(tuple(self._entries))
