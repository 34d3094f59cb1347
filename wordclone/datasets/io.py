from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..errors import ResourceLoadError

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises ResourceLoadError if the file can't be read or decoded.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadError(f"cannot read {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def read_words(p: Path | str) -> List[str]:
    """Read a newline-separated word list, stripping whitespace and dropping blanks."""
    return [ln.strip() for ln in read_lines(p) if ln.strip()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Overwrite `p` with `lines` (UTF-8, one per line, trailing newline unless
    empty). Creates the parent directory. Returns the string path written.
    """
    p = Path(p)
    lines = list(lines)
    body = "\n".join(lines) + "\n" if lines else ""
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(body, encoding="utf-8")
    except OSError as e:
        raise ResourceLoadError(f"cannot write {p}: {e}") from e
    logger.debug("wrote %d line(s) to %s", len(lines), p)
    return str(p)
