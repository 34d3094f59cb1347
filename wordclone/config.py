"""
Runtime configuration.

Rules (word length, turn budget, leaderboard size) are constants; what varies
between runs is where the data lives. The CLI fills a GameConfig from its
argparse namespace and hands the paths to the stores explicitly.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from .constants import RESOURCE_DIR_NAME, WORD_LENGTH

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"

DEFAULT_SECRETS_PATH = DATA_DIR / f"secrets_{WORD_LENGTH}.txt"
DEFAULT_ALLOWED_PATH = DATA_DIR / f"allowed_{WORD_LENGTH}.txt"


def default_resource_dir() -> Path:
    """
    `wc_resources/` next to the program being run (the entry script), so the
    leaderboard travels with the installation rather than the shell's cwd.
    """
    if sys.argv and sys.argv[0]:
        base = Path(sys.argv[0]).resolve().parent
    else:
        base = Path.cwd()
    return base / RESOURCE_DIR_NAME


@dataclass
class GameConfig:
    secrets_path: Path = DEFAULT_SECRETS_PATH
    allowed_path: Path = DEFAULT_ALLOWED_PATH
    resource_dir: Path = field(default_factory=default_resource_dir)
    seed: int | None = None

    @classmethod
    def from_args(cls, args) -> "GameConfig":
        """Build from an argparse namespace; unset options keep the defaults."""
        cfg = cls()
        if getattr(args, "secrets", None):
            cfg.secrets_path = Path(args.secrets)
        if getattr(args, "allowed", None):
            cfg.allowed_path = Path(args.allowed)
        if getattr(args, "resources", None):
            cfg.resource_dir = Path(args.resources)
        cfg.seed = getattr(args, "seed", None)
        return cfg
