# apps/cli/play.py
"""
Terminal front-end for wordclone.

This script:
  1) Loads the word lists and the leaderboard (a missing leaderboard file is
     created; unreadable or corrupted files abort with a message).
  2) Shows the start screen: P to play, H for the rules.
  3) Runs one game, re-prompting on invalid guesses, and renders each guess
     in color (green = right spot, blue = elsewhere in the word).
  4) On a win, asks for a username and records the score, then prints the
     leaderboard.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --resources ~/.wordclone --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, Iterable, List, TypeVar

from colorama import Fore, Style, init as colorama_init

from wordclone.config import GameConfig
from wordclone.constants import ALPHABET, MAX_GUESSES, USERNAME_LENGTH, WORD_LENGTH
from wordclone.datasets import VocabularyStore
from wordclone.engine import GuessResult, Verdict, validate_username
from wordclone.errors import (
    CorruptedStateError, InvalidCommand, ResourceLoadError, ValidationError,
)
from wordclone.harness import GameSession
from wordclone.leaderboard import Leaderboard, LeaderboardFile

logger = logging.getLogger("wordclone.cli")

T = TypeVar("T")

HELP_TEXT = f"""
Game mechanics: guess the {WORD_LENGTH}-letter word in {MAX_GUESSES} tries.
Each letter of your guess changes color depending on its correctness.

For example, if the hidden word is 'altar' and you guess 'later', you see
{Fore.BLUE}L A{Style.RESET_ALL} {Fore.GREEN}T{Style.RESET_ALL} E {Fore.GREEN}R{Style.RESET_ALL}: \
'L' and 'A' are {Fore.BLUE}BLUE{Style.RESET_ALL} since they are in 'altar' but in the wrong
position, 'T' and 'R' are {Fore.GREEN}GREEN{Style.RESET_ALL} since they are in the right position,
and 'E' stays plain since 'altar' has no 'E'.

Use these color hints to find the hidden word!
"""

_COLORS = {
    Verdict.CORRECT: Fore.GREEN + Style.BRIGHT,
    Verdict.PRESENT: Fore.BLUE,
    Verdict.ABSENT: Style.BRIGHT,
}


def parse_command(text: str, valid: Iterable[str]) -> str:
    """
    Single-letter, case-insensitive command. Returns the uppercase letter.
    Raises InvalidCommand otherwise.
    """
    valid = [c.upper() for c in valid]
    cmd = text.strip().upper()
    if len(cmd) != 1 or cmd not in valid:
        raise InvalidCommand(valid)
    return cmd


def render_guess(result: GuessResult) -> str:
    return " ".join(
        f"{_COLORS[lv.verdict]}{lv.letter.upper()}{Style.RESET_ALL}" for lv in result
    )


def render_board(session: GameSession) -> str:
    rows: List[str] = [render_guess(r) for r in session.history]
    rows += [" ".join("_" * WORD_LENGTH)] * session.guesses_left
    return "\n".join("\t\t" + row for row in rows)


def render_letters(session: GameSession) -> str:
    letters = " ".join(ch.upper() if ch in session.letters else " "
                       for ch in ALPHABET)
    return f"Available letters:  {letters}"


def render_leaderboard(board: Leaderboard) -> str:
    entries = board.top_entries()
    if not entries:
        return "Leaderboard is empty."
    lines = ["Leaderboard:"]
    lines += [f"  {i}. {e.username}  {e.score}" for i, e in enumerate(entries, 1)]
    return "\n".join(lines)


def prompt(message: str, parse: Callable[[str], T], read: Callable[[], str] = input) -> T:
    """Ask until `parse` accepts the answer; ValidationError messages are shown."""
    while True:
        print(message)
        raw = read()
        try:
            return parse(raw)
        except ValidationError as e:
            print(f"\n{e}\n", file=sys.stderr)


def play(vocab: VocabularyStore, board: Leaderboard, read: Callable[[], str] = input) -> GameSession:
    """One full game: start screen, guess loop, end screen, leaderboard."""
    print("\nLet's play wordclone!\n")
    cmd = prompt("Press P to play the game or H to display the rules.",
                 lambda s: parse_command(s, "PH"), read)
    if cmd == "H":
        print(HELP_TEXT)
        prompt("Press P to play the game:", lambda s: parse_command(s, "P"), read)

    session = GameSession(vocab)
    print(render_letters(session))
    print(render_board(session))
    print(f"Number of guesses left: {session.guesses_left}")

    while not session.over:
        prompt("Your guess:", session.submit, read)
        print()
        print(render_letters(session))
        print(render_board(session))
        print(f"Number of guesses left: {session.guesses_left}")

    if session.won:
        print(f"{Fore.GREEN}{Style.BRIGHT}You won the game! Score: {session.score}{Style.RESET_ALL}")
        if board.qualifies(session.score):
            name = prompt(f"Input a {USERNAME_LENGTH}-character username:", validate_username, read)
            session.record_score(board, name)
    else:
        print(f"{Fore.RED}{Style.BRIGHT}GAME OVER. The correct answer is "
              f"{session.secret}.{Style.RESET_ALL}")

    print(render_leaderboard(board))
    return session


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordclone — guess the hidden word")
    ap.add_argument("--secrets", help="path to the secret word list (default: packaged list)")
    ap.add_argument("--allowed", help="path to the allowed guesses (default: packaged list)")
    ap.add_argument("--resources", help="directory holding highscore.txt "
                                        "(default: wc_resources/ next to this program)")
    ap.add_argument("--seed", type=int, help="seed the secret picker")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")
    cfg = GameConfig.from_args(args)

    try:
        rng = random.Random(cfg.seed) if cfg.seed is not None else None
        vocab = VocabularyStore.load(cfg.secrets_path, cfg.allowed_path, rng=rng)
        board = Leaderboard.load(LeaderboardFile.in_dir(cfg.resource_dir))
    except CorruptedStateError as e:
        print(f"Leaderboard file is corrupted: {e}", file=sys.stderr)
        return 1
    except ResourceLoadError as e:
        print(f"Failed to load game resources: {e}", file=sys.stderr)
        return 1
    logger.info("leaderboard: %s (%d record(s))", board.store.path, len(board))

    colorama_init(autoreset=True)

    try:
        play(vocab, board)
    except ResourceLoadError as e:
        print(f"Failed to save the leaderboard: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
