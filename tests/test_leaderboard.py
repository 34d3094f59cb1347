from pathlib import Path

import pytest

from wordclone.errors import CorruptedStateError, ResourceLoadError
from wordclone.leaderboard import Leaderboard, LeaderboardFile, ScoreEntry

SEQUENCE = [("aaaaa", 3), ("bbbbb", 5), ("ccccc", 4), ("ddddd", 5), ("eeeee", 2), ("fffff", 6)]


@pytest.fixture
def store(tmp_path: Path) -> LeaderboardFile:
    return LeaderboardFile.in_dir(tmp_path / "wc_resources")


def _scores(board):
    return [e.score for e in board.top_entries()]


def test_insertion_trace(store):
    board = Leaderboard(store)
    seen = []
    for name, s in SEQUENCE:
        board.insert(ScoreEntry(name, s))
        seen.append(_scores(board))

    assert seen == [
        [3],
        [5, 3],
        [5, 4, 3],
        [5, 5, 4, 3],
        [5, 5, 4, 3, 2],
        [6, 5, 5, 4, 3],
    ]
    # earlier equal score keeps the higher rank
    assert [e.username for e in board] == ["fffff", "bbbbb", "ddddd", "ccccc", "aaaaa"]


def test_insert_returns_rank(store):
    board = Leaderboard(store)
    ranks = [board.insert(ScoreEntry(n, s)) for n, s in SEQUENCE]
    assert ranks == [0, 0, 1, 1, 4, 0]
    assert board.qualifies(4) is True
    assert board.qualifies(3) is False
    assert board.insert(ScoreEntry("ggggg", 1)) is None
    assert len(board) == 5


def test_insert_does_not_persist_but_try_insert_does(store):
    board = Leaderboard.load(store)
    board.insert(ScoreEntry("alice", 4))
    assert store.path.read_text(encoding="utf-8") == ""

    board.try_insert(ScoreEntry("bobby", 6))
    assert store.path.read_text(encoding="utf-8") == "bobby 6\nalice 4\n"


def test_round_trip(store):
    board = Leaderboard.load(store)
    for name, s in SEQUENCE:
        board.try_insert(ScoreEntry(name, s))

    again = Leaderboard.load(store)
    assert again.top_entries() == board.top_entries()


def test_missing_file_is_provisioned(store):
    assert not store.path.exists()
    board = Leaderboard.load(store)
    assert board.top_entries() == ()
    assert store.path.is_file()


def test_empty_file_loads_empty(store):
    store.ensure()
    assert len(Leaderboard.load(store)) == 0


@pytest.mark.parametrize("content,lineno", [
    ("alice\n", 1),
    ("alice 3 extra\n", 1),
    ("alice x\n", 1),
    ("alice -1\n", 1),
    ("alice 3.5\n", 1),
    ("alice 99\n", 1),
    ("alice 5\n\nbobby 3\n", 2),
    ("alice 3\nbobby 5\n", 2),
    ("a 6\nb 5\nc 4\nd 3\ne 2\nf 1\n", 6),
])
def test_corrupted_file(store, content, lineno):
    store.ensure()
    store.path.write_text(content, encoding="utf-8")
    with pytest.raises(CorruptedStateError) as exc:
        Leaderboard.load(store)
    assert exc.value.lineno == lineno
    assert str(store.path) in str(exc.value)


def test_tolerates_extra_whitespace(store):
    store.ensure()
    store.path.write_text("alice \t 5\nbobby 5", encoding="utf-8")
    board = Leaderboard.load(store)
    assert board.top_entries() == (ScoreEntry("alice", 5), ScoreEntry("bobby", 5))


def test_unwritable_location_is_resource_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(ResourceLoadError):
        Leaderboard.load(LeaderboardFile.in_dir(blocker))


@pytest.mark.parametrize("name,score", [("", 3), ("al ce", 3), ("alice", -1), ("alice", 7), ("alice", "3")])
def test_score_entry_rejects_bad_values(name, score):
    with pytest.raises(ValueError):
        ScoreEntry(name, score)


def test_constructor_rejects_overfull_board(store):
    with pytest.raises(ValueError):
        Leaderboard(store, [ScoreEntry("aaaaa", 6)] * 6)


def test_constructor_rejects_unordered_entries(store):
    with pytest.raises(ValueError):
        Leaderboard(store, [ScoreEntry("aaaaa", s) for s in [1, 2, 3]])
    board = Leaderboard(store, [ScoreEntry("aaaaa", s) for s in [5, 5, 2]])
    assert _scores(board) == [5, 5, 2]


def test_invalid_utf8_is_corrupted_state(store):
    store.ensure()
    store.path.write_bytes(b"alice 5\nb\xffb 3\n")
    with pytest.raises(CorruptedStateError) as exc:
        Leaderboard.load(store)
    assert exc.value.lineno == 2
    assert not isinstance(exc.value, ResourceLoadError)
