from pathlib import Path

from wordclone.config import DEFAULT_ALLOWED_PATH, DEFAULT_SECRETS_PATH
from wordclone.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    sec = tmp_path / "secrets_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(sec, ["crane", "raise", "stare"])
    _write(allw, ["cared", "crane", "raise", "stare", "trace"])

    rep = validate_wordlists(5, str(sec), str(allw))
    assert rep["passed"] is True
    assert rep["secrets_subset_allowed"] is True
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "secrets⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_invalid_lines(tmp_path: Path):
    sec = tmp_path / "secrets_5.txt"
    allw = tmp_path / "allowed_5.txt"
    # 'raiser' (len 6), '???' and 'Crane' are invalid for N=5
    sec.write_text("crane\nraiser\n???\nCrane\n", encoding="utf-8")
    _write(allw, ["crane", "stare"])

    rep = validate_wordlists(5, str(sec), str(allw))
    assert rep["passed"] is False
    assert rep["secrets"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    sec = tmp_path / "secrets_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(sec, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(5, str(sec), str(allw))
    assert rep["passed"] is False
    assert rep["secrets_subset_allowed"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_unsorted_and_duplicates(tmp_path: Path):
    sec = tmp_path / "secrets_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(sec, ["stare", "crane", "crane"])
    _write(allw, ["crane", "stare"])

    rep = validate_wordlists(5, str(sec), str(allw))
    assert rep["passed"] is False
    assert rep["secrets"]["is_sorted"] is False
    assert rep["allowed"]["is_sorted"] is True
    assert "secrets contains duplicate lines" in rep["issues"]
    assert "secrets is not sorted ascending" in rep["issues"]


def test_validate_wordlists_missing_file(tmp_path: Path):
    allw = tmp_path / "allowed_5.txt"
    _write(allw, ["crane"])
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(allw))
    assert rep["passed"] is False
    assert rep["secrets"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_packaged_wordlists_pass():
    rep = validate_wordlists(5, str(DEFAULT_SECRETS_PATH), str(DEFAULT_ALLOWED_PATH))
    assert rep["passed"] is True, rep["issues"]
