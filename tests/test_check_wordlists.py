from pathlib import Path

from apps.cli.check_wordlists import main


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_check_wordlists_ok(tmp_path: Path, capsys):
    sec = tmp_path / "secrets_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(sec, ["crane", "stare"])
    _write(allw, ["crane", "raise", "stare"])

    assert main(["--secrets", str(sec), "--allowed", str(allw)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("N=5 | secrets=2")
    assert "secrets⊆allowed=True | OK" in out


def test_check_wordlists_fails_and_lists_issues(tmp_path: Path, capsys):
    sec = tmp_path / "secrets_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(sec, ["stare", "crane"])
    _write(allw, ["crane"])

    assert main(["--secrets", str(sec), "--allowed", str(allw)]) == 1
    out = capsys.readouterr().out
    assert "| FAIL" in out
    assert "  - secrets is not sorted ascending" in out
    assert "subset" in out


def test_check_wordlists_packaged_lists(capsys):
    assert main([]) == 0
    assert "OK" in capsys.readouterr().out
