"""
Word-list validator.

What this module does:
- Validate the pair of word lists: secrets_N.txt (hidden-word pool) and
  allowed_N.txt (guess universe).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates, invalid lines and unsorted files; compute SHA-256 of the raw files.
- Check that secrets ⊆ allowed.
- Return a machine-readable dict and provide a pretty one-line summary.

VocabularyStore sorts at load time anyway, but a list that fails here is a
data-preparation bug worth fixing at the source (script/prepare_wordlist.py).

Typical use:
    from wordclone.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "wordclone/datasets/data/secrets_5.txt",
                                "wordclone/datasets/data/allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class FileReport:
    path: str
    exists: bool
    count: int           # valid words after cleaning
    sha256: str          # of the raw bytes ("" if missing)
    unique_count: int
    invalid_lines: int
    is_sorted: bool      # valid words in strictly ascending order


@dataclass
class ValidationReport:
    N: int
    secrets: FileReport
    allowed: FileReport
    secrets_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and len(w) == N and w.isascii() and w.isalpha() and w.islower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, N: int) -> Tuple[FileReport, List[str]]:
    words, invalid = _load_and_check(path, N)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        is_sorted=all(a < b for a, b in zip(words, words[1:])),
    )
    return rep, words


def validate_wordlists(N: int, secrets_path: str, allowed_path: str) -> Dict:
    """
    Validate the secrets/allowed word lists for length N.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` requires both lists
        non-empty, no invalid lines, no duplicates, sorted, and secrets ⊆ allowed.
    """
    issues: List[str] = []

    sec_p = Path(secrets_path)
    all_p = Path(allowed_path)

    if not sec_p.exists() or not all_p.exists():
        if not sec_p.exists():
            issues.append(f"secrets file not found: {secrets_path}")
        if not all_p.exists():
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            N=N,
            secrets=FileReport(secrets_path, sec_p.exists(), 0, "", 0, 0, False),
            allowed=FileReport(allowed_path, all_p.exists(), 0, "", 0, 0, False),
            secrets_subset_allowed=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    sec_report, secrets = _file_report(sec_p, N)
    all_report, allowed = _file_report(all_p, N)

    subset_ok = set(secrets).issubset(allowed)
    if not subset_ok:
        missing = sorted(set(secrets) - set(allowed))[:5]
        issues.append(f"secrets not subset of allowed (e.g., {missing})")

    for label, r in (("secrets", sec_report), ("allowed", all_report)):
        if r.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if r.invalid_lines:
            issues.append(f"{label} has {r.invalid_lines} invalid line(s)")
        if r.count != r.unique_count:
            issues.append(f"{label} contains duplicate lines")
        if not r.is_sorted:
            issues.append(f"{label} is not sorted ascending")

    passed = (
            subset_ok
            and sec_report.count > 0
            and all_report.count > 0
            and sec_report.invalid_lines == 0
            and all_report.invalid_lines == 0
            and sec_report.is_sorted
            and all_report.is_sorted
    )

    rep = ValidationReport(
        N=N,
        secrets=sec_report,
        allowed=all_report,
        secrets_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | secrets=2309 (uniq=2309, sha=abc123...) | allowed=2622 (uniq=2622, sha=def456...) | secrets⊆allowed=True | OK
    """
    a = report["secrets"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | secrets={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| secrets⊆allowed={report['secrets_subset_allowed']} | {status}"
    )
