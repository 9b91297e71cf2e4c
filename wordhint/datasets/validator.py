"""
Word-list validator for wordhint.

What this module does:
- Validate the pair of bundled lists: words-used.txt (possible answers) and
  words-extra.txt (accepted guesses that are never answers).
- Enforce formatting rules (lowercase, a-z only, exactly WORD_LEN, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that the two lists do not overlap.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordhint.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(USED_PATH, EXTRA_PATH)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordhint.engine import WORD_LEN


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (used, extra) pair."""
    N: int
    used: FileReport
    extra: FileReport
    overlap: int         # words present in both lists
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a-z
      - must have exact length WORD_LEN
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower() and len(w) == WORD_LEN:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(used_path: Path | str, extra_path: Path | str) -> Dict:
    """
    Validate the used/extra word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - overlap count between used and extra
          - `passed` boolean (strict: non-empty used, no invalids, no dupes,
            no overlap)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    used_p = Path(used_path)
    extra_p = Path(extra_path)

    # Early return if either file is missing
    if not used_p.exists() or not extra_p.exists():
        if not used_p.exists():
            issues.append(f"used file not found: {used_path}")
        if not extra_p.exists():
            issues.append(f"extra file not found: {extra_path}")
        rep = ValidationReport(
            N=WORD_LEN,
            used=FileReport(str(used_path), used_p.exists(), 0, "", 0, 0),
            extra=FileReport(str(extra_path), extra_p.exists(), 0, "", 0, 0),
            overlap=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    used, used_invalid = _load_and_check(used_p)
    extra, extra_invalid = _load_and_check(extra_p)

    used_report = _file_report(used_p, used, used_invalid)
    extra_report = _file_report(extra_p, extra, extra_invalid)

    overlap = set(used) & set(extra)
    if overlap:
        # Surface a few examples to debug quickly
        issues.append(f"used and extra overlap (e.g., {sorted(overlap)[:5]})")

    if used_report.count == 0:
        issues.append("used file contains 0 valid words")

    if used_invalid:
        issues.append(f"used has {used_invalid} invalid line(s)")
    if extra_invalid:
        issues.append(f"extra has {extra_invalid} invalid line(s)")

    if used_report.count != used_report.unique_count:
        issues.append("used contains duplicate lines")
    if extra_report.count != extra_report.unique_count:
        issues.append("extra contains duplicate lines")

    rep = ValidationReport(
        N=WORD_LEN,
        used=used_report,
        extra=extra_report,
        overlap=len(overlap),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | used=2315 (uniq=2315, sha=abc123...) | extra=10657 (uniq=10657, sha=def456...) | overlap=0 | OK
    """
    a = report["used"]
    b = report["extra"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | used={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| extra={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| overlap={report['overlap']} | {status}"
    )
