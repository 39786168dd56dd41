"""
Dictionary validator.

What this module does:
- Check a word list against the loading rules (a-z only, exact length N,
  one per line) without raising, so the CLI can print a summary first.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordle_assist.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words_5.txt", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from .dictionary import DictionaryError, invalid_entries, read_entries


@dataclass
class DictionaryReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: Optional[int]     # word length checked against (None if undecidable)
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a dictionary file for word length N (first word's length if None).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with
        counts, SHA-256, invalid/duplicate diagnostics, a strict `passed`
        flag (non-empty, no invalid lines) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(str(path), False, N, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    try:
        entries = read_entries(p)
    except DictionaryError as e:
        rep = DictionaryReport(str(p), True, N, 0, 0, 0, _sha256_file(p), False, [str(e)])
        return asdict(rep)
    if N is None and entries:
        N = len(entries[0][1])

    bad = invalid_entries(entries, N) if N is not None else []
    bad_lines = {ln for ln, _ in bad}
    valid = [w for ln, w in entries if ln not in bad_lines]
    unique = set(valid)

    if not valid:
        issues.append("dictionary contains 0 valid words")
    if bad:
        issues.append(f"dictionary has {len(bad)} invalid line(s) (e.g., {[w for _, w in bad[:5]]})")
    if len(valid) != len(unique):
        issues.append("dictionary contains duplicate lines")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(valid),
        unique_count=len(unique),
        invalid_lines=len(bad),
        sha256=_sha256_file(p),
        passed=bool(valid) and not bad,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
