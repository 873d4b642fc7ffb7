"""
Pairs-file validator for batch runs.

What this module does:
- Validate a file of name pairs (one "name1,name2" per line; blank lines and
  '#' comments are skipped).
- Check every name with flames.service.validate_name and flag pairs whose
  names are the same ignoring case.
- Detect duplicate pairs; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from flames.datasets import validate_pairs_file, pretty_summary
    rep = validate_pairs_file("data/pairs.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from flames.service.validation import validate_name
from .io import parse_pair


@dataclass
class PairsReport:
    path: str
    exists: bool
    count: int             # valid pairs
    sha256: str            # of the raw bytes ("" if missing)
    unique_count: int      # valid pairs after case-insensitive dedupe
    invalid_lines: int     # malformed lines or names failing validation
    identical_pairs: int   # both names equal ignoring case
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[Tuple[str, str]], int, int]:
    """
    Returns (valid_pairs, invalid_count, identical_count).
    Identical pairs are counted separately and kept out of valid_pairs.
    """
    valid: List[Tuple[str, str]] = []
    invalid = 0
    identical = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            s = raw.strip()
            if not s or s.startswith("#"):
                continue
            pair = parse_pair(s)
            if pair is None:
                invalid += 1
                continue
            a, b = pair
            if not (validate_name(a).is_valid and validate_name(b).is_valid):
                invalid += 1
            elif a.lower() == b.lower():
                identical += 1
            else:
                valid.append(pair)

    return valid, invalid, identical


def validate_pairs_file(path: str) -> Dict:
    """
    Validate a pairs file.

    Returns a JSON-serializable dict (PairsReport schema). `passed` is strict:
    file exists, at least one valid pair, no invalid lines, no identical pairs.
    Duplicates are reported but don't fail the file.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"pairs file not found: {path}")
        return asdict(PairsReport(path, False, 0, "", 0, 0, 0, False, issues))

    pairs, invalid, identical = _load_and_check(p)
    unique = {(a.lower(), b.lower()) for a, b in pairs}

    if not pairs:
        issues.append("pairs file contains 0 valid pairs")
    if invalid:
        issues.append(f"pairs file has {invalid} invalid line(s)")
    if identical:
        issues.append(f"pairs file has {identical} identical-name pair(s)")
    if len(unique) != len(pairs):
        issues.append("pairs file contains duplicate pairs")

    rep = PairsReport(
        path=str(p),
        exists=True,
        count=len(pairs),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        identical_pairs=identical,
        passed=bool(pairs) and invalid == 0 and identical == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        pairs=120 (uniq=118, sha=abc123def456) | invalid=0 | identical=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"pairs={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | identical={report['identical_pairs']} "
        f"| {status}"
    )
