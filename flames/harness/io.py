"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     one row per evaluated pair.
- write_manifest:dump a JSON manifest with config, hashes, and summary.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from flames.engine.elimination import ROUNDS

FIELDS = ["name1", "name2", "result", "label", "common_letters", "remainder_count", "time_ms"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of results to CSV.

    Schema (columns):
      name1, name2, result, label, common_letters, remainder_count, time_ms,
      elim_1, ..., elim_5

    `common_letters` is written as a plain string ("ar"). Returns the path.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = FIELDS + [f"elim_{i}" for i in range(1, ROUNDS + 1)]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "name1": r["name1"],
                "name2": r["name2"],
                "result": r["result"],
                "label": r.get("label", ""),
                "common_letters": "".join(r.get("common_letters", [])),
                "remainder_count": r["remainder_count"],
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
            }
            elim = r.get("eliminated", [])
            for i in range(1, ROUNDS + 1):
                row[f"elim_{i}"] = elim[i - 1] if i <= len(elim) else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - pairs: output of datasets.validate_pairs_file(...)
      - summary: output of harness.summarize(...)
      - num_cases
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
