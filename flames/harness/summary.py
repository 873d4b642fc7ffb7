"""
Aggregate statistics over a batch of results.

summarize(results) -> {
    "num_cases": int,
    "results":   {"F": n, "L": n, ...}      # every letter present, zeros included
    "shares":    {"F": 0.17, ...}
    "remainder": {"min", "max", "mean", "median", "std"}
    "degenerate": int                       # cases with remainder 0
}
"""

from __future__ import annotations
import numpy as np
from typing import Dict, List

from flames.engine import FLAMES


def summarize(results: List[Dict]) -> Dict:
    n = len(results)
    letters = np.array([FLAMES.index(r["result"]) for r in results], dtype=int)
    counts = np.bincount(letters, minlength=len(FLAMES)) if n else np.zeros(len(FLAMES), dtype=int)
    rem = np.array([r["remainder_count"] for r in results], dtype=float)

    if n:
        stats = {
            "min": int(rem.min()),
            "max": int(rem.max()),
            "mean": float(rem.mean()),
            "median": float(np.median(rem)),
            "std": float(rem.std()),
        }
    else:
        stats = {"min": 0, "max": 0, "mean": 0.0, "median": 0.0, "std": 0.0}

    return {
        "num_cases": n,
        "results": {ch: int(c) for ch, c in zip(FLAMES, counts)},
        "shares": {ch: (float(c) / n if n else 0.0) for ch, c in zip(FLAMES, counts)},
        "remainder": stats,
        "degenerate": int(np.count_nonzero(rem == 0)),
    }


def pretty_summary(summary: Dict) -> str:
    """
    Example:
        n=120 | F=20 L=18 A=25 M=21 E=17 S=19 | remainder mean=7.42 median=7.0
    """
    parts = " ".join(f"{ch}={summary['results'][ch]}" for ch in FLAMES)
    rem = summary["remainder"]
    return (
        f"n={summary['num_cases']} | {parts} "
        f"| remainder mean={rem['mean']:.2f} median={rem['median']:.1f}"
    )
