"""
Batch evaluation primitives.

- run_case:  evaluate one name pair and time it.
- run_batch: evaluate many pairs in sequence (optionally a sample prefix).

UI-agnostic so the CLI, a notebook or a service can reuse them.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Tuple
from flames.engine import compute_flames


def run_case(name1: str, name2: str) -> Dict:
    """
    Returns:
        dict with keys:
            name1, name2, result, label, common_letters (list[str]),
            remainder_count (int), eliminated (list[str]), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    res = compute_flames(name1, name2)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "name1": name1,
        "name2": name2,
        "result": res.result,
        "label": res.meaning.label,
        "common_letters": list(res.common_letters),
        "remainder_count": res.remainder_count,
        "eliminated": list(res.eliminated),
        "time_ms": dt,
    }


def run_batch(pairs: Iterable[Tuple[str, str]], *, sample: int | None = None) -> List[Dict]:
    """
    Evaluate pairs back-to-back. If 'sample' is provided, only the first K
    pairs are used.
    """
    pool = list(pairs)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(a, b) for a, b in pool]
