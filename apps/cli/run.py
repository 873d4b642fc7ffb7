# apps/cli/run.py
"""
CLI entry point for batch FLAMES runs.

This script:
  1) Validates the pairs file (prints counts + SHA, invalid/identical lines).
  2) Loads the pairs and optionally samples them (deterministic by seed).
  3) Evaluates every pair with a live progress indicator and writes:
       - CSV:  one row per pair (result, common letters, elimination order)
       - JSON: manifest with config, file hash, git commit and summary stats
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List, Tuple

from tqdm import tqdm

from flames.datasets import read_pairs, validate_pairs_file, pretty_summary
from flames.harness import run_case, summarize
from flames.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from flames.harness.summary import pretty_summary as pretty_results


def _choose_cases(pairs: List[Tuple[str, str]], sample: int | None, seed: int) -> List[Tuple[str, str]]:
    """Deterministic sample without replacement; all pairs in file order otherwise."""
    if sample and sample < len(pairs):
        pool = list(pairs)
        random.Random(seed).shuffle(pool)
        return pool[:sample]
    return list(pairs)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="flames: evaluate name pairs in batch")
    ap.add_argument("--pairs", required=True,
                    help="path to a pairs file (one 'name1,name2' per line)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of pairs (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--strict", action="store_true",
                    help="exit with status 1 if the pairs file fails validation")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the pairs file, run the batch with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)

    # 1) Validate and print a one-liner summary
    rep = validate_pairs_file(args.pairs)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 1
    if args.strict and not rep["passed"]:
        print("Validation failed; fix the pairs file before running.")
        return 1

    # 2) Load and choose cases
    cases = _choose_cases(read_pairs(args.pairs), args.sample, args.seed)
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="pair") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, (name1, name2) in enumerate(iterator, 1):
        results.append(run_case(name1, name2))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(pretty_results(summary))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "pairs": rep,
        "summary": summary,
        "num_cases": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
