# apps/cli/run.py
"""
CLI entry point for self-play bench runs.

This script:
  1) Validates the word lists (prints counts + SHA, checks used/extra overlap).
  2) Loads the lists and instantiates the requested solver.
  3) Plays every (or a sampled subset of) answer with a live progress
     indicator and prints a summary line.
  4) With --outdir, writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word-list hashes, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordhint.datasets import (EXTRA_PATH, USED_PATH, load_word_lists, pretty_summary,
                               validate_wordlists)
from wordhint.harness import MAX_TURNS, run_case
from wordhint.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordhint.solvers import create_solver, get_solver_ids


def _summary(results) -> str:
    wins = [r for r in results if r["success"]]
    n = max(1, len(results))
    avg = sum(r["guesses"] for r in wins) / len(wins) if wins else 0.0
    return (f"games={len(results)} | solved={len(wins)} ({100.0 * len(wins) / n:.1f}%) "
            f"| avg guesses (solved)={avg:.3f}")


def main(argv=None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(prog="wordhint-bench", description="wordhint: self-play bench")
    ap.add_argument("--solver", default="letter_freq",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--used", default=str(USED_PATH), help="possible answers")
    ap.add_argument("--extra", default=str(EXTRA_PATH), help="guess-only words")
    ap.add_argument("--more-words", action="store_true",
                    help="let the solver guess from the extra list too")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", help="write CSV + manifest here")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    rep = validate_wordlists(args.used, args.extra)
    print(pretty_summary(rep))

    used, pool = load_word_lists(more_words=args.more_words,
                                 used_path=args.used, extra_path=args.extra)
    solver = create_solver(args.solver)

    rng = random.Random(args.seed)
    cases = list(used)
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        r = run_case(solver, ans, pool=pool, seed=args.seed + idx)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    print(_summary(results))

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), max_turns=MAX_TURNS)
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "num_cases": len(results),
            "solver_id": solver.id,
        }, str(outdir / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
