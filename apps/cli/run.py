# apps/cli/run.py
"""
CLI entry point for pitting one solver against the Absurdle adversary.

This script:
  1) Loads the dictionary and prints a one-line summary (hash, counts).
  2) Instantiates the requested solver.
  3) Plays a batch of games with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, etc.

Usage:
    python -m apps.cli.run --dictionary words.txt --N 5 --solver minimax --games 10
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, Iterable, List

from tqdm import tqdm

from packages.datasets import load_dictionary, describe_dictionary
from packages.harness import run_case, DEFAULT_MAX_TURNS
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def dictionary_summary(desc: Dict, N: int) -> str:
    """
    One-liner for the console, e.g.
        N=5 | dictionary=words.txt (words=14855, len5=12972, sha=abc123...)
    """
    return (
        f"N={N} | dictionary={desc['path']} "
        f"(words={desc['count']}, len{N}={desc['count_N']}, sha={desc['sha256'][:12]})"
    )


def progress_mode(mode: str) -> str:
    """auto -> bar on an interactive stderr, plain text otherwise."""
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def play_games(solver, *, dictionary: List[str], N: int, games: int, seed: int,
               max_turns: int, progress: str, label: str = "Running") -> List[Dict]:
    """
    Play `games` games with per-game seeds, reporting progress on stderr.
    Each result is stamped with the solver id.
    """
    mode = progress_mode(progress)
    indices: Iterable[int] = range(1, games + 1)
    if mode == "bar":
        indices = tqdm(indices, total=games, ncols=80, desc=label, unit="game")

    results: List[Dict] = []
    start = time.time()
    last_print = 0.0

    for idx in indices:
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = seed + idx * 1013904223
        r = run_case(solver, dictionary=dictionary, N=N, max_turns=max_turns, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == games):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (games - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, games)
                sys.stderr.write(
                    f"\r[{label}] {idx}/{games} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    return results


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--dictionary", required=True, help="path to word list (one word per line)")
    ap.add_argument("--games", type=int, default=1,
                    help="games per solver (only randomized solvers differ between games)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="give up after this many guesses")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="log adversary decisions (DEBUG)")


def main():
    """
    Parse CLI args, load the dictionary, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="absurdle — run a solver against the adversary")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {solver_choices})")
    add_common_args(ap)
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    # 1) Load and summarize the dictionary
    try:
        desc = describe_dictionary(args.dictionary, args.N)
        dictionary = load_dictionary(args.dictionary)
    except FileNotFoundError as e:
        raise SystemExit(f"dictionary not found: {e}")
    print(dictionary_summary(desc, args.N))

    # 2) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e))

    # 3) Play
    results = play_games(
        solver, dictionary=dictionary, N=args.N, games=args.games, seed=args.seed,
        max_turns=args.max_turns, progress=args.progress, label=solver.id,
    )

    solved = [r for r in results if r["success"]]
    if solved:
        avg = sum(r["guesses"] for r in solved) / len(solved)
        print(f"{solver.id}: solved {len(solved)}/{len(results)} | avg guesses {avg:.2f}")
    else:
        print(f"{solver.id}: solved 0/{len(results)}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": desc,
        "num_cases": len(results),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
