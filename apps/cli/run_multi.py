# apps/cli/run_multi.py
"""
Run several solvers against the adversary in one shot and compare them.

Writes one combined CSV + manifest to: <outdir>/multi_<timestamp>.csv / _manifest.json
and prints a small summary table (solved, mean and worst guess count).
"""

from __future__ import annotations
import argparse, logging
from pathlib import Path
from typing import Dict, List

from apps.cli.run import add_common_args, dictionary_summary, play_games
from packages.datasets import load_dictionary, describe_dictionary
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def _split_ids(values: List[str]) -> List[str]:
    return [s for v in values for s in v.split(",") if s]


def _summary_row(solver_id: str, results: List[Dict]) -> str:
    solved = [r["guesses"] for r in results if r["success"]]
    if not solved:
        return f"{solver_id:<20} {0:>4}/{len(results):<4} {'-':>8} {'-':>6}"
    mean = sum(solved) / len(solved)
    return f"{solver_id:<20} {len(solved):>4}/{len(results):<4} {mean:>8.2f} {max(solved):>6}"


def main():
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="absurdle — run many solvers at once")
    ap.add_argument("--solvers", nargs="+", default=["ALL"],
                    help=f"solver ids (comma- or space-separated) or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    add_common_args(ap)
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    # 1) load once
    try:
        desc = describe_dictionary(args.dictionary, args.N)
        dictionary = load_dictionary(args.dictionary)
    except FileNotFoundError as e:
        raise SystemExit(f"dictionary not found: {e}")
    print(dictionary_summary(desc, args.N))

    # 2) expand solvers ("a,b c" and "a b c" both work)
    requested = _split_ids(args.solvers)
    if len(requested) == 1 and requested[0].lower() == "all":
        skip = set(_split_ids(args.exclude))
        todo = [s for s in registered if s not in skip]
    else:
        todo = requested
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    # 3) run each solver sequentially
    all_results: List[Dict] = []
    table: List[str] = []
    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} for {args.games} game(s) (N={args.N}) ===")
        results = play_games(
            create_solver(sid), dictionary=dictionary, N=args.N, games=args.games,
            seed=args.seed, max_turns=args.max_turns, progress=args.progress, label=sid,
        )
        all_results.extend(results)
        table.append(_summary_row(sid, results))

    print(f"\n{'solver':<20} {'solved':>9} {'mean':>8} {'worst':>6}")
    for line in table:
        print(line)

    # 4) write combined outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"multi_{run_id}.csv"
    manifest_path = outdir / f"multi_{run_id}_manifest.json"

    write_csv(all_results, str(csv_path), max_turns=args.max_turns, N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": desc,
        "num_cases": len(all_results),
        "solver_ids": todo,
    }
    write_manifest(manifest, str(manifest_path))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
