"""
Run outputs: one CSV row per game plus a JSON manifest per run.

Game histories have no fixed length against the adversary, so the CSV is
padded out to `max_turns` guess/pattern column pairs. Patterns go out in
letter form ("GY-"): spreadsheets mangle the emoji squares, and a leading
apostrophe stops Excel from reading "-GY-" as a formula.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from packages.engine import to_letters

BASE_FIELDS = ["solver", "N", "final_word", "success", "guesses", "time_ms"]


def csv_fields(max_turns: int) -> List[str]:
    turn_fields = [f"{kind}_{i}" for i in range(1, max_turns + 1) for kind in ("guess", "patt")]
    return BASE_FIELDS + turn_fields


def _turn_cells(history: List[Tuple[str, str]], max_turns: int) -> Iterator[Tuple[str, str]]:
    for i in range(max_turns):
        if i < len(history):
            guess, patt = history[i]
            yield guess, "'" + to_letters(patt)
        else:
            yield "", ""


def result_row(result: Dict, max_turns: int, N: int) -> Dict:
    """Flatten one run_case result into a CSV row dict."""
    row = {
        "solver": result.get("solver_id", "?"),
        "N": N,
        "final_word": result.get("final_word") or "",
        "success": result["success"],
        "guesses": result["guesses"],
        "time_ms": round(float(result["time_ms"]), 3),
    }
    cells = _turn_cells(result.get("history", []), max_turns)
    for i, (guess, patt) in enumerate(cells, start=1):
        row[f"guess_{i}"] = guess
        row[f"patt_{i}"] = patt
    return row


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Write every game of a batch to `path` (parents created) and return it.
    Histories longer than `max_turns` are truncated to fit the columns.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=csv_fields(max_turns))
        writer.writeheader()
        writer.writerows(result_row(r, max_turns, N) for r in results)
    return str(out)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run manifest (config, dictionary summary, counts) as JSON."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return str(out)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return f"{dt.datetime.now(dt.timezone.utc):%Y%m%dT%H%M%SZ}"


def git_commit_or_unknown() -> str:
    """Short HEAD hash of the working tree, or 'unknown' outside a git checkout."""
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=False,
        )
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"
