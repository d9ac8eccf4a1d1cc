import csv
import json
from pathlib import Path

import pytest
from packages.solvers import create_solver, get_solver_ids
from packages.harness import run_case, run_batch, write_csv, write_manifest
from packages.engine import GREEN, GRAY, is_solved
from packages.harness.io import result_row, csv_fields

DICTIONARY = [
    "crane", "raise", "stare", "trace", "cared", "racer", "scoop", "level",
    "belle", "lemon", "adieu", "alone", "slate", "roate", "tears", "abc", "frogs!",
]


@pytest.mark.parametrize("solver_id", ["random_consistent", "letter_freq", "minimax"])
def test_run_case_solves(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, dictionary=DICTIONARY, N=5, seed=42)
    assert r["success"] is True
    assert is_solved(r["history"][-1][1])
    assert r["final_word"] == r["history"][-1][0]
    assert r["guesses"] == len(r["history"])


def test_run_case_is_reproducible_with_seed():
    a = run_case(create_solver("random_consistent"), dictionary=DICTIONARY, N=5, seed=7)
    b = run_case(create_solver("random_consistent"), dictionary=DICTIONARY, N=5, seed=7)
    assert a["history"] == b["history"]


def test_run_case_gives_up_at_max_turns():
    # disjoint letters: any guess leaves the other four words under an all-gray clue
    disjoint = ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]
    r = run_case(create_solver("random_consistent"), dictionary=disjoint, N=5,
                 max_turns=1, seed=1)
    assert r["success"] is False
    assert r["guesses"] == 1
    assert r["final_word"] is None
    assert not is_solved(r["history"][-1][1])


def test_run_case_rejects_bad_turn_budget():
    with pytest.raises(ValueError):
        run_case(create_solver("minimax"), dictionary=DICTIONARY, N=5, max_turns=0)


def test_run_batch_and_outputs(tmp_path: Path):
    solver = create_solver("minimax")
    results = run_batch(solver, dictionary=DICTIONARY, N=5, games=2, seed=3)
    assert len(results) == 2 and all(r["success"] for r in results)
    for r in results:
        r["solver_id"] = solver.id

    out = write_csv(results, str(tmp_path / "run.csv"), max_turns=20, N=5)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["solver"] == "minimax"
    assert rows[0]["patt_1"].startswith("'")
    assert set(rows[0]["patt_1"][1:]) <= set("GY-")

    man = write_manifest({"run_id": "x", "num_cases": 2}, str(tmp_path / "m" / "run.json"))
    assert json.loads(Path(man).read_text(encoding="utf-8"))["num_cases"] == 2


def test_solver_registry():
    assert {"random_consistent", "letter_freq", "minimax"} <= set(get_solver_ids())
    with pytest.raises(ValueError):
        create_solver("nope")


def test_result_row_pads_and_truncates_turn_columns():
    r = {"success": True, "guesses": 2, "time_ms": 1.23456, "final_word": "xyz",
         "history": [("abc", GRAY * 3), ("xyz", GREEN * 3)]}
    padded = result_row(r, max_turns=3, N=3)
    assert list(padded) == csv_fields(3)
    assert padded["patt_1"] == "'---" and padded["patt_2"] == "'GGG"
    assert padded["guess_3"] == "" and padded["time_ms"] == 1.235

    short = result_row(r, max_turns=1, N=3)
    assert "guess_2" not in short and short["guess_1"] == "abc"
