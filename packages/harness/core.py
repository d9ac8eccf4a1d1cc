"""
Experiment harness core primitives.

- run_case:  play one game of a solver against a fresh adversary.
- run_batch: play many games in sequence with derived seeds.

The adversary has no secret, so a "case" is just a (solver, dictionary, N,
seed) tuple; the game ends when the solver names the one word left. Absurdle
has no official turn limit, so the harness caps games at `max_turns` to keep
a weak solver from looping forever.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Tuple
from packages.absurdle import AbsurdleManager
from packages.engine import is_solved

DEFAULT_MAX_TURNS = 20


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        solver,
        *,
        dictionary: Iterable[str],
        N: int,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:     an object implementing BaseSolver with next_guess(state)
        dictionary: all words (any length); also the solver's guess universe
        N:          word length
        max_turns:  safety cap on the number of guesses
        seed:       RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), final_word (str | None)
    """
    _check_turns(max_turns)

    dictionary = list(dictionary)
    solver.reset(allowed=dictionary, N=N, seed=seed)
    manager = AbsurdleManager(dictionary, N)

    history: List[Tuple[str, str]] = []
    t0 = time.time()

    for turn in range(1, max_turns + 1):
        # Sorted so seeded solvers don't depend on set iteration order
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": sorted(manager.words()),
            "allowed": solver.allowed,
            "N": N,
            "rng": solver.rng,
        }

        guess = solver.next_guess(state)
        patt = manager.record(guess)
        history.append((guess, patt))

        if is_solved(patt):
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "final_word": guess,
            }

    dt = (time.time() - t0) * 1000.0
    remaining = manager.words()
    return {
        "success": False, "guesses": len(history), "time_ms": dt,
        "history": history,
        "final_word": next(iter(remaining)) if len(remaining) == 1 else None,
    }


def run_batch(
        solver,
        *,
        dictionary: List[str],
        N: int,
        games: int = 1,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run `games` independent games back-to-back.

    Each game's seed is derived from the base seed (seed + index) so runs are
    reproducible but randomized solvers still vary between games.
    """
    _check_turns(max_turns)

    out: List[Dict] = []
    for idx in range(1, games + 1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, dictionary=dictionary, N=N, max_turns=max_turns, seed=case_seed)
        out.append(r)
    return out
