"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random among the adversary's surviving candidates.
    Every survivor is consistent with all clues so far, so each pick either
    wins or shrinks the set.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Candidates arrive sorted from the harness, so the seeded pick is stable
    regardless of set iteration order.
  - Baseline only; it ignores how the adversary splits the set.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "2.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "candidates": surviving candidate words (sorted List[str])
                - "allowed":    valid guess universe (List[str], length N)

        Returns:
            A single lowercase guess string of length N.
        """
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else state["allowed"]

        # Nothing to pick from; the adversary will reject the next record().
        if not pool:
            return "a" * self.N

        return pool[self.rng.randrange(len(pool))]
