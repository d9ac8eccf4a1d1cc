"""
Minimax (smallest worst bucket).

Idea:
  The adversary always keeps the largest clue bucket, so the worst case IS
  the outcome. For each guess g, compute the size of the bucket it would
  leave behind and pick the guess that minimizes it.
  Tie-break: prefer a surviving candidate (it might be the last word), then
  the seeded RNG.

Pool:
  Small candidate sets are scored directly against themselves. Large ones
  score a capped probe pool from `allowed`, pre-ranked by distinct-letter
  coverage so the expensive bucket computation stays bounded.
"""

from __future__ import annotations
from typing import Dict, List
from .base import BaseSolver, register
from packages.engine.partition import worst_bucket


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax Worst Bucket"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 200
    POOL_CAP = 400

    def _coverage(self, w: str, alpha: Dict[str, int]) -> int:
        return sum(alpha.get(ch, 0) for ch in set(w))

    def _select_pool(self, candidates: List[str], allowed: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT or not allowed:
            return candidates
        alpha: Dict[str, int] = {}
        for w in candidates:
            for ch in set(w):
                alpha[ch] = alpha.get(ch, 0) + 1
        ranked = sorted(allowed, key=lambda w: self._coverage(w, alpha), reverse=True)
        return ranked[: self.POOL_CAP]

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if len(candidates) == 1:
            return candidates[0]

        pool = self._select_pool(candidates, allowed)
        if not pool:
            return "a" * self.N

        cand_set = set(candidates)
        best_key = None
        best: List[str] = []

        for g in pool:
            # (worst bucket, 0 if g could still be the answer else 1)
            key = (worst_bucket(candidates, g), 0 if g in cand_set else 1)
            if best_key is None or key < best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        return best[self.rng.randrange(len(best))]
