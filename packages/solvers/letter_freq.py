"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - Build a letter histogram over the surviving candidates. Score each word
    as the sum of its DISTINCT letters' frequencies and pick the max; break
    ties with the seeded RNG.

Against the adversary this is a cheap heuristic: covering common letters
tends to force a split, but it never looks at the split itself (see minimax
for that).
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "2.0.0"

    # Above this many survivors, probe words from the allowed list may cover
    # more letters than any survivor does.
    CAND_POOL_LIMIT = 200

    def _score_word(self, w: str, counts: Counter[str]) -> int:
        """Sum letter frequencies, each letter counted once per word."""
        return sum(counts[ch] for ch in set(w))

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if len(candidates) == 1:
            return candidates[0]

        pool: List[str] = candidates if len(candidates) <= self.CAND_POOL_LIMIT else allowed
        counts = Counter("".join(candidates))

        best_score = None
        best_words: List[str] = []

        for w in pool:
            s = self._score_word(w, counts)
            if best_score is None or s > best_score:
                best_score = s
                best_words = [w]
            elif s == best_score:
                best_words.append(w)

        if not best_words:
            best_words = candidates or allowed or ["a" * self.N]
        return best_words[self.rng.randrange(len(best_words))]
