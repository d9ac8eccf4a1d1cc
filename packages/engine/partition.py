"""
Partition a candidate set by clue and pick the bucket to keep.

For a fixed guess every candidate, taken as the hypothetical secret, yields
exactly one clue. Grouping by that clue splits the set into disjoint buckets
that together cover it. The adversary keeps the largest bucket; among buckets
of equal size, the one whose pattern comes first in canonical order
(see scoring.pattern_key) wins.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Set, Tuple

from .scoring import compute_clue, pattern_key

Buckets = Dict[str, FrozenSet[str]]


def partition(words: Iterable[str], guess: str) -> Buckets:
    """
    Group `words` by the clue `guess` would earn if each were the secret.

    Returns:
      dict pattern -> frozenset of words producing it (total and disjoint).
    """
    groups: Dict[str, Set[str]] = defaultdict(set)
    for w in words:
        groups[compute_clue(w, guess)].add(w)
    return {patt: frozenset(ws) for patt, ws in groups.items()}


def select_largest(buckets: Buckets) -> Tuple[str, FrozenSet[str]]:
    """
    Return (pattern, words) of the strictly largest bucket, scanning patterns
    in ascending canonical order so the earliest one wins a tie.

    Raises ValueError when there is no non-empty bucket to keep.
    """
    best_pattern = None
    best_size = 0
    for patt in sorted(buckets, key=pattern_key):
        size = len(buckets[patt])
        if size > best_size:
            best_pattern, best_size = patt, size

    if best_pattern is None:
        raise ValueError("cannot select from a partition with no words")
    return best_pattern, buckets[best_pattern]


def worst_bucket(words: Iterable[str], guess: str) -> int:
    """Size of the bucket the adversary would keep for `guess`."""
    counts: Dict[str, int] = defaultdict(int)
    for w in words:
        counts[compute_clue(w, guess)] += 1
    return max(counts.values()) if counts else 0
