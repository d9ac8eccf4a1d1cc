"""
Consistency filter over a game history.

Given:
  - a pool of words (e.g., the whole dictionary)
  - a history of (guess, pattern) pairs returned by the adversary
  - target word length N

Return:
  - words that would have produced exactly those patterns had they been the
    secret all along.

The adversary never commits to a secret, but its surviving set is always
exactly this filtered set, which makes the filter a handy cross-check.
"""

from typing import Iterable, List, Tuple
from .scoring import compute_clue

# History is a sequence of (guess, pattern) tuples produced by record().
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words of length N that reproduce every recorded pattern.

    Args:
      words   : iterable of candidate words
      history : iterable of (guess, pattern) seen so far
      N       : expected word length

    Returns:
      List[str] of consistent words, order preserved, duplicates dropped.
    """
    history = list(history)
    out: List[str] = []
    seen = set()

    for w in words:
        if len(w) != N or w in seen:
            continue
        seen.add(w)

        if all(compute_clue(w, g) == patt for g, patt in history):
            out.append(w)

    return out
