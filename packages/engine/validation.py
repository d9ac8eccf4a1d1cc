"""
Guess checking for interactive front-ends.

The core trusts its callers: `AbsurdleManager.record` only checks the
length. A command-line loop, on the other hand, wants to tell a player why a
typed guess is rejected and ask again. This module answers "what is wrong
with this guess?":
  - it must have exact length N
  - it must be alphabetic a–z only
  - it must be in `allowed`, when an allowed list is supplied
"""

from __future__ import annotations

from typing import Iterable, Optional


def guess_problem(word: str, N: int, allowed: Optional[Iterable[str]] = None) -> Optional[str]:
    """
    Return a short human-readable reason when `word` is not an acceptable
    guess, or None when it is.

    Args:
      word    : proposed guess, already stripped/lowercased by the caller
      N       : required word length
      allowed : optional collection of permitted words. Pass a set if you
                call this in a loop; anything else is copied into one.
    """
    if len(word) != N:
        return f"guess must have {N} letters (got {len(word)})"

    if not (word.isascii() and word.isalpha() and word.islower()):
        return "guess must use lowercase letters a-z only"

    if allowed is not None:
        allowed_set = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
        if word not in allowed_set:
            return f"'{word}' is not in the dictionary"

    return None
