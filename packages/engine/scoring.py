"""
Wordle-style clue for a single (secret, guess) pair.

Conventions (one glyph per position, each a single code point):
  - GREEN  '🟩' : correct letter in the correct position
  - YELLOW '🟨' : letter present in the secret, wrong position
  - GRAY   '⬜' : letter absent (or present fewer times than guessed)

Pattern order:
  Patterns are compared position by position using SYMBOL_RANK,
  GRAY < YELLOW < GREEN. `pattern_key` is the sort key; never compare the raw
  strings, their code-point order is incidental.

Algorithm (two-pass, duplicate-safe):
  1) Count the secret's letters. Mark every exact match green and consume
     one count of that letter.
  2) Left to right over the remaining positions, mark yellow only while the
     guessed letter still has remaining count; otherwise it stays gray.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Tuple

GREEN = "🟩"
YELLOW = "🟨"
GRAY = "⬜"

# Explicit total order over the alphabet; drives the partition tie-break.
SYMBOL_RANK = {GRAY: 0, YELLOW: 1, GREEN: 2}

# Plain-text rendering used by CSV output and dumb terminals.
_LETTERS = {GREEN: "G", YELLOW: "Y", GRAY: "-"}


def compute_clue(secret: str, guess: str) -> str:
    """
    Compute the clue `guess` earns when `secret` is the hidden word.

    Preconditions (caller's contract, not re-validated beyond length):
      - len(secret) == len(guess)
      - both are lowercase letters

    Returns:
      - string of length N composed only of GREEN, YELLOW, GRAY

    Examples:
      compute_clue("abb", "bba") -> "🟨🟩🟨"
      compute_clue("abd", "abc") -> "🟩🟩⬜"
    """
    assert len(secret) == len(guess), "Secret and guess must be the same length"

    remaining = Counter(secret)
    pattern: List[str] = [GRAY] * len(guess)

    # Pass 1: greens consume their letter first so yellows can't steal them.
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            pattern[i] = GREEN
            remaining[g] -= 1

    # Pass 2: yellows are capped by what the secret still has left.
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)


def pattern_key(pattern: str) -> Tuple[int, ...]:
    """Sort key placing patterns in canonical ascending order."""
    return tuple(SYMBOL_RANK[c] for c in pattern)


def all_green(n: int) -> str:
    return GREEN * n


def is_solved(pattern: str) -> bool:
    return bool(pattern) and all(c == GREEN for c in pattern)


def to_letters(pattern: str) -> str:
    """
    Render a pattern with ASCII letters, e.g. "🟩🟨⬜" -> "GY-".
    """
    return "".join(_LETTERS[c] for c in pattern)
