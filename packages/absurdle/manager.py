"""
The adversary: a Wordle host that never picks a secret.

AbsurdleManager keeps every dictionary word of the target length that is
still consistent with the clues handed out so far. Each guess splits that set
by clue; the manager keeps the biggest piece and reports its clue, dragging
the game out as long as the dictionary allows.

One manager per game. Calls on a single instance must be serialized by the
caller; there is no locking.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable

from packages.engine.partition import partition, select_largest
from .errors import InvalidArgumentError, InvalidStateError

LOG = logging.getLogger(__name__)


class AbsurdleManager:
    def __init__(self, dictionary: Iterable[str], length: int):
        """
        Args:
          dictionary : words of any length; assumed lowercase and non-empty
          length     : target word length L (>= 1)

        Raises:
          InvalidArgumentError if length < 1.

        An empty starting set is allowed; it only becomes an error at record().
        """
        if length < 1:
            raise InvalidArgumentError(f"length must be >= 1; got {length}")

        self._length = length
        self._words: FrozenSet[str] = frozenset(w for w in dictionary if len(w) == length)
        LOG.debug("new game: L=%d, %d candidate(s)", length, len(self._words))

    @property
    def length(self) -> int:
        return self._length

    def words(self) -> FrozenSet[str]:
        """
        The current candidate set. Immutable; a set returned before a later
        record() call keeps its contents.
        """
        return self._words

    def record(self, guess: str) -> str:
        """
        Answer `guess` with the clue that keeps the most candidates alive.

        Raises:
          InvalidStateError    if there are no candidates left.
          InvalidArgumentError if len(guess) != L.

        Returns:
          the chosen pattern; the candidate set is replaced by its bucket.
        """
        if not self._words:
            raise InvalidStateError("no candidate words remain")
        if len(guess) != self._length:
            raise InvalidArgumentError(
                f"guess must have length {self._length}; got {len(guess)}")

        buckets = partition(self._words, guess)
        pattern, kept = select_largest(buckets)

        LOG.debug("guess %r: %d bucket(s), kept %d of %d under %s",
                  guess, len(buckets), len(kept), len(self._words), pattern)
        self._words = kept
        return pattern

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"AbsurdleManager(length={self._length}, candidates={len(self._words)})"
