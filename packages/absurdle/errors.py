"""
Error kinds raised by the adversary.

Both are usage errors surfaced straight to the caller; nothing here is
retried or recovered internally. They subclass the matching built-ins so
code that already catches ValueError / RuntimeError keeps working.
"""


class AbsurdleError(Exception):
    """Base class for adversary errors."""


class InvalidArgumentError(AbsurdleError, ValueError):
    """Bad word length at construction, or a guess of the wrong length."""


class InvalidStateError(AbsurdleError, RuntimeError):
    """No candidate words left, so no legal clue can be given."""
