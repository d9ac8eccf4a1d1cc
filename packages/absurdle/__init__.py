from .errors import AbsurdleError, InvalidArgumentError, InvalidStateError
from .manager import AbsurdleManager

__all__ = ["AbsurdleManager", "AbsurdleError", "InvalidArgumentError", "InvalidStateError"]
