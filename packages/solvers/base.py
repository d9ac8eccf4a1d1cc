from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A guesser playing against the adversary. Each turn it sees the surviving
    candidates (the adversary's current set) and proposes one word.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.allowed: List[str] = []
        self.rng = random.Random()

    def reset(self, *, allowed: List[str], N: int, seed: int | None = None) -> None:
        self.N = int(N)
        self.allowed = [w for w in allowed if len(w) == self.N]
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
