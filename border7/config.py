"""Runtime session options collected from the command line."""

from __future__ import annotations

import random
from dataclasses import dataclass

__all__ = ["SessionConfig", "resolve_seed"]


def resolve_seed(seed: int | None) -> int:
    """Return ``seed`` or a fresh one drawn from the system source."""

    if seed is None:
        return random.SystemRandom().randrange(0, 2**63)
    return seed


@dataclass(slots=True)
class SessionConfig:
    """Options for a single interactive session."""

    seed: int | None = None
    reveal_dealer: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        self.seed = resolve_seed(self.seed)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
