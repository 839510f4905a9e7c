import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that hands out floats in [0, 1)."""

    def random(self) -> float: ...


class RNG(random.Random):
    """Seeded RNG to keep deterministic behavior."""


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
