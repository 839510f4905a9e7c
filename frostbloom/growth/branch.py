from __future__ import annotations

import math
from dataclasses import dataclass

# next_fork_in is parked here once a branch may no longer fork.
NO_FORK = math.inf


@dataclass(eq=False)
class Branch:
    """One growing arm of a crystal.

    The tip (x, y) is always the end of the last stroke drawn for this
    branch; heading accumulates curl and is never normalized.
    """
    x: float
    y: float
    heading: float
    curl_rate: float        # rad per px; sign picks the curl direction
    remaining: float        # px left to grow
    next_fork_in: float     # px until the next fork, or NO_FORK
    alpha: float
    width: float
    depth: int              # fork levels left, including this one

    def __post_init__(self) -> None:
        for name in ("x", "y", "heading", "curl_rate", "remaining", "alpha", "width"):
            val = getattr(self, name)
            if not math.isfinite(val):
                raise ValueError(f"Branch.{name} must be finite, got {val!r}")
        if math.isnan(self.next_fork_in) or self.next_fork_in == -math.inf:
            raise ValueError(f"Branch.next_fork_in must be finite or NO_FORK, got {self.next_fork_in!r}")
        if self.remaining <= 0:
            raise ValueError(f"Branch.remaining must be positive, got {self.remaining!r}")
        if self.width <= 0:
            raise ValueError(f"Branch.width must be positive, got {self.width!r}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Branch.alpha must lie in [0, 1], got {self.alpha!r}")
        if isinstance(self.depth, bool) or int(self.depth) != self.depth or self.depth < 1:
            raise ValueError(f"Branch.depth must be an integer >= 1, got {self.depth!r}")
        self.depth = int(self.depth)

    @property
    def tip(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def terminal(self) -> bool:
        return self.remaining <= 0

    @property
    def can_fork(self) -> bool:
        return self.depth > 1 and self.next_fork_in != NO_FORK
