from __future__ import annotations

import logging
import math
from typing import List

from frostbloom.growth.branch import Branch
from frostbloom.growth.params import GrowthParams, draw
from frostbloom.rng import RandomSource

_LOGGER = logging.getLogger(__name__)


def seed_crystal(x: float, y: float, rng: RandomSource, params: GrowthParams) -> List[Branch]:
    """Root arms for a new crystal centred on (x, y).

    Arms are spaced evenly around the circle, each nudged by a little jitter
    so no two crystals come out perfectly symmetric.
    """
    lo, hi = params.arm_count
    num_arms = lo + math.floor(rng.random() * (hi - lo))
    branches: List[Branch] = []

    for i in range(num_arms):
        heading = (i / num_arms) * math.pi * 2 + (rng.random() - 0.5) * params.arm_jitter
        curl_sign = 1 if rng.random() > 0.5 else -1
        length = draw(rng, params.arm_length)
        curl = curl_sign * draw(rng, params.arm_curl)
        branches.append(
            Branch(
                x=x,
                y=y,
                heading=heading,
                curl_rate=curl,
                remaining=length,
                next_fork_in=length * draw(rng, params.arm_first_fork),
                alpha=params.arm_alpha,
                width=params.arm_width,
                depth=params.max_depth,
            )
        )

    _LOGGER.debug("Seeded crystal at (%.1f, %.1f) with %d arms", x, y, num_arms)
    return branches
