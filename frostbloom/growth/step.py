from __future__ import annotations

"""
frostbloom/growth/step.py

Advance a single branch by one frame's worth of growth.

advance() never draws. It mutates the branch, then hands back the stroke that
should be drawn for this step (a Segment) and any child branches born at a
fork. The renderer consumes segments later in the frame.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from frostbloom.growth.branch import NO_FORK, Branch
from frostbloom.growth.params import GrowthParams, draw
from frostbloom.rng import RandomSource

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A straight stroke from (x0, y0) to (x1, y1)."""
    x0: float
    y0: float
    x1: float
    y1: float
    alpha: float
    width: float


@dataclass
class StepResult:
    segment: Optional[Segment] = None
    children: List[Branch] = field(default_factory=list)


def _spawn_children(parent: Branch, rng: RandomSource, params: GrowthParams) -> List[Branch]:
    # usually sprout on both sides
    if rng.random() > 1.0 - params.bilateral_chance:
        sides = [-1, 1]
    else:
        sides = [1 if rng.random() > 0.5 else -1]

    children: List[Branch] = []
    for side in sides:
        spread = params.fork_spread + (rng.random() - 0.5) * params.fork_spread_jitter
        length = parent.remaining * draw(rng, params.child_length)
        curl = (rng.random() - 0.5) * params.child_curl_span
        children.append(
            Branch(
                x=parent.x,
                y=parent.y,
                heading=parent.heading + side * spread,
                curl_rate=curl,
                remaining=length,
                next_fork_in=length * draw(rng, params.child_first_fork),
                alpha=parent.alpha * params.alpha_decay,
                width=parent.width * params.width_decay,
                depth=parent.depth - 1,
            )
        )
    return children


def advance(branch: Branch, step: float, rng: RandomSource, params: GrowthParams) -> StepResult:
    """Grow `branch` by up to `step` px along its curl.

    The stroke follows the midpoint heading of the step so strongly curled
    branches read as smooth arcs rather than kinked polylines.
    """
    s = min(step, branch.remaining)
    if s <= 0:
        return StepResult()

    new_heading = branch.heading + branch.curl_rate * s
    mid = (branch.heading + new_heading) / 2
    nx = branch.x + math.cos(mid) * s
    ny = branch.y + math.sin(mid) * s

    segment = Segment(branch.x, branch.y, nx, ny, branch.alpha, branch.width)

    prev_fork_in = branch.next_fork_in
    branch.remaining -= s
    branch.next_fork_in -= s
    branch.x = nx
    branch.y = ny
    branch.heading = new_heading

    children: List[Branch] = []
    if (
        branch.can_fork
        and prev_fork_in > 0
        and branch.next_fork_in <= 0
        and branch.remaining > params.min_fork_remaining
    ):
        children = _spawn_children(branch, rng, params)
        if branch.remaining > params.refork_min_remaining:
            branch.next_fork_in = branch.remaining * draw(rng, params.refork)
        else:
            branch.next_fork_in = NO_FORK
        _LOGGER.debug(
            "Fork at (%.1f, %.1f): %d child(ren), depth %d -> %d, %.1f px left",
            branch.x,
            branch.y,
            len(children),
            branch.depth,
            branch.depth - 1,
            branch.remaining,
        )

    return StepResult(segment=segment, children=children)
