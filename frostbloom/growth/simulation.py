from __future__ import annotations

"""
frostbloom/growth/simulation.py

Per-frame growth over the whole set of live branches.

step_frame() is the drain-and-rebuild pass: it takes the current list, grows
every branch once, and returns the list for the next frame (survivors first,
then newborns) along with the strokes to draw. FrostSimulation owns that list
between frames and is what scenes talk to.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from frostbloom.growth.branch import Branch
from frostbloom.growth.params import GrowthParams
from frostbloom.growth.seed import seed_crystal
from frostbloom.growth.step import Segment, advance
from frostbloom.rng import RandomSource

_LOGGER = logging.getLogger(__name__)


@dataclass
class FrameResult:
    branches: List[Branch] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    spawned: List[Branch] = field(default_factory=list)


def step_frame(
    branches: Iterable[Branch],
    step: float,
    rng: RandomSource,
    params: GrowthParams,
) -> FrameResult:
    keep: List[Branch] = []
    spawned: List[Branch] = []
    segments: List[Segment] = []

    for b in branches:
        result = advance(b, step, rng, params)
        if result.segment is not None:
            segments.append(result.segment)
        spawned.extend(result.children)
        if b.remaining > 0:
            keep.append(b)

    return FrameResult(branches=keep + spawned, segments=segments, spawned=spawned)


class FrostSimulation:
    """Owns the live branch list and advances it once per tick."""

    def __init__(
        self,
        rng: RandomSource,
        params: Optional[GrowthParams] = None,
        step: Optional[float] = None,
    ) -> None:
        self.rng = rng
        self.params = params or GrowthParams()
        self.step = self.params.grow_speed if step is None else float(step)
        self.branches: List[Branch] = []
        # running totals, mostly for logging
        self.frames = 0
        self.segments_emitted = 0
        self.branches_created = 0

    def __len__(self) -> int:
        return len(self.branches)

    @property
    def idle(self) -> bool:
        return not self.branches

    def plant(self, x: float, y: float) -> List[Branch]:
        arms = seed_crystal(x, y, self.rng, self.params)
        self.branches.extend(arms)
        self.branches_created += len(arms)
        return arms

    def tick(self) -> List[Segment]:
        """Grow every live branch once. Returns the strokes for this frame."""
        if not self.branches:
            return []
        result = step_frame(self.branches, self.step, self.rng, self.params)
        self.branches = result.branches
        self.frames += 1
        self.segments_emitted += len(result.segments)
        self.branches_created += len(result.spawned)
        if not self.branches:
            _LOGGER.debug(
                "All crystals finished after %d frames (%d segments, %d branches)",
                self.frames,
                self.segments_emitted,
                self.branches_created,
            )
        return result.segments

    def clear(self) -> None:
        if self.branches:
            _LOGGER.info("Clearing %d live branches", len(self.branches))
        self.branches = []
