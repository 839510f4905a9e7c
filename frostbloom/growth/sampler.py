from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

PlantFn = Callable[[float, float], object]


class SeedSampler:
    """
    Turns a continuous pointer drag into discrete seed plants.

    A seed lands on press, then again every time the pointer has travelled at
    least `spawn_distance` px since the last seed. Whatever distance overshoots
    the threshold is dropped, not carried into the next interval, so very fast
    drags plant a little sparser than a strict fixed-pitch sampler would.
    """

    def __init__(self, plant: PlantFn, spawn_distance: float) -> None:
        if spawn_distance <= 0:
            raise ValueError(f"spawn_distance must be positive, got {spawn_distance!r}")
        self.plant = plant
        self.spawn_distance = float(spawn_distance)
        self.drawing = False
        self.last_pos: Optional[Tuple[float, float]] = None
        self.accumulated = 0.0

    def start(self, x: float, y: float) -> None:
        self.drawing = True
        self.last_pos = (x, y)
        self.accumulated = 0.0
        self.plant(x, y)

    def move(self, x: float, y: float) -> bool:
        """Feed one pointer sample. Returns True if it planted a seed."""
        if not self.drawing or self.last_pos is None:
            return False
        lx, ly = self.last_pos
        self.accumulated += math.hypot(x - lx, y - ly)
        planted = False
        if self.accumulated >= self.spawn_distance:
            self.plant(x, y)
            self.accumulated = 0.0
            planted = True
        self.last_pos = (x, y)
        return planted

    def end(self) -> None:
        self.drawing = False
        self.last_pos = None
