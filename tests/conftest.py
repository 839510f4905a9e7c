from __future__ import annotations

import os

# Headless pygame for every test that touches a surface or the event queue.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from typing import Iterable

import pytest

from frostbloom.config import FrostConfig
from frostbloom.growth import GrowthParams
from frostbloom.rng import new_rng


class SequenceRandom:
    """RandomSource that replays a fixed list of draws, cycling at the end."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        val = self.values[self.calls % len(self.values)]
        self.calls += 1
        return val


class ExplodingRandom:
    """RandomSource that fails the test if anything draws from it."""

    def random(self) -> float:
        raise AssertionError("unexpected random draw")


@pytest.fixture()
def params() -> GrowthParams:
    return GrowthParams()


@pytest.fixture()
def rng():
    return new_rng(0)


@pytest.fixture()
def fixed_random():
    """Factory: fixed_random(0.5) or fixed_random([0.1, 0.9, ...])."""

    def make(values) -> SequenceRandom:
        if isinstance(values, (int, float)):
            values = [float(values)]
        return SequenceRandom(values)

    return make


@pytest.fixture()
def no_random() -> ExplodingRandom:
    return ExplodingRandom()


@pytest.fixture()
def small_cfg() -> FrostConfig:
    return FrostConfig(view_width=200, view_height=120, seed=7)


@pytest.fixture()
def renderer(small_cfg):
    import pygame

    from frostbloom.render.canvas import CanvasRenderer

    r = CanvasRenderer(small_cfg)
    yield r
    pygame.quit()
