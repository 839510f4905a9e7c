# manager.py
from __future__ import annotations

import logging
from typing import List, Optional
import pygame

from frostbloom import config
from frostbloom.render.canvas import CanvasRenderer
from frostbloom.rng import new_rng

from .base import Scene
from .frost_scene import FrostScene

_LOGGER = logging.getLogger(__name__)


class SceneManager:
    def __init__(self, cfg: config.FrostConfig, renderer: CanvasRenderer) -> None:
        self.cfg = cfg
        self.renderer = renderer
        self.scene_stack: List[Scene] = []
        self.set_scene(FrostScene())

    # ------------------------------------------------------------------ #
    # RNG factory used by scenes to spin up new RNGs.

    def rng_factory(self, seed=None):
        """new_rng() already handles seeding when seed is None."""
        return new_rng(seed)

    # ------------------------------------------------------------------ #
    # Stack operations

    def set_scene(self, scene: Optional[Scene]) -> None:
        if scene is None:
            self.scene_stack.clear()
        else:
            self.scene_stack = [scene]

    # ------------------------------------------------------------------ #

    def run(self) -> None:
        while self.scene_stack:
            self._run_live_scene(self.scene_stack[-1])

    def _run_live_scene(self, scene: Scene) -> None:
        renderer = self.renderer
        clock = pygame.time.Clock()

        # Drive events/update/render until the scene stack changes or the
        # app is quit.
        while self.scene_stack and self.scene_stack[-1] is scene:
            dt = clock.tick(self.cfg.fps)

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.set_scene(None)
                    return

                # Window resize is purely a view concern.
                if event.type == pygame.VIDEORESIZE:
                    renderer.handle_resize(event.w, event.h)
                    continue

                # Global fullscreen toggle
                if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    renderer.toggle_fullscreen()
                    continue

                scene.handle_event(event, self)
                if not (self.scene_stack and self.scene_stack[-1] is scene):
                    return

            # Update
            scene.update(dt, self)

            # Render
            scene.render(renderer, self)