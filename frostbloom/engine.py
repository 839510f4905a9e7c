from __future__ import annotations

"""
Engine entry point: owns the high-level loop orchestration.

The SceneManager's live loop is the frame scheduler; the engine only makes
sure pygame is torn down exactly once, however the loop exits.
"""

import logging

import pygame

from frostbloom import config
from frostbloom.render.canvas import CanvasRenderer
from frostbloom.scenes import SceneManager

_LOGGER = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.FrostConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.renderer = CanvasRenderer(cfg)
        self.manager = SceneManager(cfg, self.renderer)

    def run(self) -> None:
        _LOGGER.info("Starting frame loop at %d fps", self.cfg.fps)
        try:
            self.manager.run()
        finally:
            self.renderer.teardown()
