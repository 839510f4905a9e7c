"""Pygame canvas that frost strokes accumulate on."""
import logging
from typing import Iterable, Sequence, Tuple

import pygame

from frostbloom.config import FrostConfig
from frostbloom.growth.step import Segment

_LOGGER = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


def stroke_rgba(color: RGB, alpha: float) -> RGBA:
    """Colour with alpha quantized to two decimals, then to a byte."""
    a = max(0.0, min(1.0, round(alpha, 2)))
    return (color[0], color[1], color[2], int(round(a * 255)))


def line_width_px(width: float) -> int:
    return max(1, int(round(width)))


def coverage_alpha(alpha: float, width: float) -> float:
    """Sub-pixel strokes still land on a whole pixel; fade them by how much of
    it they would cover so thinner branches read as thinner."""
    return alpha * min(1.0, width)


def draw_round_line(surface: pygame.Surface, color, p1, p2, width: int) -> pygame.Rect:
    """pygame lines have butt ends; cap them with discs for the frost look.

    Returns the bounding rect of the touched pixels.
    """
    dirty = pygame.draw.line(surface, color, p1, p2, width)
    if width >= 3:
        r = width / 2
        dirty = dirty.union(pygame.draw.circle(surface, color, p1, r))
        dirty = dirty.union(pygame.draw.circle(surface, color, p2, r))
    return dirty


class CanvasRenderer:
    def __init__(self, cfg: FrostConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.width = cfg.view_width
        self.height = cfg.view_height
        self.surface_flags = pygame.RESIZABLE
        self.fullscreen = False
        self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
        pygame.display.set_caption(cfg.caption)
        self.font = pygame.font.SysFont("consolas", 13)
        self.bg: RGB = cfg.background
        self.fg: RGB = cfg.frost_color
        self.dim: RGB = (120, 130, 150)
        self.sel: RGB = (200, 215, 235)
        # strokes live here; the display is rebuilt from it every present()
        self.canvas = pygame.Surface((self.width, self.height))
        self.canvas.fill(self.bg)
        # alpha scratch; each stroke is drawn here, blitted, then wiped
        self.scratch = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

    # ------------------------------------------------------------------ #
    # Drawing

    def stroke_segments(self, segments: Sequence[Segment]) -> int:
        """Stroke one frame's worth of segments onto the canvas.

        Each segment is composited on its own, glow first, in list order:
        pygame.draw overwrites alpha pixels rather than blending them.
        """
        glow_extra = int(round(self.cfg.glow_blur))
        for seg in segments:
            p1 = (seg.x0, seg.y0)
            p2 = (seg.x1, seg.y1)
            w = line_width_px(seg.width)
            if glow_extra > 0:
                glow = stroke_rgba(self.cfg.glow_color, self.cfg.glow_alpha * seg.alpha)
                self._composite(glow, p1, p2, w + glow_extra)
            color = stroke_rgba(self.cfg.frost_color, coverage_alpha(seg.alpha, seg.width))
            self._composite(color, p1, p2, w)
        return len(segments)

    def _composite(self, color, p1, p2, width: int) -> None:
        dirty = draw_round_line(self.scratch, color, p1, p2, width).clip(self.scratch.get_rect())
        if dirty.width and dirty.height:
            self.canvas.blit(self.scratch, dirty.topleft, dirty)
            self.scratch.fill((0, 0, 0, 0), dirty)

    def clear(self) -> None:
        self.canvas.fill(self.bg)

    # ------------------------------------------------------------------ #
    # Window management

    def handle_resize(self, width: int, height: int) -> None:
        """Resize to (width, height) keeping whatever has been drawn so far."""
        width = max(1, int(width))
        height = max(1, int(height))
        if (width, height) == (self.width, self.height):
            return
        old = self.canvas
        if not self.fullscreen:
            self.display = pygame.display.set_mode((width, height), self.surface_flags)
        self.width, self.height = width, height
        self.canvas = pygame.Surface((width, height))
        self.canvas.fill(self.bg)
        self.canvas.blit(old, (0, 0))
        self.scratch = pygame.Surface((width, height), pygame.SRCALPHA)
        _LOGGER.info("Canvas resized to %dx%d", width, height)

    def toggle_fullscreen(self) -> None:
        if self.fullscreen:
            self.display = pygame.display.set_mode((self.cfg.view_width, self.cfg.view_height), self.surface_flags)
            self.fullscreen = False
        else:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True
        self.handle_resize(*self.display.get_size())

    def present(self, overlays: Iterable = ()) -> None:
        """Blit the canvas to the display, draw overlays on top, flip.

        Overlays are callables taking the display surface; they never touch
        the canvas, so UI chrome doesn't get baked into the frost.
        """
        self.display.blit(self.canvas, (0, 0))
        for draw in overlays:
            draw(self.display)
        pygame.display.flip()

    def teardown(self) -> None:
        _LOGGER.info("Shutting down renderer")
        pygame.quit()
