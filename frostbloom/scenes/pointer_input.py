from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import pygame


@dataclass
class PointerCommand:
    """Logical pointer command produced from raw mouse / touch input."""
    kind: str                                  # "start", "move" or "end"
    pos: Optional[Tuple[float, float]] = None  # canvas pixels; None for "end"


class PointerInput:
    """
    Scene-level mapper from pygame mouse, finger and window events to the
    three pointer commands the seed sampler understands.

    Touch is normalized to the same contract as the mouse: finger
    coordinates arrive in [0, 1] and are scaled by the canvas size. Only the
    first finger down is followed; others are ignored until it lifts.
    SDL also synthesizes mouse events from touches, which are dropped here
    so a touch never plants twice.
    """

    def __init__(self, canvas_size: Tuple[int, int] = (1, 1)) -> None:
        self.canvas_size = canvas_size
        self.finger_id: Optional[int] = None

    def set_canvas_size(self, width: int, height: int) -> None:
        self.canvas_size = (width, height)

    def _finger_pos(self, event) -> Tuple[float, float]:
        w, h = self.canvas_size
        return (float(event.x) * w, float(event.y) * h)

    def handle_event(self, event) -> List[PointerCommand]:
        etype = event.type

        if etype in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False):
                return []
            return self.handle_mouse(event)

        if etype in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            return self.handle_finger(event)

        if etype == pygame.WINDOWLEAVE:
            # leaving the window ends the stroke, like releasing the button
            return [PointerCommand("end")]

        return []

    def handle_mouse(self, event) -> List[PointerCommand]:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if getattr(event, "button", 1) != 1:
                return []
            x, y = event.pos
            return [PointerCommand("start", pos=(float(x), float(y)))]
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            return [PointerCommand("move", pos=(float(x), float(y)))]
        if event.type == pygame.MOUSEBUTTONUP:
            if getattr(event, "button", 1) != 1:
                return []
            return [PointerCommand("end")]
        return []

    def handle_finger(self, event) -> List[PointerCommand]:
        finger = getattr(event, "finger_id", 0)
        if event.type == pygame.FINGERDOWN:
            if self.finger_id is not None:
                return []
            self.finger_id = finger
            return [PointerCommand("start", pos=self._finger_pos(event))]
        if finger != self.finger_id:
            return []
        if event.type == pygame.FINGERMOTION:
            return [PointerCommand("move", pos=self._finger_pos(event))]
        if event.type == pygame.FINGERUP:
            self.finger_id = None
            return [PointerCommand("end")]
        return []
