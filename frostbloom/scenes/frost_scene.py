from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from .base import Scene
from .pointer_input import PointerCommand, PointerInput
from frostbloom.growth import FrostSimulation, GrowthParams, Segment, SeedSampler
from frostbloom.ui.widgets import ButtonWidget, LabelWidget, Widget, WidgetContext

_LOGGER = logging.getLogger(__name__)

CLEAR_KEYS = (pygame.K_c, pygame.K_BACKSPACE, pygame.K_DELETE)


class FrostScene(Scene):
    """The drawing surface: drag to plant crystals, watch them grow."""

    def __init__(self, params: Optional[GrowthParams] = None) -> None:
        self.params = params
        self.simulation: FrostSimulation | None = None
        self.sampler: SeedSampler | None = None
        self.input = PointerInput()
        # strokes produced by update() and not yet drawn
        self.pending: List[Segment] = []

        self.hint = LabelWidget("")
        self.clear_button = ButtonWidget("clear", on_click=lambda _btn: self._request_clear())
        self.ui = Widget()
        self.ui.add_child(self.hint)
        self.ui.add_child(self.clear_button)
        self._clear_requested = False

    # ------------------------------------------------------------------ #
    # Live-loop hooks
    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        self._ensure_simulation(manager)
        renderer = manager.renderer

        if event.type == pygame.QUIT:
            manager.set_scene(None)
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                manager.set_scene(None)
            elif event.key in CLEAR_KEYS:
                self.clear(manager)
            return

        # UI first so clicks on the button never plant seeds.
        ctx = self._widget_context(renderer, renderer.display)
        self.ui.layout(ctx)
        if self.ui.handle_event(event, ctx):
            if self._clear_requested:
                self.clear(manager)
            return

        self.input.set_canvas_size(renderer.width, renderer.height)
        for cmd in self.input.handle_event(event):
            self._apply_pointer(cmd)

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        sim = self._ensure_simulation(manager)
        self.pending.extend(sim.tick())

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        if self.pending:
            renderer.stroke_segments(self.pending)
            self.pending = []
        renderer.present([self._draw_ui(renderer)])

    # ------------------------------------------------------------------ #
    # Actions
    def clear(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Drop every live branch and repaint the canvas. Safe to repeat."""
        self._clear_requested = False
        self.pending = []
        if self.simulation is not None:
            self.simulation.clear()
        manager.renderer.clear()

    def _request_clear(self) -> None:
        self._clear_requested = True

    def _apply_pointer(self, cmd: PointerCommand) -> None:
        sampler = self.sampler
        if sampler is None:
            return
        if cmd.kind == "start" and cmd.pos is not None:
            if self.clear_button.rect.collidepoint(int(cmd.pos[0]), int(cmd.pos[1])):
                return
            sampler.start(*cmd.pos)
        elif cmd.kind == "move" and cmd.pos is not None:
            sampler.move(*cmd.pos)
        elif cmd.kind == "end":
            sampler.end()

    # ------------------------------------------------------------------ #
    # Helpers
    def _ensure_simulation(self, manager: "SceneManager") -> FrostSimulation:  # type: ignore[name-defined]
        """Lazily build the simulation, sampler and hint text."""
        if self.simulation is None:
            cfg = manager.cfg
            params = self.params or GrowthParams.load()
            self.params = params
            rng = manager.rng_factory(cfg.seed)
            self.simulation = FrostSimulation(rng, params)
            self.sampler = SeedSampler(self.simulation.plant, params.spawn_distance)
            self.hint.text = cfg.hint_text
            _LOGGER.info(
                "Frost scene ready (seed=%s, grow_speed=%s, spawn_distance=%s)",
                cfg.seed,
                params.grow_speed,
                params.spawn_distance,
            )
        return self.simulation

    def _widget_context(self, renderer, surface) -> WidgetContext:
        return WidgetContext(surface=surface, scene=self, renderer=renderer)

    def _draw_ui(self, renderer):
        def draw(surface: pygame.Surface) -> None:
            ctx = self._widget_context(renderer, surface)
            self.ui.layout(ctx)
            self.ui.draw(ctx)
        return draw
