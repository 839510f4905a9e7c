# frostbloom/ui/widgets.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import pygame


@dataclass
class WidgetContext:
    """
    Lightweight context passed into widget methods.

    - surface:  the surface the widget lays out against and draws into
    - scene:    the owning Scene (or None if not relevant)
    - renderer: the active renderer (for fonts / palette)
    """
    surface: pygame.Surface
    scene: object | None
    renderer: object


class Widget:
    """
    Minimal base class for UI widgets.

    Keeps a rect for layout and hit-testing, optional children, and the
    layout / draw / handle_event hooks.
    """

    def __init__(self) -> None:
        self.rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.visible: bool = True
        self.enabled: bool = True
        self.children: List[Widget] = []

    def add_child(self, child: "Widget") -> None:
        self.children.append(child)

    def layout(self, ctx: WidgetContext) -> None:
        for child in self.children:
            child.layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.draw(ctx)

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        """Return True if the event was consumed. Topmost child goes first."""
        for child in reversed(self.children):
            if child.handle_event(event, ctx):
                return True
        return False


def _font(ctx: WidgetContext):
    return getattr(ctx.renderer, "font", None) or pygame.font.Font(None, 16)


class LabelWidget(Widget):
    """Faint, non-interactive text centred along the top edge."""

    def __init__(self, text: str, *, alpha: float = 0.2, margin_top: int = 20, tracked: bool = True) -> None:
        super().__init__()
        self.text = text
        self.alpha = alpha
        self.margin_top = margin_top
        self.tracked = tracked

    def _spaced(self) -> str:
        # wide letter spacing, done the cheap way
        return " ".join(self.text) if self.tracked else self.text

    def layout(self, ctx: WidgetContext) -> None:
        w, h = _font(ctx).size(self._spaced())
        sw = ctx.surface.get_width()
        self.rect = pygame.Rect((sw - w) // 2, self.margin_top, w, h)
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible or not self.text:
            return
        fg = getattr(ctx.renderer, "fg", (255, 255, 255))
        text_surf = _font(ctx).render(self._spaced(), True, fg)
        text_surf.set_alpha(max(0, min(255, int(self.alpha * 255))))
        ctx.surface.blit(text_surf, self.rect.topleft)
        super().draw(ctx)


class ButtonWidget(Widget):
    """Outlined text button anchored to the bottom-right corner."""

    def __init__(
        self,
        text: str,
        *,
        on_click: Optional[Callable[["ButtonWidget"], None]] = None,
        padding_x: int = 12,
        padding_y: int = 6,
        margin: int = 24,
    ) -> None:
        super().__init__()
        self.text = text
        self.on_click = on_click
        self.padding_x = padding_x
        self.padding_y = padding_y
        self.margin = margin
        self.hovered = False
        self.pressed = False

    def layout(self, ctx: WidgetContext) -> None:
        w, h = _font(ctx).size(self.text)
        self.rect.width = w + 2 * self.padding_x
        self.rect.height = h + 2 * self.padding_y
        sw, sh = ctx.surface.get_size()
        self.rect.right = sw - self.margin
        self.rect.bottom = sh - self.margin
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        fg = getattr(ctx.renderer, "fg", (255, 255, 255))
        sel = getattr(ctx.renderer, "sel", (255, 255, 0))
        dim = getattr(ctx.renderer, "dim", (150, 150, 150))

        lit = self.hovered or self.pressed
        pygame.draw.rect(ctx.surface, sel if lit else dim, self.rect, 1, border_radius=2)

        text_surf = _font(ctx).render(self.text, True, fg)
        text_surf.set_alpha(140 if lit else 80)
        tx = self.rect.x + (self.rect.width - text_surf.get_width()) // 2
        ty = self.rect.y + (self.rect.height - text_surf.get_height()) // 2
        ctx.surface.blit(text_surf, (tx, ty))

        super().draw(ctx)

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        if not (self.visible and self.enabled):
            return False

        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return True  # consume click-down

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_pressed = self.pressed
            self.pressed = False
            if was_pressed and self.rect.collidepoint(event.pos):
                if self.on_click:
                    self.on_click(self)
                return True  # consume click-up

        return super().handle_event(event, ctx)
