from __future__ import annotations


class Scene:
    """
    Base for scenes driven by the SceneManager live loop.

    Each frame the manager feeds every pending pygame event to
    handle_event, then calls update once and render once.
    """

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Advance scene state by one frame."""
        return None

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Draw the scene."""
        return None
