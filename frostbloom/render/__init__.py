from .canvas import CanvasRenderer

__all__ = ["CanvasRenderer"]
