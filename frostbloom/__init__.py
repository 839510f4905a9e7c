"""Frostbloom: draw on the window and frost crystals grow from the stroke."""

__version__ = "0.1.0"
