"""Fractal colour palettes, XPM image reading, X11 colour names and text, number and line-reading helpers."""

__version__ = "0.1.0"