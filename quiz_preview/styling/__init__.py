"""Styling module for the quiz preview."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
