"""Styling module for the PoliPlay generator console."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
