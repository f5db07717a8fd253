"""Styling module for ReadingQt."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
