"""Styling module for the Quiz Time application."""

from .color_palette import ColorPalette, Theme, ThemeColors
from .styles import Styles

__all__ = ["ColorPalette", "Styles", "Theme", "ThemeColors"]
