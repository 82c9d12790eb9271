"""Color palette for Quiz Time supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from quiz_app.core.feedback import FeedbackTier


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#666666",      # Dark Gray
        dark="#AAAAAA"        # Light Gray
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    BACKGROUND_CARD = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#2D2D2D"        # Slightly lighter dark
    )

    # Accent
    ACCENT_PRIMARY = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    # Button colors
    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#A0A0A0",      # Gray
        dark="#4A4A4A"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#505050"        # Medium Gray
    )

    # Results tiers
    TIER_HIGH = ThemeColors(
        light="#E6B800",      # Gold
        dark="#FFD43B"        # Bright Yellow
    )

    TIER_MID = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    TIER_LOW = ThemeColors(
        light="#808080",      # Gray
        dark="#9E9E9E"        # Light Gray
    )

    @classmethod
    def for_tier(cls, tier: FeedbackTier) -> ThemeColors:
        """Colour used for the icon and score of a results tier."""
        if tier is FeedbackTier.HIGH:
            return cls.TIER_HIGH
        if tier is FeedbackTier.MID:
            return cls.TIER_MID
        return cls.TIER_LOW
