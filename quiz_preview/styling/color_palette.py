"""Color palette for the quiz preview supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


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
    """Centralized color definitions for the preview window."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#4B5563", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F9FAFB", dark="#2D2D2D")

    # Purple accent for points, selected answers and the primary button
    ACCENT_PRIMARY = ThemeColors(light="#7C3AED", dark="#A78BFA")
    ACCENT_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")

    BORDER_PRIMARY = ThemeColors(light="#E5E7EB", dark="#555555")
    BUTTON_HOVER_BG = ThemeColors(light="#6D28D9", dark="#8B5CF6")

    # Countdown in its last seconds
    WARNING = ThemeColors(light="#DC2626", dark="#FF6B6B")
