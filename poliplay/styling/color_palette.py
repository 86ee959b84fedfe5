"""Color palette for the generator console, with light and dark variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """One named color in both themes."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the console."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F7FF")
    TEXT_MUTED = ThemeColors(light="#6B7280", dark="#94A3B8")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#0B1120")
    BACKGROUND_CARD = ThemeColors(light="#F3F4F6", dark="#111A30")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#334155")

    BUTTON_PRIMARY_BG = ThemeColors(light="#1F9AA5", dark="#1F9AA5")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")
    BUTTON_HOVER_BG = ThemeColors(light="#16808A", dark="#16808A")
    BUTTON_DANGER_BG = ThemeColors(light="#EF4444", dark="#DC2626")

    # Feedback
    SUCCESS = ThemeColors(light="#059669", dark="#34D399")
    ERROR = ThemeColors(light="#DC2626", dark="#F87171")
