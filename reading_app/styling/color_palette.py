"""Color palette for ReadingQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    """Application theme options."""
    LIGHT = "Light"
    DARK = "Dark"


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

    TEXT_PRIMARY = ThemeColors(light="#0F172A", dark="#F1F5F9")
    TEXT_SECONDARY = ThemeColors(light="#64748B", dark="#94A3B8")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F8FAFC", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#CBD5E1", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#4F46E5", dark="#818CF8")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F1F5F9", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E2E8F0", dark="#505050")
    BUTTON_DISABLED_BG = ThemeColors(light="#CBD5E1", dark="#2A2A2A")

    # Option feedback (emerald / rose / indigo)
    OPTION_CORRECT_BG = ThemeColors(light="#ECFDF5", dark="#064E3B")
    OPTION_CORRECT_TEXT = ThemeColors(light="#065F46", dark="#A7F3D0")
    OPTION_INCORRECT_BG = ThemeColors(light="#FFF1F2", dark="#4C0519")
    OPTION_INCORRECT_TEXT = ThemeColors(light="#9F1239", dark="#FECDD3")
    OPTION_SELECTED_BG = ThemeColors(light="#EEF2FF", dark="#312E81")
    OPTION_SELECTED_TEXT = ThemeColors(light="#3730A3", dark="#C7D2FE")

    # Timer badge (slate / amber / rose)
    TIMER_NORMAL_BG = ThemeColors(light="#F8FAFC", dark="#334155")
    TIMER_NORMAL_TEXT = ThemeColors(light="#1E293B", dark="#F1F5F9")
    TIMER_WARNING_BG = ThemeColors(light="#FFFBEB", dark="#78350F")
    TIMER_WARNING_TEXT = ThemeColors(light="#92400E", dark="#FDE68A")
    TIMER_CRITICAL_BG = ThemeColors(light="#FFF1F2", dark="#881337")
    TIMER_CRITICAL_TEXT = ThemeColors(light="#9F1239", dark="#FECDD3")

    # Difficulty chips
    DIFFICULTY_EASY = ThemeColors(light="#047857", dark="#6EE7B7")
    DIFFICULTY_MEDIUM = ThemeColors(light="#B45309", dark="#FCD34D")
    DIFFICULTY_HARD = ThemeColors(light="#BE123C", dark="#FDA4AF")

    # Score colors (>=90 / >=75 / >=60 / below)
    SCORE_EXCELLENT = ThemeColors(light="#059669", dark="#34D399")
    SCORE_GOOD = ThemeColors(light="#D97706", dark="#FBBF24")
    SCORE_FAIR = ThemeColors(light="#EA580C", dark="#FB923C")
    SCORE_LOW = ThemeColors(light="#E11D48", dark="#FB7185")
