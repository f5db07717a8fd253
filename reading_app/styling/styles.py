"""Centralized styles and font definitions for the application."""

from reading_app.core.models import Difficulty, OptionStatus, TimerLevel

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLineEdit, QComboBox, QSpinBox, QTextBrowser, QListWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                margin-top: 8px;
                padding-top: 12px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)}; "
            f"color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)}; font-weight: bold; padding: 10px; }}"
            f"QPushButton:disabled {{ background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)}; "
            f"color: {ColorPalette.TEXT_SECONDARY.get(theme)}; }}"
        )

    @staticmethod
    def get_option_style(status: OptionStatus, selected: bool, theme: Theme = Theme.LIGHT) -> str:
        if status is OptionStatus.CORRECT:
            background, text = ColorPalette.OPTION_CORRECT_BG, ColorPalette.OPTION_CORRECT_TEXT
        elif status is OptionStatus.INCORRECT:
            background, text = ColorPalette.OPTION_INCORRECT_BG, ColorPalette.OPTION_INCORRECT_TEXT
        elif selected:
            background, text = ColorPalette.OPTION_SELECTED_BG, ColorPalette.OPTION_SELECTED_TEXT
        else:
            background, text = ColorPalette.BACKGROUND_PRIMARY, ColorPalette.TEXT_PRIMARY
        return (
            f"QRadioButton {{ background-color: {background.get(theme)}; color: {text.get(theme)}; "
            f"border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 6px; padding: 8px; }}"
        )

    @staticmethod
    def get_review_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        if is_correct:
            background, text = ColorPalette.OPTION_CORRECT_BG, ColorPalette.OPTION_CORRECT_TEXT
        else:
            background, text = ColorPalette.OPTION_INCORRECT_BG, ColorPalette.OPTION_INCORRECT_TEXT
        return (
            f"QFrame {{ background-color: {background.get(theme)}; color: {text.get(theme)}; "
            f"border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 6px; }}"
            "QLabel { border: none; }"
        )

    @staticmethod
    def get_timer_badge_style(level: TimerLevel, theme: Theme = Theme.LIGHT) -> str:
        colors = {
            TimerLevel.NORMAL: (ColorPalette.TIMER_NORMAL_BG, ColorPalette.TIMER_NORMAL_TEXT),
            TimerLevel.WARNING: (ColorPalette.TIMER_WARNING_BG, ColorPalette.TIMER_WARNING_TEXT),
            TimerLevel.CRITICAL: (ColorPalette.TIMER_CRITICAL_BG, ColorPalette.TIMER_CRITICAL_TEXT),
        }
        background, text = colors[level]
        return (
            f"QLabel {{ background-color: {background.get(theme)}; color: {text.get(theme)}; "
            f"border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 8px; "
            "padding: 6px 14px; font-family: monospace; font-size: 16pt; }}"
        )

    @staticmethod
    def get_difficulty_color(difficulty: Difficulty, theme: Theme = Theme.LIGHT) -> str:
        colors = {
            Difficulty.EASY: ColorPalette.DIFFICULTY_EASY,
            Difficulty.MEDIUM: ColorPalette.DIFFICULTY_MEDIUM,
            Difficulty.HARD: ColorPalette.DIFFICULTY_HARD,
        }
        return colors[difficulty].get(theme)

    @staticmethod
    def get_score_color(score: int, theme: Theme = Theme.LIGHT) -> str:
        if score >= 90:
            return ColorPalette.SCORE_EXCELLENT.get(theme)
        if score >= 75:
            return ColorPalette.SCORE_GOOD.get(theme)
        if score >= 60:
            return ColorPalette.SCORE_FAIR.get(theme)
        return ColorPalette.SCORE_LOW.get(theme)

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
