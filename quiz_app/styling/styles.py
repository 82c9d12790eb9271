"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QFrame#questionCard {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 12px;
            }}
        """

    @staticmethod
    def get_option_button_style(theme: Theme = Theme.LIGHT) -> str:
        accent = ColorPalette.ACCENT_PRIMARY.get(theme)
        return f"""
            QPushButton {{
                text-align: left;
                padding: 10px;
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
            }}
            QPushButton:checked {{
                border: 1px solid {accent};
                color: {accent};
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 10px;
                padding: 12px;
                font-weight: bold;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_title_label_style() -> str:
        return "font-size: 24pt; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
