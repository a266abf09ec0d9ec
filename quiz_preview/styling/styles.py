"""Centralized stylesheets for the preview window."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 8px 20px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QLineEdit, QListWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px;
            }}
            QCheckBox:checked, QRadioButton:checked {{
                color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_heading_style() -> str:
        return "font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_large_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 16pt; font-weight: bold; color: {ColorPalette.ACCENT_PRIMARY.get(theme)};"

    @staticmethod
    def get_accent_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ACCENT_PRIMARY.get(theme)}; font-weight: 600;"

    @staticmethod
    def get_countdown_style(warning: bool = False, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.WARNING if warning else ColorPalette.TEXT_SECONDARY
        return f"font-size: 14pt; padding: 2px 6px; color: {color.get(theme)};"
