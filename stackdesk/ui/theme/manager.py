"""
Application stylesheet built from design tokens.
"""

from __future__ import annotations

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from stackdesk.ui.theme.tokens import Tokens, TokenSet


def apply_theme(app: QApplication, t: TokenSet = Tokens) -> None:
    pal = QPalette()
    pal.setColor(QPalette.ColorRole.Window, QColor(t.background_main))
    pal.setColor(QPalette.ColorRole.Base, QColor(t.surface))
    pal.setColor(QPalette.ColorRole.Button, QColor(t.surface_hover))
    pal.setColor(QPalette.ColorRole.WindowText, QColor(t.text_primary))
    pal.setColor(QPalette.ColorRole.ButtonText, QColor(t.text_primary))
    pal.setColor(QPalette.ColorRole.Text, QColor(t.text_primary))
    pal.setColor(QPalette.ColorRole.Highlight, QColor(t.primary))
    pal.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    pal.setColor(QPalette.ColorRole.PlaceholderText, QColor(t.text_secondary))
    app.setPalette(pal)
    app.setStyleSheet(build_application_stylesheet(t))


def build_application_stylesheet(t: TokenSet) -> str:
    return f"""
        QWidget, QMainWindow {{
            background-color: {t.background_main};
            color: {t.text_primary};
        }}
        QLineEdit, QPlainTextEdit {{
            background-color: {t.surface};
            color: {t.text_primary};
            border: 1px solid {t.border};
            border-radius: {t.radius_sm}px;
            padding: 4px 6px;
        }}
        QPushButton {{
            background-color: {t.surface_hover};
            color: {t.text_primary};
            border: {t.border_width}px solid {t.border};
            border-radius: {t.radius_md}px;
            padding: {t.space_sm}px {t.space_lg}px;
            min-height: 30px;
        }}
        QPushButton:hover {{
            background-color: {t.border};
        }}
        QPushButton:disabled {{
            color: {t.text_secondary};
        }}
        #primaryButton {{
            background-color: {t.primary};
            color: white;
            border: none;
            font-weight: 600;
        }}
        #primaryButton:hover {{
            background-color: {t.primary_hover};
        }}
        #primaryButton:disabled {{
            background-color: {t.surface_hover};
            color: {t.text_secondary};
        }}
        #tabButton {{
            border-radius: {t.radius_sm}px;
            padding: {t.space_xs}px {t.space_md}px;
        }}
        #tabButton[active="true"] {{
            background-color: {t.primary};
            color: white;
        }}
        #responseConsole {{
            font-family: Consolas, monospace;
            font-size: 12px;
            background: {t.surface_hover};
        }}
        #responseConsole[state="ok"] {{
            border: 1px solid {t.success};
        }}
        #responseConsole[state="error"] {{
            border: 1px solid {t.error};
        }}
        #card {{
            background-color: {t.surface};
            border: {t.border_width}px solid {t.border};
            border-radius: {t.radius_lg}px;
        }}
        #placeholder {{
            color: {t.text_secondary};
            padding: {t.space_lg}px;
        }}
    """
