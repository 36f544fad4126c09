"""
QSettings backend for the preference store.
"""
from __future__ import annotations

from PySide6.QtCore import QSettings

from stackdesk.config import SETTINGS_APPLICATION, SETTINGS_ORGANIZATION, SETTINGS_PATH


def create_settings_backend(path: str | None = None) -> QSettings:
    """INI file at ``path`` (or STACKDESK_SETTINGS_PATH), else the platform-specific location."""
    target = path if path is not None else SETTINGS_PATH
    if target:
        return QSettings(target, QSettings.Format.IniFormat)
    return QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
