"""Infrastructure: application bootstrap, signals bridge, settings, error boundary.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Headless CI may have PySide6 installed but miss runtime GUI libs (``libGL.so.1``),
so exports are resolved lazily.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "run_application",
    "create_settings_backend",
    "NotificationCenter",
    "install_error_boundary",
    "UiThreadBridge",
]


def __getattr__(name: str) -> Any:
    if name in ("create_application", "run_application"):
        return getattr(import_module("stackdesk.ui.infrastructure.application"), name)
    if name == "create_settings_backend":
        return import_module("stackdesk.ui.infrastructure.settings").create_settings_backend
    if name == "NotificationCenter":
        return import_module("stackdesk.ui.infrastructure.notifications").NotificationCenter
    if name == "install_error_boundary":
        return import_module("stackdesk.ui.infrastructure.error_boundary").install_error_boundary
    if name == "UiThreadBridge":
        return import_module("stackdesk.ui.infrastructure.signals").UiThreadBridge
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
