"""
Entry point for the Qt-based stack control panel.

Run: python main.py
Environment: STACKDESK_API_BASE, STACKDESK_TARGET_PORT_ENCODING, STACKDESK_SETTINGS_PATH,
LOG_LEVEL, LOG_JSON, LOG_FILE.
"""
from __future__ import annotations

import logging
import sys

from stackdesk.application.container import Container
from stackdesk.application.executor import ThreadedExecutor
from stackdesk.core.errors import ValidationError
from stackdesk.core.observability.logging_config import setup_logging
from stackdesk.ui.infrastructure import (
    NotificationCenter,
    UiThreadBridge,
    create_application,
    create_settings_backend,
    install_error_boundary,
)
from stackdesk.ui.infrastructure.application import run_application
from stackdesk.ui.shell import MainWindow
from stackdesk.ui.theme import apply_theme


def main() -> None:
    setup_logging()
    app = create_application()
    apply_theme(app)

    # Created on the UI thread so queued emissions from the worker land back here.
    bridge = UiThreadBridge()
    try:
        container = Container(
            settings_backend=create_settings_backend(),
            executor=ThreadedExecutor(bridge.post),
        )
    except ValidationError as exc:
        logging.getLogger(__name__).critical("Invalid configuration: %s", exc.message)
        sys.exit(2)

    window = MainWindow(container)
    window.show()

    notifications = NotificationCenter(window)
    container.notifications = notifications
    install_error_boundary(notifications)
    if not container.preferences.available:
        notifications.warning("Preferences unavailable", "settings will not persist across restarts")

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
