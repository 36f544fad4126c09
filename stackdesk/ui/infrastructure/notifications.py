from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


class NotificationCenter:
    """Short messages in the main window status bar.

    Action outcomes belong to the response console; this is for everything else
    (persistence degraded, unexpected errors).
    """

    def __init__(self, window, *, timeout_ms: int = 4500) -> None:
        self._window = window
        self._timeout_ms = timeout_ms
        self.last: Notification | None = None

    def _status(self, level: str, text: str) -> None:
        self.last = Notification(level=level, message=text)
        sb = getattr(self._window, "statusBar", None)
        if callable(sb):
            sb = sb()
        if sb is None or not hasattr(sb, "showMessage"):
            log.debug("No status bar for notification: %s", text)
            return
        sb.showMessage(text, self._timeout_ms)

    @staticmethod
    def _join_message(title_or_message: str, message: str | None = None) -> str:
        if message is None:
            return title_or_message
        return f"{title_or_message}: {message}" if title_or_message else message

    def info(self, title_or_message: str, message: str | None = None) -> None:
        self._status("info", self._join_message(title_or_message, message))

    def warning(self, title_or_message: str, message: str | None = None) -> None:
        self._status("warning", self._join_message(title_or_message, message))

    def error(self, title_or_message: str, message: str | None = None) -> None:
        text = self._join_message(title_or_message, message)
        log.error(text)
        self._status("error", text)
