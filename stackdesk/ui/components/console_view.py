"""
Response console view: read-only text showing the latest ConsoleRecord.
"""
from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from stackdesk.application.console import ConsoleRecord
from stackdesk.config import CONSOLE_IDLE_TEXT
from stackdesk.core.events import ConsoleUpdated, EventBus
from stackdesk.ui.theme.tokens import Tokens


class ResponseConsoleView(QWidget):
    """Repaints on ConsoleUpdated; the ``state`` property drives the border colour."""

    def __init__(self, bus: EventBus, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._bus = bus
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        header.addWidget(QLabel("Response"))
        self._state_label = QLabel("idle")
        header.addStretch()
        header.addWidget(self._state_label)
        layout.addLayout(header)

        self._text = QPlainTextEdit()
        self._text.setObjectName("responseConsole")
        self._text.setReadOnly(True)
        self._text.setPlainText(CONSOLE_IDLE_TEXT)
        self._text.setProperty("state", "idle")
        layout.addWidget(self._text)

        self._sub = bus.subscribe(ConsoleUpdated, self._on_console_updated)

    def text(self) -> str:
        return self._text.toPlainText()

    def state(self) -> str:
        return str(self._text.property("state"))

    def show_record(self, record: ConsoleRecord) -> None:
        self._text.setPlainText(record.render())
        self._text.setProperty("state", record.state)
        self._state_label.setText(record.state)
        self._state_label.setStyleSheet(f"color: {Tokens.state_color(record.state)};")
        # Re-polish so the [state=...] selector is applied.
        self._text.style().unpolish(self._text)
        self._text.style().polish(self._text)

    def _on_console_updated(self, event: ConsoleUpdated) -> None:
        self.show_record(event.record)
