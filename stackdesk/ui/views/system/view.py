"""System panel: liveness, statistics, raw list and console reset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from stackdesk.ui.components.buttons import ActionButton, bind_action_button
from stackdesk.ui.components.cards import Card

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class SystemView(QWidget):
    def __init__(self, container: Container) -> None:
        super().__init__()
        root = QVBoxLayout(self)
        card = Card()
        card.layout().addWidget(QLabel("Service"))
        row = QHBoxLayout()
        self.buttons = [
            bind_action_button(container, ActionButton("Health", "health", primary=True)),
            bind_action_button(container, ActionButton("Stats", "stats")),
            bind_action_button(container, ActionButton("List stacks", "list_stacks")),
            bind_action_button(container, ActionButton("Clear response", "clear_console")),
        ]
        for btn in self.buttons:
            row.addWidget(btn)
        row.addStretch(1)
        card.layout().addLayout(row)
        root.addWidget(card)
        root.addStretch(1)
