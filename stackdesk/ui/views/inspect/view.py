"""Inspect panel: single-stack actions keyed by the stack id field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QFormLayout, QHBoxLayout, QLineEdit, QVBoxLayout, QWidget

from stackdesk.core.events import StackIdPropagated
from stackdesk.ui.components.buttons import ActionButton, bind_action_button
from stackdesk.ui.components.cards import Card

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class InspectView(QWidget):
    def __init__(self, container: Container) -> None:
        super().__init__()
        state = container.state
        root = QVBoxLayout(self)
        card = Card()
        form = QFormLayout()

        self.stack_id_edit = QLineEdit(state.form.stack_id)
        self.stack_id_edit.setPlaceholderText("stack_id")
        self.stack_id_edit.textChanged.connect(lambda text: state.update_form(stack_id=text))
        form.addRow("Stack id", self.stack_id_edit)

        self.last_stack_id_edit = QLineEdit(state.form.last_stack_id)
        self.last_stack_id_edit.setReadOnly(True)
        form.addRow("Last created", self.last_stack_id_edit)
        card.layout().addLayout(form)

        row = QHBoxLayout()
        for text, action_id in (
            ("Get stack", "get_stack"),
            ("Get status", "get_status"),
            ("Delete stack", "delete_stack"),
        ):
            row.addWidget(bind_action_button(container, ActionButton(text, action_id)))
        row.addStretch(1)
        card.layout().addLayout(row)
        root.addWidget(card)
        root.addStretch(1)

        self._sub = container.event_bus.subscribe(StackIdPropagated, self._on_stack_id)

    def _on_stack_id(self, event: StackIdPropagated) -> None:
        self.stack_id_edit.setText(event.stack_id)
        self.last_stack_id_edit.setText(event.stack_id)
