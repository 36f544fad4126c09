"""Create panel: target port and pod spec, then POST /stacks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QFormLayout, QLabel, QLineEdit, QPlainTextEdit, QVBoxLayout, QWidget

from stackdesk.core.events import StackIdPropagated
from stackdesk.ui.components.buttons import ActionButton, bind_action_button
from stackdesk.ui.components.cards import Card

if TYPE_CHECKING:
    from stackdesk.application.container import Container

PORT_HINT = 'e.g. 80, 80/udp, 80, 443 or [{"container_port": 80, "protocol": "TCP"}]'


class CreateView(QWidget):
    def __init__(self, container: Container) -> None:
        super().__init__()
        state = container.state
        self._state = state
        root = QVBoxLayout(self)
        card = Card()
        form = QFormLayout()

        self.port_edit = QLineEdit(state.form.target_port)
        self.port_edit.setPlaceholderText(PORT_HINT)
        self.port_edit.setToolTip(PORT_HINT)
        self.port_edit.textChanged.connect(lambda text: state.update_form(target_port=text))
        form.addRow("Target port", self.port_edit)

        self.pod_spec_edit = QPlainTextEdit(state.form.pod_spec)
        self.pod_spec_edit.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.pod_spec_edit.setMinimumHeight(240)
        self.pod_spec_edit.textChanged.connect(
            lambda: state.update_form(pod_spec=self.pod_spec_edit.toPlainText())
        )
        form.addRow("Pod spec (YAML)", self.pod_spec_edit)
        card.layout().addLayout(form)

        self.create_button = bind_action_button(container, ActionButton("Create stack", "create", primary=True))
        card.layout().addWidget(self.create_button)
        self.created_label = QLabel("")
        card.layout().addWidget(self.created_label)
        root.addWidget(card)
        root.addStretch(1)

        self._sub = container.event_bus.subscribe(StackIdPropagated, self._on_stack_id)

    def _on_stack_id(self, event: StackIdPropagated) -> None:
        self.created_label.setText(f"Created {event.stack_id}")
