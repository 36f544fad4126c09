"""Settings panel: API base override, API key and its toggle. Persisted on every edit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QCheckBox, QFormLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from stackdesk.ui.components.cards import Card
from stackdesk.ui.theme.tokens import Tokens

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class SettingsView(QWidget):
    def __init__(self, container: Container) -> None:
        super().__init__()
        conn = container.connection
        self._conn = conn
        root = QVBoxLayout(self)

        card = Card()
        form = QFormLayout()

        self.api_base_edit = QLineEdit(conn.api_base)
        self.api_base_edit.setPlaceholderText(container.pipeline.base_url())
        self.api_base_edit.editingFinished.connect(self._on_api_base_changed)
        form.addRow("API base URL", self.api_base_edit)

        self.api_key_enabled = QCheckBox("Send X-API-KEY header")
        self.api_key_enabled.setChecked(conn.api_key_enabled)
        self.api_key_enabled.toggled.connect(conn.set_api_key_enabled)
        form.addRow("", self.api_key_enabled)

        self.api_key_edit = QLineEdit(conn.api_key)
        self.api_key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_edit.setPlaceholderText("optional")
        self.api_key_edit.textChanged.connect(conn.set_api_key)
        form.addRow("API key", self.api_key_edit)

        card.layout().addLayout(form)
        if not container.preferences.available:
            note = QLabel("Preferences cannot be saved on this machine; values last for this session only.")
            note.setWordWrap(True)
            note.setStyleSheet(f"color: {Tokens.warning};")
            card.layout().addWidget(note)
        root.addWidget(card)
        root.addStretch(1)

    def _on_api_base_changed(self) -> None:
        self._conn.set_api_base(self.api_base_edit.text())
