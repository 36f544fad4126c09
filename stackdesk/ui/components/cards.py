"""
Card container and the stack card built from a ``StackCard`` projection.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from stackdesk.application.stack_list import StackCard
from stackdesk.ui.components.buttons import ActionButton, bind_action_button
from stackdesk.ui.theme.tokens import Tokens

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class Card(QFrame):
    """Frame with surface background, border, radius. Styling from app stylesheet (#card)."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        t = Tokens
        self.setObjectName("card")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(t.card_padding, t.card_padding, t.card_padding, t.card_padding)
        self._layout.setSpacing(t.space_sm)

    def layout(self) -> QVBoxLayout:
        return self._layout


class StackCardWidget(Card):
    def __init__(self, card: StackCard, container: Container, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._card = card
        t = Tokens

        header = QHBoxLayout()
        title = QLabel(card.title)
        title.setStyleSheet("font-weight: 600;")
        title.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        status = QLabel(card.status)
        status.setStyleSheet(f"color: {t.status_color(card.status)}; font-weight: 600;")
        header.addWidget(title, 1)
        header.addWidget(status)
        self._layout.addLayout(header)

        grid = QGridLayout()
        grid.setHorizontalSpacing(t.space_md)
        for row, (label, value) in enumerate(card.fields):
            name = QLabel(label)
            name.setStyleSheet(f"color: {t.text_secondary};")
            grid.addWidget(name, row, 0)
            grid.addWidget(QLabel(value), row, 1)
        self._layout.addLayout(grid)

        self.delete_button = bind_action_button(
            container, ActionButton("Delete", card.delete_action, {"stack_id": card.stack_id})
        )
        self._layout.addWidget(self.delete_button)

    @property
    def stack_id(self) -> str:
        return self._card.stack_id
