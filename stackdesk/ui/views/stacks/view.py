"""Stacks panel: cards for the latest list fetch, rebuilt from scratch on every render."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from stackdesk.application.stack_list import StackListSnapshot
from stackdesk.core.events import StacksRendered
from stackdesk.ui.components.buttons import ActionButton, bind_action_button
from stackdesk.ui.components.cards import StackCardWidget

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class StacksView(QWidget):
    def __init__(self, container: Container) -> None:
        super().__init__()
        self._container = container
        root = QVBoxLayout(self)

        header = QHBoxLayout()
        header.addWidget(QLabel("Stacks"))
        header.addStretch(1)
        self.refresh_button = bind_action_button(container, ActionButton("Refresh", "refresh_list", primary=True))
        header.addWidget(self.refresh_button)
        root.addLayout(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        self._list_host = QWidget()
        self._list_layout = QVBoxLayout(self._list_host)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        scroll.setWidget(self._list_host)
        root.addWidget(scroll, 1)

        self._nodes: list[QWidget] = []
        if container.state.stack_list is not None:
            self.render(container.state.stack_list)
        else:
            self._show_hint("Press Refresh to load stacks.")

        self._sub = container.event_bus.subscribe(StacksRendered, self._on_rendered)

    @property
    def nodes(self) -> list[QWidget]:
        return list(self._nodes)

    def card_widgets(self) -> list[StackCardWidget]:
        return [n for n in self._nodes if isinstance(n, StackCardWidget)]

    def render(self, snapshot: StackListSnapshot) -> None:
        self._clear()
        if not snapshot.cards:
            self._show_hint(snapshot.placeholder or "")
            return
        for card in snapshot.cards:
            self._add_node(StackCardWidget(card, self._container))
        self._list_layout.addStretch(1)

    def _show_hint(self, text: str) -> None:
        label = QLabel(text)
        label.setObjectName("placeholder")
        self._add_node(label)

    def _add_node(self, widget: QWidget) -> None:
        self._nodes.append(widget)
        self._list_layout.addWidget(widget)

    def _clear(self) -> None:
        while self._list_layout.count():
            item = self._list_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._nodes.clear()

    def _on_rendered(self, event: StacksRendered) -> None:
        self.render(event.snapshot)
