"""
Action buttons. Each carries its action id (and optional parameters) as data, so a
click resolves through the dispatcher instead of a closure over shared state.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QPushButton, QWidget

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class ActionButton(QPushButton):
    """Button tagged as action-triggering; disabled by the busy lock while an action runs."""

    def __init__(
        self,
        text: str,
        action_id: str,
        params: Mapping[str, Any] | None = None,
        *,
        primary: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(text, parent)
        self._action_id = action_id
        self._params = dict(params or {})
        self.setObjectName("primaryButton" if primary else "secondaryButton")
        self.setProperty("action", action_id)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    @property
    def action_id(self) -> str:
        return self._action_id

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)


def bind_action_button(container: Container, button: ActionButton) -> ActionButton:
    """Route clicks to the dispatcher and put the button under the busy lock."""
    lock = container.busy_lock
    button.clicked.connect(
        lambda _checked=False: container.dispatcher.run_action(button.action_id, **button.params)
    )
    lock.register(button)
    button.destroyed.connect(lambda *_: lock.unregister(button))
    return button
