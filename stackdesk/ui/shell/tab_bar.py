"""
Horizontal tab bar. Buttons mirror ``TabController`` state; Left/Right on a focused
button cycles through panels with wrap-around.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QToolButton, QWidget

from stackdesk.core.events import TabActivated

if TYPE_CHECKING:
    from stackdesk.application.container import Container

TAB_LABELS = {
    "settings": "Settings",
    "stacks": "Stacks",
    "create": "Create",
    "inspect": "Inspect",
    "system": "System",
}


class TabButton(QToolButton):
    def __init__(self, parent: QWidget | None, tab_id: str, label: str) -> None:
        super().__init__(parent)
        self._tab_id = tab_id
        self.setObjectName("tabButton")
        self.setText(label)
        self.setCheckable(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumHeight(34)
        self.setProperty("active", "false")

    @property
    def tab_id(self) -> str:
        return self._tab_id

    def set_active(self, active: bool) -> None:
        self.setChecked(active)
        self.setProperty("active", "true" if active else "false")
        self.style().unpolish(self)
        self.style().polish(self)


class TabBar(QFrame):
    def __init__(self, container: Container, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._tabs = container.tabs
        self._buttons: dict[str, TabButton] = {}
        self.setObjectName("tabBar")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 0)
        layout.setSpacing(4)
        for tab_id in self._tabs.tab_ids:
            btn = TabButton(self, tab_id, TAB_LABELS.get(tab_id, tab_id.title()))
            btn.clicked.connect(lambda checked=False, t=tab_id: self._tabs.activate(t))
            btn.installEventFilter(self)
            self._buttons[tab_id] = btn
            layout.addWidget(btn)
        layout.addStretch(1)

        self.sync()
        self._sub = container.event_bus.subscribe(TabActivated, self._on_tab_activated)

    def button(self, tab_id: str) -> TabButton:
        return self._buttons[tab_id]

    def sync(self) -> None:
        for tab_id, active in self._tabs.markers().items():
            self._buttons[tab_id].set_active(active)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if isinstance(watched, TabButton) and event.type() == QEvent.Type.KeyPress:
            key = event.key()
            step = 1 if key == Qt.Key.Key_Right else -1 if key == Qt.Key.Key_Left else 0
            if step:
                target = self._tabs.cycle(step, from_tab=watched.tab_id)
                self._buttons[target].setFocus(Qt.FocusReason.TabFocusReason)
                return True
        return super().eventFilter(watched, event)

    def _on_tab_activated(self, _event: TabActivated) -> None:
        self.sync()
