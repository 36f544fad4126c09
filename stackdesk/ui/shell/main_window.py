"""
Main window: tab bar, lazily built panels and the response console under them.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QMainWindow, QSplitter, QStackedWidget, QStatusBar, QVBoxLayout, QWidget

from stackdesk.core.events import ActionFinished, TabActivated
from stackdesk.core.version import get_version_string
from stackdesk.ui.components.console_view import ResponseConsoleView
from stackdesk.ui.shell.stack_controller import StackController
from stackdesk.ui.shell.tab_bar import TabBar

if TYPE_CHECKING:
    from stackdesk.application.container import Container


class MainWindow(QMainWindow):
    def __init__(self, container: Container, factories: dict | None = None) -> None:
        super().__init__()
        self._container = container
        self.setWindowTitle(f"Stack Desk {get_version_string()}")
        self.setMinimumSize(820, 600)
        self.resize(1100, 780)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.tab_bar = TabBar(container, self)
        layout.addWidget(self.tab_bar)

        self._stack = QStackedWidget()
        self.stack_controller = StackController(
            self._stack,
            factories=factories if factories is not None else _default_factories(container),
            tab_ids=container.tabs.tab_ids,
        )
        self.console_view = ResponseConsoleView(container.event_bus)

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self._stack)
        splitter.addWidget(self.console_view)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        layout.addWidget(splitter, 1)

        status = QStatusBar(self)
        status.showMessage(f"{get_version_string()}  |  Ctrl+1…{len(container.tabs.tab_ids)} switch panels")
        self.setStatusBar(status)

        bus = container.event_bus
        self._subs = [
            bus.subscribe(TabActivated, self._on_tab_activated),
            bus.subscribe(ActionFinished, self._on_action_finished),
        ]
        self._setup_shortcuts()
        container.tabs.restore()

    def _setup_shortcuts(self) -> None:
        for i, tab_id in enumerate(self._container.tabs.tab_ids):
            action = QAction(self)
            action.setShortcut(QKeySequence(f"Ctrl+{i + 1}"))
            action.triggered.connect(lambda checked=False, t=tab_id: self._container.tabs.activate(t))
            self.addAction(action)

    def _on_tab_activated(self, event: TabActivated) -> None:
        self.stack_controller.switch_to(event.tab_id)

    def _on_action_finished(self, event: ActionFinished) -> None:
        if event.error_kind == "unexpected" and self._container.notifications is not None:
            self._container.notifications.error(f"{event.action_id} failed unexpectedly; see the log")

    def closeEvent(self, event: QCloseEvent) -> None:
        shutdown = getattr(self._container.dispatcher.executor, "shutdown", None)
        if callable(shutdown):
            shutdown()
        super().closeEvent(event)


def _default_factories(container: Container) -> dict:
    from stackdesk.ui.views import CreateView, InspectView, SettingsView, StacksView, SystemView

    return {
        "settings": lambda: SettingsView(container),
        "stacks": lambda: StacksView(container),
        "create": lambda: CreateView(container),
        "inspect": lambda: InspectView(container),
        "system": lambda: SystemView(container),
    }
