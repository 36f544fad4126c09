"""
Stack controller: QStackedWidget + lazy panel loading. Creates a view only on first show.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable, Sequence

from PySide6.QtCore import QTimer, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from stackdesk.config import TAB_IDS
from stackdesk.core.paths import get_app_state_dir
from stackdesk.ui.theme.tokens import Tokens

log = logging.getLogger(__name__)


def _placeholder_widget(title: str, subtitle: str = "") -> QWidget:
    w = QLabel(f"{title}\n{subtitle}")
    w.setStyleSheet(f"font-size: 14px; color: {Tokens.text_secondary}; padding: 24px;")
    w.setWordWrap(True)
    return w


class ErrorWidget(QWidget):
    def __init__(self, tab_id: str, exc: BaseException, tb_text: str) -> None:
        super().__init__()
        self._traceback = tb_text
        root = QVBoxLayout(self)

        title = QLabel("Failed to load panel")
        title.setStyleSheet(f"font-size: 16px; font-weight: bold; color: {Tokens.error};")
        root.addWidget(title)

        summary = QLabel(f"{tab_id}: {type(exc).__name__}: {exc}")
        summary.setWordWrap(True)
        root.addWidget(summary)

        tb = QPlainTextEdit()
        tb.setReadOnly(True)
        tb.setPlainText(tb_text)
        tb.setMinimumHeight(180)
        root.addWidget(tb)

        copy_btn = QPushButton("Copy traceback")
        copy_btn.clicked.connect(self._copy_traceback)
        root.addWidget(copy_btn)

        logs_btn = QPushButton("Open logs folder")
        logs_btn.clicked.connect(self._open_logs_folder)
        root.addWidget(logs_btn)
        root.addStretch(1)

    def _copy_traceback(self) -> None:
        QApplication.clipboard().setText(self._traceback)

    def _open_logs_folder(self) -> None:
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(get_app_state_dir() / "logs")))


class StackController:
    """Manages the QStackedWidget and lazy-creates panel content on first switch."""

    def __init__(
        self,
        stack: QStackedWidget,
        factories: dict[str, Callable[[], QWidget]] | None = None,
        tab_ids: Sequence[str] = TAB_IDS,
    ) -> None:
        self._stack = stack
        self._tab_ids = tuple(tab_ids)
        self._factories = dict(factories) if factories else {}
        self._created: set[str] = set()
        self._pending_create: set[str] = set()

        for tab_id in self._tab_ids:
            placeholder = _placeholder_widget("Loading…", tab_id)
            placeholder.setObjectName(f"placeholder_{tab_id}")
            self._stack.addWidget(placeholder)

    @property
    def current(self) -> str | None:
        index = self._stack.currentIndex()
        return self._tab_ids[index] if 0 <= index < len(self._tab_ids) else None

    def is_created(self, tab_id: str) -> bool:
        return tab_id in self._created

    def switch_to(self, tab_id: str) -> None:
        if tab_id not in self._tab_ids:
            return
        if tab_id not in self._created:
            self._schedule_create(tab_id)
        self._stack.setCurrentIndex(self._tab_ids.index(tab_id))

    def _schedule_create(self, tab_id: str) -> None:
        if tab_id in self._created or tab_id in self._pending_create:
            return
        self._pending_create.add(tab_id)

        def _create() -> None:
            self._pending_create.discard(tab_id)
            if tab_id in self._created:
                return
            index = self._tab_ids.index(tab_id)
            factory = self._factories.get(tab_id) or (lambda: _placeholder_widget(tab_id))
            try:
                widget = factory()
            except Exception as exc:
                tb_text = traceback.format_exc()
                log.exception("Failed to create panel '%s'", tab_id)
                widget = ErrorWidget(tab_id=tab_id, exc=exc, tb_text=tb_text)
            current = self._stack.currentIndex()
            old_widget = self._stack.widget(index)
            self._stack.removeWidget(old_widget)
            old_widget.deleteLater()
            self._stack.insertWidget(index, widget)
            self._stack.setCurrentIndex(current)
            self._created.add(tab_id)

        # Next event-loop tick, so the placeholder paints before a heavy panel builds.
        QTimer.singleShot(0, _create)
