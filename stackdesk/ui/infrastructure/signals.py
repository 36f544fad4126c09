"""
Thread-safe signal bridge: the action worker thread hands callables to the UI thread.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, Signal


class UiThreadBridge(QObject):
    """Create on the UI thread. ``post(fn)`` from any thread; ``fn`` runs on the UI thread."""

    invoke = Signal(object)  # Callable[[], None]

    def __init__(self) -> None:
        super().__init__()
        self.invoke.connect(self._run)

    def post(self, fn: Callable[[], None]) -> None:
        self.invoke.emit(fn)

    def _run(self, fn: Callable[[], None]) -> None:
        fn()
