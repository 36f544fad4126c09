"""Last-resort handler for exceptions nothing else caught.

Action failures never get here: the dispatcher turns them into console records.
What remains (a crashing slot, a stray thread) is logged with its traceback and
surfaced as one status-bar line.
"""

from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType

log = logging.getLogger(__name__)


class ErrorBoundary:
    def __init__(self, notifications) -> None:
        self._notifications = notifications
        self._previous_sys_hook = None
        self._previous_thread_hook = None
        self.handled = 0

    def handle(
        self,
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
        thread_name: str | None = None,
    ) -> None:
        self.handled += 1
        where = f" in thread {thread_name}" if thread_name else ""
        log.critical("Unhandled %s%s", exc_type.__name__, where, exc_info=(exc_type, exc, tb))
        if self._notifications is not None:
            self._notifications.error("Unexpected error", f"{exc_type.__name__}: {exc}. See the log file.")

    def install(self) -> ErrorBoundary:
        self._previous_sys_hook = sys.excepthook
        self._previous_thread_hook = threading.excepthook
        sys.excepthook = self._sys_hook
        threading.excepthook = self._thread_hook
        return self

    def uninstall(self) -> None:
        if self._previous_sys_hook is not None:
            sys.excepthook = self._previous_sys_hook
        if self._previous_thread_hook is not None:
            threading.excepthook = self._previous_thread_hook
        self._previous_sys_hook = self._previous_thread_hook = None

    def _sys_hook(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc, tb)
            return
        self.handle(exc_type, exc, tb)

    def _thread_hook(self, args: threading.ExceptHookArgs) -> None:
        if args.exc_value is None:
            return
        name = args.thread.name if args.thread is not None else None
        self.handle(args.exc_type, args.exc_value, args.exc_traceback, thread_name=name)


def install_error_boundary(notifications) -> ErrorBoundary:
    """Route uncaught exceptions (UI thread and background threads) to the log and the status bar."""
    return ErrorBoundary(notifications).install()
