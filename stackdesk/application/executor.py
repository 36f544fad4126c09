"""Where an action's network sequence runs.

:class:`InlineExecutor` runs it immediately (tests, headless use).
:class:`ThreadedExecutor` runs it on one background thread and hands the outcome
back through ``deliver``, which the Qt shell wires to a queued signal so that
``on_done`` always runs on the UI thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any, Protocol

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Outcome:
    result: Any = None
    error: BaseException | None = None


Work = Callable[[], Any]
DoneFn = Callable[[Outcome], None]


def run_captured(work: Work) -> Outcome:
    try:
        return Outcome(result=work())
    except BaseException as exc:  # noqa: BLE001
        return Outcome(error=exc)


def outcome_of(future: Future[Outcome]) -> Outcome:
    """Outcome of a finished future, including cancellation."""
    if future.cancelled():
        return Outcome(error=CancelledError())
    exc = future.exception()
    if exc is not None:
        return Outcome(error=exc)
    return future.result()


class ActionExecutor(Protocol):
    def submit(self, work: Work, on_done: DoneFn) -> None: ...


class InlineExecutor:
    def submit(self, work: Work, on_done: DoneFn) -> None:
        on_done(run_captured(work))


class ThreadedExecutor:
    """One worker thread: actions never overlap, even if the busy lock were bypassed."""

    def __init__(self, deliver: Callable[[Callable[[], None]], None]) -> None:
        self._deliver = deliver
        self._pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="action")

    def submit(self, work: Work, on_done: DoneFn) -> None:
        future = self._pool.submit(run_captured, work)
        future.add_done_callback(partial(self._on_future_done, on_done))

    def _on_future_done(self, on_done: DoneFn, future: Future[Outcome]) -> None:
        self._deliver(partial(on_done, outcome_of(future)))

    def shutdown(self) -> None:
        log.debug("Shutting down action executor")
        self._pool.shutdown(wait=False, cancel_futures=True)
