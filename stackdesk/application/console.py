"""Response console: the outcome of the most recent action as one timestamped record."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from stackdesk.application.state import PanelState
from stackdesk.config import CONSOLE_IDLE_TEXT
from stackdesk.core.errors import AppError
from stackdesk.domain.models import ResponsePayload

log = logging.getLogger(__name__)

STATE_IDLE = "idle"
STATE_OK = "ok"
STATE_ERROR = "error"


@dataclass(frozen=True, slots=True)
class ConsoleRecord:
    title: str
    body: str
    state: str = STATE_OK
    timestamp: str | None = None

    def render(self) -> str:
        if self.timestamp is None:
            return self.body
        return f"[{self.timestamp}] {self.title}\n\n{self.body}"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_body(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, ResponsePayload):
        payload = payload.to_dict()
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def error_body(exc: BaseException) -> dict[str, Any]:
    if isinstance(exc, AppError):
        return exc.to_dict()
    return {"kind": "unexpected", "error": f"{type(exc).__name__}: {exc}"}


class ResponseConsole:
    def __init__(self, state: PanelState, clock: Callable[[], str] = _utc_now) -> None:
        self._state = state
        self._clock = clock

    @property
    def last(self) -> ConsoleRecord | None:
        return self._state.console_record

    def post(self, title: str, payload: Any, state: str = STATE_OK) -> ConsoleRecord:
        record = ConsoleRecord(title=title, body=format_body(payload), state=state, timestamp=self._clock())
        self._state.set_console_record(record)
        return record

    def post_running(self, title: str) -> ConsoleRecord:
        return self.post(title, {"status": "running"}, STATE_IDLE)

    def post_error(self, title: str, exc: BaseException) -> ConsoleRecord:
        kind = exc.kind if isinstance(exc, AppError) else "unexpected"
        log.info("%s failed (%s): %s", title, kind, exc)
        return self.post(f"{title} (ERROR: {kind})", error_body(exc), STATE_ERROR)

    def clear(self) -> ConsoleRecord:
        record = ConsoleRecord(title="", body=CONSOLE_IDLE_TEXT, state=STATE_IDLE)
        self._state.set_console_record(record)
        return record
