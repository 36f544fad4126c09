from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stackdesk.application.console import ConsoleRecord
    from stackdesk.application.stack_list import StackListSnapshot


@dataclass(frozen=True, slots=True)
class BusyChanged:
    busy: bool


@dataclass(frozen=True, slots=True)
class ConsoleUpdated:
    record: ConsoleRecord


@dataclass(frozen=True, slots=True)
class StacksRendered:
    snapshot: StackListSnapshot


@dataclass(frozen=True, slots=True)
class TabActivated:
    tab_id: str


@dataclass(frozen=True, slots=True)
class StackIdPropagated:
    stack_id: str


@dataclass(frozen=True, slots=True)
class ActionFinished:
    action_id: str
    ok: bool
    error_kind: str | None = None
