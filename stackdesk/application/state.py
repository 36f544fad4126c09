"""Explicit panel state.

Everything the widgets display lives here: busy flag, the last console record, the
active tab, the last rendered stack list and the form inputs. Components write
through the setters, which publish events; widgets only subscribe and repaint.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from stackdesk.config import DEFAULT_POD_SPEC, DEFAULT_TAB, DEFAULT_TARGET_PORT
from stackdesk.core.events import (
    BusyChanged,
    ConsoleUpdated,
    EventBus,
    StackIdPropagated,
    StacksRendered,
    TabActivated,
)

if TYPE_CHECKING:
    from stackdesk.application.console import ConsoleRecord
    from stackdesk.application.stack_list import StackListSnapshot


@dataclass(slots=True)
class FormFields:
    stack_id: str = ""
    last_stack_id: str = ""
    target_port: str = DEFAULT_TARGET_PORT
    pod_spec: str = DEFAULT_POD_SPEC


@dataclass(frozen=True, slots=True)
class ActionInputs:
    """Form values captured on the UI thread when an action starts."""

    stack_id: str = ""
    target_port: str = ""
    pod_spec: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)


class PanelState:
    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self.busy = False
        self.console_record: ConsoleRecord | None = None
        self.active_tab = DEFAULT_TAB
        self.stack_list: StackListSnapshot | None = None
        self.form = FormFields()

    @property
    def bus(self) -> EventBus:
        return self._bus

    def set_busy(self, busy: bool) -> None:
        if self.busy == busy:
            return
        self.busy = busy
        self._bus.publish(BusyChanged(busy))

    def set_console_record(self, record: ConsoleRecord) -> None:
        self.console_record = record
        self._bus.publish(ConsoleUpdated(record))

    def set_active_tab(self, tab_id: str) -> None:
        self.active_tab = tab_id
        self._bus.publish(TabActivated(tab_id))

    def set_stack_list(self, snapshot: StackListSnapshot) -> None:
        self.stack_list = snapshot
        self._bus.publish(StacksRendered(snapshot))

    def update_form(self, **changes: str) -> None:
        for name, value in changes.items():
            if not hasattr(self.form, name):
                raise AttributeError(f"unknown form field {name!r}")
            setattr(self.form, name, value)

    def propagate_stack_id(self, stack_id: str) -> None:
        """Copy a server-assigned id into the fields single-stack actions read."""
        if not stack_id:
            return
        self.form.stack_id = stack_id
        self.form.last_stack_id = stack_id
        self._bus.publish(StackIdPropagated(stack_id))

    def snapshot_inputs(self, params: Mapping[str, Any] | None = None) -> ActionInputs:
        return ActionInputs(
            stack_id=self.form.stack_id.strip(),
            target_port=self.form.target_port,
            pod_spec=self.form.pod_spec,
            params=MappingProxyType(dict(params or {})),
        )
