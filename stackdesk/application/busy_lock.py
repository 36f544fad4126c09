"""Single shared gate for action-triggering controls."""

from __future__ import annotations

from typing import Protocol

from stackdesk.application.state import PanelState


class Control(Protocol):
    def setEnabled(self, enabled: bool) -> None: ...


class BusyLock:
    """Busy flag plus the controls it disables.

    Not reentrant and never queues: the dispatcher engages it once per action and
    releases it once. Disabling happens synchronously inside :meth:`engage`.
    """

    def __init__(self, state: PanelState) -> None:
        self._state = state
        self._controls: list[Control] = []

    @property
    def engaged(self) -> bool:
        return self._state.busy

    def register(self, control: Control) -> None:
        if control in self._controls:
            return
        self._controls.append(control)
        control.setEnabled(not self._state.busy)

    def unregister(self, control: Control) -> None:
        if control in self._controls:
            self._controls.remove(control)

    def engage(self) -> None:
        self._state.set_busy(True)
        self._set_controls_enabled(False)

    def release(self) -> None:
        self._state.set_busy(False)
        self._set_controls_enabled(True)

    def _set_controls_enabled(self, enabled: bool) -> None:
        for control in list(self._controls):
            control.setEnabled(enabled)
