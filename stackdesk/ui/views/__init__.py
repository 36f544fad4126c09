from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from stackdesk.ui.views.create.view import CreateView as CreateView
    from stackdesk.ui.views.inspect.view import InspectView as InspectView
    from stackdesk.ui.views.settings.view import SettingsView as SettingsView
    from stackdesk.ui.views.stacks.view import StacksView as StacksView
    from stackdesk.ui.views.system.view import SystemView as SystemView

__all__ = ["SettingsView", "StacksView", "CreateView", "InspectView", "SystemView"]

_MODULES = {
    "SettingsView": "settings",
    "StacksView": "stacks",
    "CreateView": "create",
    "InspectView": "inspect",
    "SystemView": "system",
}


def __getattr__(name: str):
    module = _MODULES.get(name)
    if module is None:
        raise AttributeError(name)
    from importlib import import_module

    return getattr(import_module(f"stackdesk.ui.views.{module}.view"), name)
