"""Lightweight in-process event bus.

Application state publishes events; Qt widgets subscribe and repaint.
"""

from .event_bus import EventBus
from .events import (
    ActionFinished,
    BusyChanged,
    ConsoleUpdated,
    StackIdPropagated,
    StacksRendered,
    TabActivated,
)

__all__ = [
    "EventBus",
    "ActionFinished",
    "BusyChanged",
    "ConsoleUpdated",
    "StackIdPropagated",
    "StacksRendered",
    "TabActivated",
]
