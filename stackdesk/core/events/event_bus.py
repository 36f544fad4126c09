from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock
from types import MethodType
from typing import Any, TypeVar
from weakref import WeakMethod

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent")
Handler = Callable[[Any], None]


@dataclass(frozen=True, slots=True, eq=False)
class Subscription:
    """Handle returned by :meth:`EventBus.subscribe`.

    Bound methods are referenced weakly so a subscribed widget can be garbage
    collected; ``resolve`` then returns None and the bus drops the entry.
    """

    event_type: type
    resolve: Callable[[], Handler | None]


class EventBus:
    """Synchronous, in-process event bus.

    Handlers run in the publisher's thread. Panel state is only published from the
    UI thread, so widgets may touch Qt objects directly in their handlers.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: defaultdict[type, list[Subscription]] = defaultdict(list)

    def subscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> Subscription:
        if isinstance(handler, MethodType):
            sub = Subscription(event_type, WeakMethod(handler))
        else:
            sub = Subscription(event_type, lambda: handler)
        with self._lock:
            self._subs[event_type].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            subs = self._subs.get(subscription.event_type)
            if subs and subscription in subs:
                subs.remove(subscription)

    def subscriber_count(self, event_type: type) -> int:
        with self._lock:
            return len(self._subs.get(event_type, ()))

    def publish(self, event: object) -> None:
        with self._lock:
            subs = list(self._subs.get(type(event), ()))
        for sub in subs:
            handler = sub.resolve()
            if handler is None:
                self.unsubscribe(sub)
                continue
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", type(event).__name__)
