from __future__ import annotations

from collections import defaultdict
from typing import Callable, DefaultDict, TypeAlias

import structlog

from numplay.core.events.base import Event

log = structlog.get_logger()

EventHandler: TypeAlias = Callable[[Event], None]


class EventBus:
    """
    Per-round synchronous event bus.

    Handlers run in subscription order, inside publish(). A handler that
    raises stops dispatch and the error reaches the publisher (the round),
    which then aborts.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, *, event_type: str, handler: EventHandler) -> None:
        if not event_type:
            raise ValueError("event_type must be non-empty")
        self._handlers[event_type].append(handler)

    def publish(self, event: Event) -> None:
        handlers = self._handlers.get(event.event_type, ())
        log.debug("bus.publish", event_type=event.event_type, sequence=event.sequence, handlers=len(handlers))
        for handler in handlers:
            handler(event)
