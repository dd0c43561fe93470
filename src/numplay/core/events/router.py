from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from numplay.core.events.bus import EventBus, EventHandler


class EventComponent(Protocol):
    """
    Anything exposing (event_type, handler) pairs: renderers, audits, test collectors.
    """

    def subscriptions(self) -> Sequence[tuple[str, EventHandler]]:
        ...


@dataclass(frozen=True, slots=True)
class RouterWiring:
    """
    What register() wired, as (component name, event_type) pairs in wiring order.
    """

    routes: tuple[tuple[str, str], ...]

    def components(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(name for name, _ in self.routes))


class EventRouter:
    """
    Wires components onto one EventBus.

    Components are wired in the order given, each in its own subscriptions()
    order, so a round's renderer always handles an event before its observers.
    """

    def __init__(self, *, bus: EventBus) -> None:
        self._bus = bus

    def register(self, components: Iterable[EventComponent]) -> RouterWiring:
        routes: list[tuple[str, str]] = []
        # (event_type, id(handler)): the same handler twice would render a line twice
        seen: set[tuple[str, int]] = set()

        for component in components:
            name = type(component).__name__

            subs = component.subscriptions()
            if not isinstance(subs, Sequence):
                raise TypeError(f"{name}.subscriptions() must return a Sequence")

            for event_type, handler in subs:
                key = (event_type, id(handler))
                if key in seen:
                    raise RuntimeError(f"duplicate subscription: component={name} event_type={event_type}")
                seen.add(key)

                self._bus.subscribe(event_type=event_type, handler=handler)
                routes.append((name, event_type))

        return RouterWiring(routes=tuple(routes))
