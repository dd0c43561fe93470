from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from numplay.core.events.base import Event
from numplay.core.events.bus import EventBus
from numplay.core.events.round import GuessAccepted, RoundStarted
from numplay.core.events.router import EventRouter


@dataclass(slots=True)
class Collector:
    name: str
    seen: list[tuple[str, int]] = field(default_factory=list)

    def subscriptions(self):
        return [
            ("round.started", self._on_event),
            ("round.guess_accepted", self._on_event),
        ]

    def _on_event(self, e: Event) -> None:
        self.seen.append((self.name, e.sequence))


def test_event_create_fills_identity() -> None:
    e = RoundStarted.create(round_id="r1", low=1, high=10, sequence=1)
    assert e.event_type == "round.started"
    assert e.sequence == 1
    assert e.timestamp_utc.tzinfo is not None
    assert e.event_id != RoundStarted.create(round_id="r1", low=1, high=10, sequence=2).event_id


def test_event_create_requires_positive_sequence() -> None:
    with pytest.raises(ValueError):
        RoundStarted.create(round_id="r1", low=1, high=10, sequence=0)


def test_router_wires_in_order_and_bus_dispatches_in_order() -> None:
    bus = EventBus()
    shared: list[tuple[str, int]] = []
    a = Collector(name="a", seen=shared)
    b = Collector(name="b", seen=shared)

    wiring = EventRouter(bus=bus).register([a, b])
    assert len(wiring.routes) == 4
    assert wiring.routes[:2] == (("Collector", "round.started"), ("Collector", "round.guess_accepted"))
    assert wiring.components() == ("Collector",)

    bus.publish(RoundStarted.create(round_id="r", low=1, high=2, sequence=1))
    bus.publish(GuessAccepted.create(round_id="r", guess=1, attempt=1, sequence=2))

    assert shared == [("a", 1), ("b", 1), ("a", 2), ("b", 2)]


def test_router_rejects_duplicate_wiring() -> None:
    bus = EventBus()

    def handler(e: Event) -> None:
        pass

    class Twice:
        def subscriptions(self):
            return [("round.started", handler), ("round.started", handler)]

    with pytest.raises(RuntimeError):
        EventRouter(bus=bus).register([Twice()])


def test_router_requires_sequence_of_subscriptions() -> None:
    class Lazy:
        def subscriptions(self):
            return iter([("round.started", lambda e: None)])

    with pytest.raises(TypeError):
        EventRouter(bus=EventBus()).register([Lazy()])


def test_bus_propagates_handler_errors() -> None:
    bus = EventBus()

    def boom(e: Event) -> None:
        raise RuntimeError("handler failed")

    bus.subscribe(event_type="round.started", handler=boom)
    with pytest.raises(RuntimeError, match="handler failed"):
        bus.publish(RoundStarted.create(round_id="r", low=1, high=2, sequence=1))
