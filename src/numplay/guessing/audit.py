from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Sequence

import structlog

from numplay.core.errors import EndOfInput
from numplay.core.events.base import Event
from numplay.core.events.bus import EventHandler
from numplay.core.events.round import (
    GuessAccepted,
    GuessCompared,
    GuessIgnored,
    GuessRequested,
    RoundAborted,
    RoundFinished,
    RoundStarted,
    RoundWon,
)

log = structlog.get_logger()


def event_to_dict(e: Event) -> dict[str, Any]:
    d: dict[str, Any] = {
        "event_id": str(e.event_id),
        "timestamp_utc": e.timestamp_utc.isoformat(),
        "event_type": e.event_type,
    }
    for f in fields(e):
        if f.name in ("event_id", "timestamp_utc"):
            continue
        d[f.name] = getattr(e, f.name)
    return d


@dataclass(slots=True)
class RoundAudit:
    """
    EventBus component: logs every round event as a structured entry
    and keeps an in-memory trail of the latest round.

    Reused across runs, the trail starts over at each round.started.
    """

    event_types: tuple[str, ...] = (
        RoundStarted.event_type,
        GuessRequested.event_type,
        GuessIgnored.event_type,
        GuessAccepted.event_type,
        GuessCompared.event_type,
        RoundWon.event_type,
        RoundFinished.event_type,
        RoundAborted.event_type,
    )
    # events of the current (or most recent) round; reset on round.started
    trail: list[dict[str, Any]] = field(default_factory=list)

    def subscriptions(self) -> Sequence[tuple[str, EventHandler]]:
        return [(et, self._on_event) for et in self.event_types]

    def _on_event(self, e: Event) -> None:
        if isinstance(e, RoundStarted):
            self.trail.clear()

        entry = event_to_dict(e)
        self.trail.append(entry)
        if isinstance(e, RoundAborted) and e.error_type != EndOfInput.__name__:
            log.warning("round.event", **entry)
        else:
            log.debug("round.event", **entry)

    def event_types_seen(self) -> list[str]:
        return [entry["event_type"] for entry in self.trail]
