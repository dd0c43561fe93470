from __future__ import annotations

import secrets
from datetime import datetime, timezone

import structlog

from numplay.core.events.bus import EventBus
from numplay.core.events.round import RoundAborted, RoundFinished, RoundStarted
from numplay.core.logging.setup import bind_context, unbind_context
from numplay.guessing.state import RoundPhase, RoundState

log = structlog.get_logger()


def new_round_id() -> str:
    """
    Timestamp plus a high-entropy suffix, unique even within one second.
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return f"{timestamp}_{secrets.token_hex(4)}"


class RoundLifecycle:
    """
    Explicit round lifecycle controller.

    START -> AWAITING on start(), AWAITING -> DONE on finish() or abort().
    Every transition is published on the bus.
    """

    def __init__(self, *, bus: EventBus, state: RoundState) -> None:
        self._bus = bus
        self._state = state

    @property
    def state(self) -> RoundState:
        return self._state

    def start(self) -> None:
        if self._state.phase is not RoundPhase.START:
            raise RuntimeError(f"round already started (phase={self._state.phase.value})")
        if self._state.secret is None:
            raise RuntimeError("secret must be drawn before the round starts")

        bind_context(round_id=self._state.round_id, component="guessing_round")

        self._state.phase = RoundPhase.AWAITING
        self._bus.publish(
            RoundStarted.create(
                round_id=self._state.round_id,
                low=self._state.range.low,
                high=self._state.range.high,
                sequence=self._state.next_sequence(),
            )
        )

        log.info("round.started", low=self._state.range.low, high=self._state.range.high)

    def finish(self) -> None:
        if self._state.phase is not RoundPhase.AWAITING:
            raise RuntimeError(f"round not awaiting (phase={self._state.phase.value})")

        # Allocate sequence while still live
        seq = self._state.next_sequence()
        self._state.phase = RoundPhase.DONE

        self._bus.publish(
            RoundFinished.create(
                round_id=self._state.round_id,
                attempts=self._state.attempts,
                sequence=seq,
            )
        )

        log.info("round.finished", attempts=self._state.attempts)
        unbind_context("round_id", "component")

    def abort(self, exc: BaseException) -> None:
        if not self._state.is_live:
            return

        seq = self._state.next_sequence()
        self._state.phase = RoundPhase.DONE

        try:
            self._bus.publish(
                RoundAborted.create(
                    round_id=self._state.round_id,
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                    sequence=seq,
                )
            )
        finally:
            unbind_context("round_id", "component")
