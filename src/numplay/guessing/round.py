from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import structlog

from numplay.core.errors import EndOfInput, ParseError
from numplay.core.events.bus import EventBus
from numplay.core.events.round import (
    GuessAccepted,
    GuessCompared,
    GuessIgnored,
    GuessRequested,
    RoundWon,
)
from numplay.core.events.router import EventComponent, EventRouter, RouterWiring
from numplay.core.parsing import parse_int
from numplay.guessing.lifecycle import RoundLifecycle, new_round_id
from numplay.guessing.render import RoundMessages, RoundRenderer
from numplay.guessing.state import GuessRange, RoundPhase, RoundState
from numplay.io.lines import LineSink, LineSource
from numplay.io.random_source import RandomSource

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class RoundResult:
    round_id: str
    attempts: int
    secret: int


class GuessingRound:
    """
    Interactive bounded-range guessing protocol.

    State machine:
      START    -> draw secret, publish RoundStarted            -> AWAITING
      AWAITING -> malformed line, publish GuessIgnored         -> AWAITING
      AWAITING -> guess != secret, publish GuessCompared       -> AWAITING
      AWAITING -> guess == secret, publish RoundWon            -> DONE

    Each run() owns a fresh EventBus. The renderer is wired first, then any
    observers, so observers see an event after its line has been written.

    Collaborator failures (EndOfInput included) publish RoundAborted and
    propagate; no RoundResult is produced.
    """

    def __init__(
        self,
        *,
        messages: Optional[RoundMessages] = None,
        observers: Iterable[EventComponent] = (),
    ) -> None:
        self._messages = messages if messages is not None else RoundMessages()
        self._observers = tuple(observers)
        self._last_wiring: RouterWiring | None = None

    @property
    def last_wiring(self) -> RouterWiring | None:
        return self._last_wiring

    def run(
        self,
        range: GuessRange,
        rng: RandomSource,
        input: LineSource,
        output: LineSink,
        *,
        round_id: Optional[str] = None,
    ) -> RoundResult:
        bus = EventBus()
        state = RoundState(round_id=round_id or new_round_id(), range=range)
        lifecycle = RoundLifecycle(bus=bus, state=state)

        self._last_wiring = EventRouter(bus=bus).register(
            [RoundRenderer(sink=output, messages=self._messages), *self._observers]
        )

        try:
            while state.phase is not RoundPhase.DONE:
                if state.phase is RoundPhase.START:
                    self._start(rng=rng, state=state, lifecycle=lifecycle)
                else:
                    self._await_guess(bus=bus, state=state, lifecycle=lifecycle, source=input)
        except EndOfInput as exc:
            # expected way out of an interactive round (Ctrl-D, closed pipe)
            log.info("round.input_ended", round_id=state.round_id, attempts=state.attempts)
            lifecycle.abort(exc)
            raise
        except Exception as exc:
            log.exception("round.crashed", round_id=state.round_id, attempts=state.attempts)
            lifecycle.abort(exc)
            raise

        assert state.secret is not None
        return RoundResult(round_id=state.round_id, attempts=state.attempts, secret=state.secret)

    # ---------------- Transitions ----------------

    @staticmethod
    def _start(*, rng: RandomSource, state: RoundState, lifecycle: RoundLifecycle) -> None:
        state.set_secret(rng.uniform(state.range.low, state.range.high))
        lifecycle.start()

    @staticmethod
    def _await_guess(
        *,
        bus: EventBus,
        state: RoundState,
        lifecycle: RoundLifecycle,
        source: LineSource,
    ) -> None:
        bus.publish(
            GuessRequested.create(
                round_id=state.round_id,
                low=state.range.low,
                high=state.range.high,
                sequence=state.next_sequence(),
            )
        )

        raw = source.read_line()

        try:
            guess = parse_int(raw)
        except ParseError:
            # AWAITING -> AWAITING: nothing counted, nothing compared
            bus.publish(GuessIgnored.create(round_id=state.round_id, raw=raw, sequence=state.next_sequence()))
            log.debug("round.guess_ignored", raw=raw)
            return

        attempt = state.next_attempt()
        bus.publish(
            GuessAccepted.create(
                round_id=state.round_id,
                guess=guess,
                attempt=attempt,
                sequence=state.next_sequence(),
            )
        )

        secret = state.secret
        if guess < secret:
            outcome = "too_small"
        elif guess > secret:
            outcome = "too_big"
        else:
            bus.publish(RoundWon.create(round_id=state.round_id, attempts=attempt, sequence=state.next_sequence()))
            log.info("round.won", attempts=attempt)
            lifecycle.finish()
            return

        bus.publish(
            GuessCompared.create(
                round_id=state.round_id,
                guess=guess,
                outcome=outcome,
                sequence=state.next_sequence(),
            )
        )
