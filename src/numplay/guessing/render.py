from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from numplay.core.events.base import Event
from numplay.core.events.bus import EventHandler
from numplay.core.events.round import (
    GuessAccepted,
    GuessCompared,
    GuessRequested,
    RoundStarted,
    RoundWon,
)
from numplay.io.lines import LineSink


@dataclass(frozen=True, slots=True)
class RoundMessages:
    """
    Text templates for a round. Fields are str.format templates.
    """

    greeting: str = "Guess the number!"
    prompt: str = "Please input your guess. It must be between {low} - {high}"
    echo: str = "You guessed: {guess}"
    too_small: str = "Too small!"
    too_big: str = "Too big!"
    win: str = "You win! You took {attempts} attempts!"

    win_style: str = "green"


@dataclass(slots=True)
class RoundRenderer:
    """
    EventBus component: turns round events into lines on a LineSink.

    GuessIgnored is deliberately not subscribed: malformed input is silent.
    """

    sink: LineSink
    messages: RoundMessages = field(default_factory=RoundMessages)

    def subscriptions(self) -> Sequence[tuple[str, EventHandler]]:
        return [
            (RoundStarted.event_type, self._on_started),
            (GuessRequested.event_type, self._on_requested),
            (GuessAccepted.event_type, self._on_accepted),
            (GuessCompared.event_type, self._on_compared),
            (RoundWon.event_type, self._on_won),
        ]

    def _on_started(self, e: Event) -> None:
        if isinstance(e, RoundStarted):
            self.sink.write_line(self.messages.greeting)

    def _on_requested(self, e: Event) -> None:
        if isinstance(e, GuessRequested):
            self.sink.write_line(self.messages.prompt.format(low=e.low, high=e.high))

    def _on_accepted(self, e: Event) -> None:
        if isinstance(e, GuessAccepted):
            self.sink.write_line(self.messages.echo.format(guess=e.guess, attempt=e.attempt))

    def _on_compared(self, e: Event) -> None:
        if not isinstance(e, GuessCompared):
            return
        if e.outcome == "too_small":
            self.sink.write_line(self.messages.too_small)
        else:
            self.sink.write_line(self.messages.too_big)

    def _on_won(self, e: Event) -> None:
        if isinstance(e, RoundWon):
            self.sink.write_line(self.messages.win.format(attempts=e.attempts), style=self.messages.win_style)
