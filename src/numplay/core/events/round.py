from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from numplay.core.events.base import Event

Outcome = Literal["too_small", "too_big"]


@dataclass(frozen=True, slots=True)
class RoundStarted(Event):
    """
    Emitted once the secret has been drawn. The secret itself is never published.
    """

    event_type: ClassVar[str] = "round.started"

    round_id: str
    low: int
    high: int


@dataclass(frozen=True, slots=True)
class GuessRequested(Event):
    """
    Emitted each time the round enters Awaiting and is about to read a line.
    """

    event_type: ClassVar[str] = "round.guess_requested"

    round_id: str
    low: int
    high: int


@dataclass(frozen=True, slots=True)
class GuessIgnored(Event):
    """
    A line that did not parse as an integer. Attempts are unchanged.
    """

    event_type: ClassVar[str] = "round.guess_ignored"

    round_id: str
    raw: str


@dataclass(frozen=True, slots=True)
class GuessAccepted(Event):
    event_type: ClassVar[str] = "round.guess_accepted"

    round_id: str
    guess: int
    attempt: int


@dataclass(frozen=True, slots=True)
class GuessCompared(Event):
    """
    A non-matching guess and its ordering relative to the secret.
    """

    event_type: ClassVar[str] = "round.guess_compared"

    round_id: str
    guess: int
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class RoundWon(Event):
    event_type: ClassVar[str] = "round.won"

    round_id: str
    attempts: int


@dataclass(frozen=True, slots=True)
class RoundFinished(Event):
    event_type: ClassVar[str] = "round.finished"

    round_id: str
    attempts: int


@dataclass(frozen=True, slots=True)
class RoundAborted(Event):
    """
    Emitted when a collaborator fails mid-round. No result is produced.
    """

    event_type: ClassVar[str] = "round.aborted"

    round_id: str

    error_type: str
    error_message: str
