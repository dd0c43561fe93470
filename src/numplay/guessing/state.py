from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RoundPhase(str, Enum):
    START = "start"
    AWAITING = "awaiting"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class GuessRange:
    """
    Closed interval [low, high] the secret is drawn from.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"low={self.low} must be <= high={self.high}")

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high


@dataclass(slots=True)
class RoundState:
    """
    Mutable state of one guessing round, owned by that round only.

    - attempts: parsed-and-compared guesses so far
    - sequence: monotonic counter for event ordering

    Guardrails:
      - next_attempt / next_sequence are only valid before the round is DONE
      - the secret can be set once
    """

    round_id: str
    range: GuessRange
    phase: RoundPhase = RoundPhase.START
    secret: Optional[int] = None
    attempts: int = 0
    sequence: int = 0

    @property
    def is_live(self) -> bool:
        return self.phase is not RoundPhase.DONE

    def set_secret(self, value: int) -> None:
        if self.secret is not None:
            raise RuntimeError("secret already drawn for this round")
        if value not in self.range:
            raise RuntimeError(f"random source returned {value!r} outside [{self.range.low}, {self.range.high}]")
        self.secret = value

    def next_attempt(self) -> int:
        if not self.is_live:
            raise RuntimeError("cannot count an attempt after the round is done")
        self.attempts += 1
        return self.attempts

    def next_sequence(self) -> int:
        if not self.is_live:
            raise RuntimeError("cannot advance sequence after the round is done")
        self.sequence += 1
        return self.sequence
