from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol


class RandomSource(Protocol):
    """
    Uniform integer draws, inclusive of both bounds.
    """

    def uniform(self, low: int, high: int) -> int:
        ...


@dataclass(slots=True)
class SeededRandomSource:
    """
    random.Random-backed source. seed=None seeds from OS entropy.
    """

    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def uniform(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"low={low} must be <= high={high}")
        return self._rng.randint(low, high)


@dataclass(frozen=True, slots=True)
class FixedRandomSource:
    """
    Always draws `value`. Used to pin the secret in tests and demos.
    """

    value: int

    def uniform(self, low: int, high: int) -> int:
        if not low <= self.value <= high:
            raise ValueError(f"fixed value {self.value} outside [{low}, {high}]")
        return self.value
