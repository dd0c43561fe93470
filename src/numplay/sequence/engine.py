from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from numplay.core.errors import TermOverflowError


class OverflowPolicy(str, Enum):
    """
    What happens when a term no longer fits in the value width.

    RAISE: TermOverflowError naming the requested index.
    WRAP: reduce modulo 2**bits (silent wraparound of fixed-width arithmetic).
    """

    RAISE = "raise"
    WRAP = "wrap"


@dataclass(frozen=True, slots=True)
class SequenceEngine:
    """
    Iterative additive recurrence (Fibonacci-style), O(n) time, O(1) space.

    The loop runs n + 1 times, so indexing is shifted by one:
    nth_term(0) == 1, nth_term(1) == 1, nth_term(2) == 2, nth_term(5) == 8.
    In other words nth_term(n) is the conventional F(n + 1).
    """

    bits: int = 32
    overflow: OverflowPolicy = OverflowPolicy.RAISE

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError("bits must be > 0")
        # accept plain strings ("raise" / "wrap") from config and callers
        object.__setattr__(self, "overflow", OverflowPolicy(self.overflow))

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    def nth_term(self, n: int) -> int:
        if n < 0:
            raise ValueError(f"index must be >= 0, got {n}")

        limit = self.max_value
        wrap = self.overflow is OverflowPolicy.WRAP

        total, nxt = 0, 1
        for _ in range(n + 1):
            prev = total
            total = total + nxt
            if total > limit:
                if not wrap:
                    raise TermOverflowError(index=n, bits=self.bits)
                total &= limit
            nxt = prev

        return total


_DEFAULT_ENGINE = SequenceEngine()


def nth_term(n: int, *, bits: int = 32, overflow: OverflowPolicy | str = OverflowPolicy.RAISE) -> int:
    """
    Convenience wrapper over SequenceEngine.
    """
    if bits == _DEFAULT_ENGINE.bits and OverflowPolicy(overflow) is _DEFAULT_ENGINE.overflow:
        return _DEFAULT_ENGINE.nth_term(n)
    return SequenceEngine(bits=bits, overflow=OverflowPolicy(overflow)).nth_term(n)
