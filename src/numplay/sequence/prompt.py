from __future__ import annotations

from enum import Enum

import structlog

from numplay.core.errors import ParseError
from numplay.core.parsing import parse_index
from numplay.io.lines import LineSink, LineSource

log = structlog.get_logger()

INDEX_PROMPT = "Please enter a number to find the nth Fibonacci number"
INDEX_RETRY = "Please type a number!"


class InvalidIndexPolicy(str, Enum):
    """
    How the index prompt reacts to text that is not a non-negative integer.

    EXIT: raise ParseError to the caller (which typically terminates).
    RETRY: tell the user and read another line.
    """

    EXIT = "exit"
    RETRY = "retry"


def read_index(
    source: LineSource,
    sink: LineSink,
    *,
    policy: InvalidIndexPolicy = InvalidIndexPolicy.EXIT,
) -> int:
    """
    Prompt for a sequence index and read it from `source`.

    EndOfInput from the source always propagates.
    """
    policy = InvalidIndexPolicy(policy)
    sink.write_line(INDEX_PROMPT, style="green")

    while True:
        text = source.read_line()
        try:
            return parse_index(text)
        except ParseError as exc:
            log.info("sequence.index_rejected", raw=text, reason=exc.reason, policy=policy.value)
            if policy is InvalidIndexPolicy.EXIT:
                raise
            sink.write_line(INDEX_RETRY, style="yellow")


def format_term(index: int, value: int) -> str:
    return f"The fibonacci value of {index}th position is {value}"
