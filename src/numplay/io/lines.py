from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, TextIO

from numplay.core.errors import EndOfInput


class LineSource(Protocol):
    """
    Blocking source of text lines. Raises EndOfInput when exhausted.
    """

    def read_line(self) -> str:
        ...


class LineSink(Protocol):
    """
    Destination for text lines. `style` is a presentation hint (e.g. "green")
    that plain sinks are free to ignore.
    """

    def write_line(self, text: str, *, style: Optional[str] = None) -> None:
        ...


@dataclass(slots=True)
class StreamLineSource:
    """
    Reads lines from a text stream (stdin by default in the CLI).

    The line terminator is stripped; other whitespace is left to the parser.
    """

    stream: TextIO

    def read_line(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise EndOfInput("input stream exhausted")
        return line.rstrip("\r\n")


class ScriptedLineSource:
    """
    In-memory source for tests and demos. Strict: running out raises EndOfInput.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: deque[str] = deque(lines)
        self.consumed = 0

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_line(self) -> str:
        if not self._lines:
            raise EndOfInput(f"scripted input exhausted after {self.consumed} lines")
        self.consumed += 1
        return self._lines.popleft()


@dataclass(slots=True)
class StreamLineSink:
    stream: TextIO

    def write_line(self, text: str, *, style: Optional[str] = None) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


@dataclass(slots=True)
class RecordingLineSink:
    """
    Keeps every line (and its style) in memory.
    """

    lines: list[str] = field(default_factory=list)
    styles: list[Optional[str]] = field(default_factory=list)

    def write_line(self, text: str, *, style: Optional[str] = None) -> None:
        self.lines.append(text)
        self.styles.append(style)
