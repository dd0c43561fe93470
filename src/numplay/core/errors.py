from __future__ import annotations


class NumplayError(Exception):
    """
    Base class for errors raised by numplay components.
    """


class ParseError(NumplayError, ValueError):
    """
    Input text is not a valid integer (or not a valid index).
    """

    def __init__(self, text: str, reason: str = "not an integer") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class EndOfInput(NumplayError, EOFError):
    """
    The line source has no more data.
    """

    def __init__(self, message: str = "end of input") -> None:
        super().__init__(message)


class TermOverflowError(NumplayError, OverflowError):
    """
    A sequence term does not fit in the configured value width.
    """

    def __init__(self, *, index: int, bits: int) -> None:
        super().__init__(f"term at index {index} overflows {bits}-bit unsigned value")
        self.index = index
        self.bits = bits
