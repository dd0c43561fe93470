from __future__ import annotations

import pytest

from numplay.core.errors import ParseError
from numplay.core.parsing import parse_index, parse_int


@pytest.mark.parametrize(
    ("text", "expected"),
    [("42", 42), ("  7\n", 7), ("+5", 5), ("-3", -3), ("0", 0), ("007", 7)],
)
def test_parse_int_accepts_trimmed_integers(text: str, expected: int) -> None:
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "4.2", "1_000", "0x10", "12abc", "- 3"])
def test_parse_int_rejects_malformed(text: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_int(text)
    assert exc_info.value.text == text


def test_parse_index_rejects_negative() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_index("-1")
    assert exc_info.value.reason == "index must be >= 0"


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_index("nope")


def test_parse_int_rejects_oversized_digit_strings() -> None:
    huge = "9" * 5000
    with pytest.raises(ParseError) as exc_info:
        parse_int(huge)
    assert exc_info.value.reason == "integer too long"

    with pytest.raises(ParseError):
        parse_index(huge)
