from __future__ import annotations

import re

from numplay.core.errors import ParseError

# Optional sign, ASCII digits only. Rejects "1_000", "1.0", "0x10", " ".
_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_int(text: str) -> int:
    """
    Parse a trimmed line of text as a base-10 integer.
    """
    s = text.strip()
    if not _INT_RE.match(s):
        raise ParseError(text)
    try:
        return int(s)
    except ValueError as exc:
        # digit count above sys.get_int_max_str_digits()
        raise ParseError(text, reason="integer too long") from exc


def parse_index(text: str) -> int:
    """
    Parse a sequence index (non-negative integer).

    Raises ParseError instead of terminating; the caller picks the policy.
    """
    value = parse_int(text)
    if value < 0:
        raise ParseError(text, reason="index must be >= 0")
    return value
