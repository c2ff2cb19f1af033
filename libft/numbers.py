"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

import re

INT_MAX = 2147483647
INT_MIN = -2147483648

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(s: str) -> int:
    """Parse the leading decimal integer of ``s``.

    Leading ASCII whitespace is skipped and one optional sign is read. Parsing
    stops at the first non-digit; text without digits gives 0. The result is
    clamped to the 32-bit signed range.
    """
    match = _LEADING_NUMBER.match(s)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        return max(-value, INT_MIN)
    return min(value, INT_MAX)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)