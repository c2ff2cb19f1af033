"""Formatted output with a small set of conversion specifiers.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Any other character after ``%`` is dropped along
with the ``%`` and consumes no argument; a lone ``%`` at the end of the
template produces nothing.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, Optional, TextIO

from libft.numbers import INT_MIN, itoa

UINT_MAX = 0xFFFFFFFF


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects an int or a one-character str, got {type(value).__name__}")


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%p expects an int address, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"%p expects a non-negative address, got {value}")
    return "0x" + format(value, "x")


def _format_signed(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%d expects an int, got {type(value).__name__}")
    return itoa(value)


def _unsigned(value: Any) -> int:
    """Reduce ``value`` to a 32-bit unsigned integer, wrapping negatives."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not INT_MIN <= value <= UINT_MAX:
        raise OverflowError(f"{value} does not fit in 32 bits")
    return value & UINT_MAX


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": lambda value: str(_unsigned(value)),
    "x": lambda value: format(_unsigned(value), "x"),
    "X": lambda value: format(_unsigned(value), "X"),
}


def sprintf(template: str, *args: Any) -> str:
    """Return ``template`` with its conversion specifiers replaced by ``args``.

    Raises TypeError when the template asks for more arguments than given.
    Extra arguments are ignored.
    """
    pending_args = iter(args)
    chars = iter(template)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERTERS.get(spec)
        if convert is None:
            continue
        try:
            value = next(pending_args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        parts.append(convert(value))
    return "".join(parts)


def printf(template: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(template, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)