"""ASCII character classification and case conversion.

Each function takes either an integer character code or a one-character
string. Predicates return ``bool``. The case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import TypeVar

_C = TypeVar("_C", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def isalpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return _is_digit(_code(c))


def isalnum(c: int | str) -> bool:
    """Return True for an ASCII letter or decimal digit."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code) or _is_digit(code)


def isascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: _C) -> _C:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: _C) -> _C:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code