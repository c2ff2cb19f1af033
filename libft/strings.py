"""String helpers: splitting, searching, bounded copying and trimming.

Searches return an index into the string, or None when nothing is found.
Bounded copies return the text that was produced together with the length
that the operation reports.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_TERMINATOR = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator character ``"\\0"`` finds the end of the
    string when ``s`` holds none itself.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _TERMINATOR else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator character ``"\\0"`` finds the end of the
    string.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` on each character of ``s`` in order.

    A character returned by ``f`` replaces the one at that index; None keeps it.
    """
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    At most ``size - len(dest) - 1`` characters of ``src`` are appended.
    Returns the resulting text and the reported length: ``len(dest) +
    len(src)``, or ``len(src) + size`` when ``size`` leaves no room past
    ``dest``.
    """
    _check_non_negative("size", size)
    dlen, slen = len(dest), len(src)
    if size == 0 or size <= dlen:
        return dest, slen + size
    return dest + src[: size - dlen - 1], dlen + slen


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and ``len(src)``.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    A string that ends early compares as if followed by code 0. Returns the
    difference of the first differing character codes, or 0.
    """
    _check_non_negative("n", n)
    pairs = islice(zip_longest(a, b, fillvalue=_TERMINATOR), n)
    return next((ord(x) - ord(y) for x, y in pairs if x != y), 0)


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``n``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    _check_non_negative("n", n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def strtrim(s: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``s``."""
    return s.strip(chars) if chars else s


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]