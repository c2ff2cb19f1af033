"""Reading a stream one line at a time."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any, AnyStr, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader:
    """Read lines from a file descriptor or an object with ``read(size)``.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. Lines are ``bytes`` or ``str`` according to what the source
    produces.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            fd = source
            self._read: Callable[[int], Any] = lambda size: os.read(fd, size)
        else:
            self._read = source.read
        self.buffer_size = buffer_size
        self._pending: Optional[Any] = None

    def _take_line(self, end: int) -> Any:
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                cut = self._pending.find(newline)
                if cut >= 0:
                    return self._take_line(cut + 1)
            chunk = self._read(self.buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        rest, self._pending = self._pending, None
        return rest if rest else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line