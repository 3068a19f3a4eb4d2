"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

_MAX_FD = 101010
_MAX_BUFFER = 10_000_000


class LineReader:
    """Hand out the lines of file descriptors, keeping unread data per fd.

    Data is read ``buffer_size`` bytes at a time. Each line keeps its
    trailing newline; the last line of a file may have none.
    """

    def __init__(self, buffer_size: int = 42) -> None:
        if not 1 <= buffer_size <= _MAX_BUFFER:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd``, or None when nothing is left.

        A read error discards what was buffered for ``fd`` and is raised.
        """
        if not 0 <= fd < _MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        buffered = self._pending.pop(fd, b"")
        while b"\n" not in buffered:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            buffered += chunk
        if not buffered:
            return None
        line, newline, rest = buffered.partition(b"\n")
        if newline:
            self._pending[fd] = rest
        return line + newline

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the remaining lines of ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line