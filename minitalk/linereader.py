"""Reading newline-terminated lines from file descriptors, one at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 100


class LineReader:
    """Reads lines from any number of file descriptors, keeping unread data per descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an int, got {type(buffer_size).__name__}")
        if buffer_size < 0:
            raise ValueError("buffer_size must not be negative")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd``, newline included, or ``None`` at end of input.

        The last line is returned without a newline if the input lacks one.
        On a read error the data kept for ``fd`` is dropped and the error raised.
        """
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        pending = self._pending.setdefault(fd, bytearray())
        if b"\n" not in pending:
            try:
                self._fill(fd, pending)
            except OSError:
                self.forget(fd)
                raise
        newline = pending.find(b"\n")
        end = len(pending) if newline < 0 else newline + 1
        line = bytes(pending[:end])
        del pending[:end]
        if not line:
            self.forget(fd)
            return None
        return line

    def _fill(self, fd: int, pending: bytearray) -> None:
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                return
            pending.extend(chunk)
            if b"\n" in chunk:
                return

    def iter_lines(self, fd: int) -> Iterator[bytes]:
        """Yield the lines of ``fd`` until its end."""
        while (line := self.read_line(fd)) is not None:
            yield line

    def forget(self, fd: int) -> None:
        """Drop any data kept for ``fd``."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Next line of ``fd`` from a shared reader, or ``None`` at end of input."""
    return _default_reader.read_line(fd)