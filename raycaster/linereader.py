"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 42
OPEN_MAX = 1024


class LineReader:
    """Reads lines from a raw file descriptor, buffer_size bytes per read.

    Each line keeps its trailing newline; the last line of the input may
    lack one. Text left over after a newline is kept for the next call.
    """

    def __init__(
        self,
        fd: int,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if fd < 0 or fd >= OPEN_MAX:
            raise ValueError(f"file descriptor {fd} outside [0, {OPEN_MAX})")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending = bytearray()

    def _fill(self) -> None:
        """Read until a newline is buffered or the input runs dry."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def readline(self) -> str | None:
        """The next line, newline included, or None when nothing is left."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line.decode(self.encoding)

    def __iter__(self) -> Iterator[str]:
        return iter(self.readline, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """The next line from fd, keeping separate leftovers for each descriptor.

    Returns None once the descriptor has no more data; its leftover state
    is then dropped.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line