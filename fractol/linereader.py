"""Reading newline-terminated lines from file descriptors."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFF_SIZE = 1024


class LineReader:
    """Reads lines from any number of file descriptors, buffering each separately."""

    def __init__(self, buffer_size: int = BUFF_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._buffers: dict[int, bytearray] = {}
        self._finished: set[int] = set()

    def next_line(self, fd: int) -> Optional[bytes]:
        """The next line of *fd* without its newline, or None at end of file.

        A last line without a newline is returned as is.  OSError is raised
        if *fd* cannot be read.
        """
        os.read(fd, 0)
        if fd in self._finished:
            return None
        buffer = self._buffers.setdefault(fd, bytearray())
        while True:
            end = buffer.find(b"\n")
            if end >= 0:
                line = bytes(buffer[:end])
                del buffer[: end + 1]
                return line
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                self._finished.add(fd)
                del self._buffers[fd]
                return bytes(buffer) if buffer else None
            buffer += chunk


def iter_lines(fd: int, buffer_size: int = BUFF_SIZE) -> Iterator[bytes]:
    """Yield the lines of *fd* until end of file."""
    reader = LineReader(buffer_size)
    while (line := reader.next_line(fd)) is not None:
        yield line