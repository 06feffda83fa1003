"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 10


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled with ``os.read`` in chunks of ``buffer_size`` bytes.  Each
    line is returned with its trailing ``b"\\n"``; a final line without one
    is returned as is.  At end of input ``read_line`` returns ``None``.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> bytes | None:
        """Return the next line, or ``None`` once the input is exhausted."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                line, self._pending = self._pending, b""
                return line or None
            self._pending += chunk
        line, newline, self._pending = self._pending.partition(b"\n")
        return line + newline

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line