"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import Iterator, TextIO

BUFFER_SIZE = 32


class LineReader:
    """Reads newline-separated lines from a text stream in fixed-size chunks.

    Lines are returned without their newline. A final line that lacks a
    newline is still returned. Once the stream is exhausted every further
    read gives None.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False
        self._finished = False

    def _fill(self) -> None:
        while "\n" not in self._pending and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if chunk:
                self._pending += chunk
            else:
                self._eof = True

    def read_line(self) -> str | None:
        """Return the next line, or None when no line is left."""
        if self._finished:
            return None
        self._fill()
        if not self._pending:
            self._finished = True
            return None
        line, newline, rest = self._pending.partition("\n")
        self._pending = rest
        if not newline:
            self._finished = True
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line