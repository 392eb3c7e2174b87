"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line of a stream that does
    not end in a newline is returned without one. The stream is read in
    chunks of buffer_size, and what follows a newline in a chunk is kept for
    the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._pending: Optional[AnyStr] = None

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted.

        Errors raised by the stream propagate and discard the partial line.
        """
        parts: list[AnyStr] = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._size)
                if not chunk:
                    break
                self._pending = chunk
            pending = self._pending
            newline = "\n" if isinstance(pending, str) else b"\n"
            index = pending.find(newline)
            if index >= 0:
                parts.append(pending[: index + 1])
                self._pending = pending[index + 1:]
                break
            parts.append(pending)
            self._pending = pending[:0]
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_all(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
    """Return the whole stream joined from its lines; an empty stream gives ''."""
    lines = list(LineReader(stream, buffer_size))
    if not lines:
        return ""
    return lines[0][:0].join(lines)