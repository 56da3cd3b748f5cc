"""Line-at-a-time reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream``, pulling ``buffer_size`` units per read.

    Each line keeps its trailing newline; the last line may lack one.
    Unread data stays buffered between calls until :meth:`reset`.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._sep: Optional[AnyStr] = None

    def _fill(self) -> None:
        while True:
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            if self._sep is None:
                self._sep = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._pending = chunk if self._pending is None else self._pending + chunk
            if self._sep in chunk:
                return

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        pending = self._pending
        if pending is None or self._sep not in pending:
            self._fill()
            pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._sep)
        if end == -1:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def reset(self) -> None:
        """Discard any buffered data."""
        self._pending = None

    def __iter__(self) -> "LineReader[AnyStr]":
        return self

    def __next__(self) -> AnyStr:
        line = self.readline()
        if line is None:
            raise StopIteration
        return line