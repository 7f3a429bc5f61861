"""Incremental line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Protocol

DEFAULT_BUFFER_SIZE = 1


class _Readable(Protocol[AnyStr]):
    def read(self, size: int) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a stream, ``buffer_size`` characters or bytes at a time.

    Each line keeps its trailing newline; the final line of the stream may
    lack one. Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: _Readable, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing more."""
        pending = self._pending
        self._pending = None
        while pending is None or self._newline not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
            pending = chunk if pending is None else pending + chunk
        if not pending:
            return None
        end = pending.find(self._newline)
        if end == -1:
            return pending
        line, rest = pending[: end + 1], pending[end + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line