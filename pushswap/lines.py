"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, buffer_size characters at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._store: AnyStr | None = None
        self._nl: AnyStr = "\n"  # type: ignore[assignment]

    def _fill(self) -> None:
        while self._store is None or self._nl not in self._store:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._store = None
                raise
            if not chunk:
                return
            if self._store is None:
                # The first chunk decides whether we are reading bytes or text.
                if isinstance(chunk, (bytes, bytearray)):
                    self._nl = b"\n"  # type: ignore[assignment]
                else:
                    self._nl = "\n"  # type: ignore[assignment]
                self._store = chunk
            else:
                self._store = self._store + chunk

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._store:
            self._store = None
            return None
        head, sep, rest = self._store.partition(self._nl)
        self._store = rest if sep else None
        return head + sep

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.readline()
        if line is None:
            raise StopIteration
        return line