"""Line-by-line reading of streams in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 42


def _newline_index(data: str | bytes) -> int:
    """Return the position of the first newline in ``data``, or -1."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.  When
    no data is left, ``read_line`` returns None, but a later call reads again,
    so data appended to the stream afterwards is still seen.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _fill(self) -> None:
        while self._stash is None or _newline_index(self._stash) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream has nothing more."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = _newline_index(stash)
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1:] or None
        return stash[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


class LineReaderPool:
    """Keeps a separate line reader for each stream it is asked about."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._buffer_size = buffer_size
        self._readers: dict[int, LineReader] = {}

    def next_line(self, stream: IO[AnyStr]) -> AnyStr | None:
        """Return the next line of ``stream``, or None when it is exhausted."""
        key = id(stream)
        reader = self._readers.get(key)
        if reader is None:
            reader = LineReader(stream, self._buffer_size)
            self._readers[key] = reader
        line = reader.read_line()
        if line is None:
            del self._readers[key]
        return line