"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline kept.

    Data is read buffer_size units at a time; what lies past the returned
    line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _fill(self) -> None:
        while True:
            if self._stash is not None:
                newline = "\n" if isinstance(self._stash, str) else b"\n"
                if newline in self._stash:
                    return
            chunk = self.stream.read(self.buffer_size)
            if self._stash is None:
                self._stash = chunk[:0]
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[AnyStr]:
        """The next line, ending with a newline unless it is the last; None at the end."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        newline = "\n" if isinstance(stash, str) else b"\n"
        cut = stash.find(newline)
        end = len(stash) if cut < 0 else cut + 1
        line, self._stash = stash[:end], stash[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line

    def reset(self) -> None:
        """Discard any data read ahead but not yet returned."""
        self._stash = None