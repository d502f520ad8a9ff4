"""Reading a stream one line at a time through a fixed-size read buffer."""

from typing import Generic, IO, Iterator, List, Optional, TypeVar

BUFFER_SIZE = 42

Chunk = TypeVar("Chunk", str, bytes)


class LineReader(Generic[Chunk]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read in pieces of buffer_size until a piece holds a newline
    or the stream ends, and whatever follows the line is kept for the next
    call.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _fill(self) -> Optional[Chunk]:
        pieces: List[Chunk] = [] if self._pending is None else [self._pending]
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pieces.append(chunk)
            newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            if newline in chunk:
                break
        if not pieces:
            return None
        return pieces[0][:0].join(pieces)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        data = self._fill()
        if data is None:
            return None
        newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
        index = data.find(newline)
        if index < 0:
            self._pending = None
            return data
        rest = data[index + 1:]
        self._pending = rest if rest else None
        return data[:index + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line