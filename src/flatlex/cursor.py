"""Read position over a borrowed, immutable character buffer."""

from __future__ import annotations

from flatlex.tokens import Position, is_whitespace


class Cursor:
    """A single read head over ``buffer[0:size]``.

    The buffer is referenced, never copied. ``end`` is the index of the last
    valid character, so the stream is completed once ``pos > end``. Callers
    move the head only through the range-checked methods below; ``mark`` and
    ``reset`` provide rollback for speculative reads.
    """

    __slots__ = ("_buffer", "_pos", "_end")

    def __init__(self, buffer: str, size: int | None = None) -> None:
        if size is None:
            size = len(buffer)
        elif not 0 <= size <= len(buffer):
            raise ValueError(f"size {size} outside buffer of length {len(buffer)}")
        self._buffer = buffer
        self._pos = 0
        self._end = size - 1

    @property
    def buffer(self) -> str:
        """The borrowed source text, including anything past size."""
        return self._buffer

    @property
    def pos(self) -> int:
        """Index of the next character to read."""
        return self._pos

    @property
    def end(self) -> int:
        """Index of the last valid character (-1 for an empty stream)."""
        return self._end

    @property
    def size(self) -> int:
        """Number of characters in the stream."""
        return self._end + 1

    @property
    def completed(self) -> bool:
        """True once the head has moved past the last valid character."""
        return self._pos > self._end

    def current(self, offset: int = 0) -> str:
        """Return the character at pos + offset, or "" past the end."""
        idx = self._pos + offset
        if 0 <= idx <= self._end:
            return self._buffer[idx]
        return ""

    def advance(self, count: int = 1) -> int:
        """Move forward by up to count characters; return how many were taken."""
        taken = max(0, min(count, self._end + 1 - self._pos))
        self._pos += taken
        return taken

    def skip_whitespace(self) -> None:
        while self._pos <= self._end and is_whitespace(self._buffer[self._pos]):
            self._pos += 1

    def mark(self) -> int:
        """Return the current position for a later reset()."""
        return self._pos

    def reset(self, mark: int) -> None:
        """Roll the head back to a position previously returned by mark()."""
        if not 0 <= mark <= self._end + 1:
            raise ValueError(f"mark {mark} outside stream bounds")
        self._pos = mark

    def text(self, start: int, stop: int | None = None) -> str:
        """Return a fresh copy of buffer[start:stop], stop defaulting to pos."""
        if stop is None:
            stop = self._pos
        return self._buffer[start:stop]

    def find(self, ch: str) -> int:
        """Index of the next ch at or after pos, or size if it never appears."""
        idx = self._buffer.find(ch, self._pos, self._end + 1)
        return self.size if idx < 0 else idx

    @property
    def progress(self) -> float:
        """Fraction of the stream consumed, from 0.0 to 1.0."""
        if self._end < 0:
            return 1.0
        return min(self._pos / (self._end + 1), 1.0)

    def position(self, offset: int | None = None) -> Position:
        """Return the line/column for an offset (default: the head)."""
        if offset is None:
            offset = self._pos
        offset = max(0, min(offset, self._end + 1))
        line = self._buffer.count("\n", 0, offset) + 1
        line_start = self._buffer.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1, offset)
