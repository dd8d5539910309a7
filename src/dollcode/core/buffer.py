"""Fixed-capacity glyph buffer.

Slots are allocated once at construction and never grow. Every write is
checked against the capacity before it is committed, so a failed write
leaves the buffer unchanged.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .errors import BufferOverflow


class GlyphBuffer:
    """A bounded, call-scoped sequence of single-character glyphs."""

    __slots__ = ("capacity", "_slots", "_len")

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._slots: list[str] = [""] * capacity
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[str]:
        for i in range(self._len):
            yield self._slots[i]

    def __repr__(self) -> str:
        return f"GlyphBuffer({self.as_string()!r}, {self._len}/{self.capacity})"

    @property
    def remaining(self) -> int:
        return self.capacity - self._len

    def push(self, glyph: str) -> None:
        """Append one glyph. Raises BufferOverflow if full."""
        if self._len >= self.capacity:
            raise BufferOverflow(self.capacity)
        self._slots[self._len] = glyph
        self._len += 1

    def extend(self, glyphs: Iterable[str]) -> None:
        """Append a run of glyphs, all or nothing."""
        run = glyphs if isinstance(glyphs, str) else tuple(glyphs)
        if len(run) > self.remaining:
            raise BufferOverflow(self.capacity)
        for glyph in run:
            self._slots[self._len] = glyph
            self._len += 1

    def reverse(self) -> None:
        """Reverse the filled part in place."""
        i, j = 0, self._len - 1
        while i < j:
            self._slots[i], self._slots[j] = self._slots[j], self._slots[i]
            i += 1
            j -= 1

    def clear(self) -> None:
        self._len = 0

    def as_string(self) -> str:
        return "".join(self._slots[:self._len])

    def utf8_size(self) -> int:
        """Size of the contents in UTF-8 bytes."""
        return sum(len(self._slots[i].encode("utf-8")) for i in range(self._len))
