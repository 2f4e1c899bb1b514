"""Spans over an input string, delimited by two offsets."""

from __future__ import annotations

from collections.abc import Iterator

from pestkit.position import Position


class Span:
    """A slice of an input string between ``start`` and ``end``.

    Two spans are equal only when they refer to the very same input object
    and cover the same offsets.
    """

    __slots__ = ("_input", "_start", "_end")

    def __init__(self, input: str, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(input):
            raise ValueError(
                f"span {start}..{end} is not valid for input of length {len(input)}"
            )
        self._input = input
        self._start = start
        self._end = end

    @property
    def input(self) -> str:
        """The whole input this span refers to."""
        return self._input

    @property
    def start(self) -> int:
        """Offset where the span begins."""
        return self._start

    @property
    def end(self) -> int:
        """Offset just past where the span ends."""
        return self._end

    def start_pos(self) -> Position:
        """The position at the start of the span."""
        return Position(self._input, self._start)

    def end_pos(self) -> Position:
        """The position at the end of the span."""
        return Position(self._input, self._end)

    def split(self) -> tuple[Position, Position]:
        """Return the start and end positions of the span."""
        return self.start_pos(), self.end_pos()

    def as_str(self) -> str:
        """The text covered by the span."""
        return self._input[self._start : self._end]

    def lines(self) -> Iterator[str]:
        """Yield every whole line at least partly covered by the span."""
        pos = self._start
        while pos <= self._end:
            position = Position(self._input, pos)
            if position.at_end():
                return
            yield position.line_of()
            pos = position.find_line_end()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            self._input is other._input
            and self._start == other._start
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((id(self._input), self._start, self._end))

    def __repr__(self) -> str:
        return f"Span(str={self.as_str()!r}, start={self._start}, end={self._end})"