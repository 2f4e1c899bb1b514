"""Cursor positions inside an input string, with primitive matching operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import total_ordering

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@total_ordering
class Position:
    """A cursor into an input string.

    Offsets count code points. Two positions are only comparable when they
    refer to the very same input object.
    """

    __slots__ = ("_input", "_pos")

    def __init__(self, input: str, pos: int) -> None:
        if not 0 <= pos <= len(input):
            raise ValueError(
                f"position {pos} is out of bounds for input of length {len(input)}"
            )
        self._input = input
        self._pos = pos

    @classmethod
    def from_start(cls, input: str) -> Position:
        """Create a position at the start of ``input``."""
        return cls(input, 0)

    @property
    def input(self) -> str:
        """The whole input this position points into."""
        return self._input

    @property
    def pos(self) -> int:
        """The offset of this position within the input."""
        return self._pos

    def copy(self) -> Position:
        """Return an independent position at the same place."""
        return Position(self._input, self._pos)

    def span(self, other: Position):
        """Create a span from this position to ``other``."""
        if self._input is not other._input:
            raise ValueError("span created from positions from different inputs")
        from pestkit.span import Span

        return Span(self._input, self._pos, other._pos)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based (line, column) of this position.

        ``\\r\\n`` and ``\\n`` end a line; a lone ``\\r`` counts as a column.
        """
        if self._pos > len(self._input):
            raise IndexError("position out of bounds")
        before = self._input[: self._pos].replace("\r\n", "\n")
        line = before.count("\n") + 1
        col = len(before) - (before.rfind("\n") + 1) + 1
        return line, col

    def line_of(self) -> str:
        """Return the whole line containing this position, line break included."""
        if self._pos > len(self._input):
            raise IndexError("position out of bounds")
        return self._input[self.find_line_start() : self.find_line_end()]

    def find_line_start(self) -> int:
        """Offset of the first character of the line holding this position."""
        return self._input.rfind("\n", 0, self._pos) + 1

    def find_line_end(self) -> int:
        """Offset just past the end of the line holding this position."""
        index = self._input.find("\n", self._pos)
        return len(self._input) if index < 0 else index + 1

    def at_start(self) -> bool:
        """Whether this position is at the start of the input."""
        return self._pos == 0

    def at_end(self) -> bool:
        """Whether this position is at the end of the input."""
        return self._pos == len(self._input)

    def skip(self, n: int) -> bool:
        """Move forward ``n`` characters if possible; otherwise stay put."""
        if self._pos + n > len(self._input):
            return False
        self._pos += n
        return True

    def skip_back(self, n: int) -> bool:
        """Move back ``n`` characters if possible; otherwise stay put."""
        if n > self._pos:
            return False
        self._pos -= n
        return True

    def skip_until(self, strings: Iterable[str]) -> bool:
        """Advance to the first occurrence of any of ``strings``.

        If none is found the position moves to the end and False is returned.
        """
        candidates = tuple(strings)
        found = next(
            (
                start
                for start in range(self._pos, len(self._input))
                if any(self._input.startswith(s, start) for s in candidates)
            ),
            None,
        )
        if found is None:
            self._pos = len(self._input)
            return False
        self._pos = found
        return True

    def match_char_by(self, predicate: Callable[[str], bool]) -> bool:
        """Consume one character if ``predicate`` accepts it."""
        if self._pos < len(self._input) and predicate(self._input[self._pos]):
            self._pos += 1
            return True
        return False

    def match_string(self, string: str) -> bool:
        """Consume ``string`` if the input continues with it."""
        if self._input.startswith(string, self._pos):
            self._pos += len(string)
            return True
        return False

    def match_insensitive(self, string: str) -> bool:
        """Consume ``string`` compared without regard to ASCII case."""
        end = self._pos + len(string)
        candidate = self._input[self._pos : end]
        if len(candidate) == len(string) and _ascii_fold(candidate) == _ascii_fold(
            string
        ):
            self._pos = end
            return True
        return False

    def match_range(self, start: str, end: str) -> bool:
        """Consume one character lying in the inclusive range ``start..end``."""
        if self._pos < len(self._input) and start <= self._input[self._pos] <= end:
            self._pos += 1
            return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._input is other._input and self._pos == other._pos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        if self._input is not other._input:
            raise ValueError("cannot compare positions from different strs")
        return self._pos < other._pos

    def __hash__(self) -> int:
        return hash((id(self._input), self._pos))

    def __repr__(self) -> str:
        return f"Position(pos={self._pos})"