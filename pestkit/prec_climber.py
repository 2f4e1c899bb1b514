"""Precedence climbing over flat sequences of primary and operator pairs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Assoc(Enum):
    """Associativity of an infix operator."""

    LEFT = "left"
    RIGHT = "right"


class Operator:
    """An infix operator, possibly chained with others of equal precedence.

    Chaining is done with ``|``: ``Operator(plus, Assoc.LEFT) | Operator(minus, Assoc.LEFT)``
    gives both operators the same precedence.
    """

    __slots__ = ("_chain",)

    def __init__(self, rule: Any, assoc: Assoc) -> None:
        self._chain: tuple[tuple[Any, Assoc], ...] = ((rule, assoc),)

    @property
    def rule(self) -> Any:
        """The rule of the first operator in the chain."""
        return self._chain[0][0]

    @property
    def assoc(self) -> Assoc:
        """The associativity of the first operator in the chain."""
        return self._chain[0][1]

    def __or__(self, other: Operator) -> Operator:
        if not isinstance(other, Operator):
            return NotImplemented
        combined = Operator.__new__(Operator)
        combined._chain = self._chain + other._chain
        return combined

    def __iter__(self) -> Iterator[tuple[Any, Assoc]]:
        """Yield ``(rule, assoc)`` for every operator in the chain, in order."""
        return iter(self._chain)

    def __repr__(self) -> str:
        inner = " | ".join(f"Operator({rule!r}, {assoc})" for rule, assoc in self._chain)
        return inner


class _Peekable(Generic[T]):
    _EMPTY = object()

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)
        self._head: Any = self._EMPTY

    def peek(self) -> Any:
        if self._head is self._EMPTY:
            self._head = next(self._it, self._EMPTY)
        return self._head

    def has_next(self) -> bool:
        return self.peek() is not self._EMPTY

    def next(self, message: str) -> T:
        item = self.peek()
        if item is self._EMPTY:
            raise ValueError(message)
        self._head = self._EMPTY
        return item


class PrecClimber:
    """A table of operators with precedences, used to fold infix expressions.

    Pairs passed to :meth:`climb` must expose a ``rule`` attribute; they start
    with a primary and then alternate between operator and primary.
    """

    def __init__(self, ops: Iterable[Operator]) -> None:
        table = [
            (rule, precedence, assoc)
            for precedence, op in enumerate(ops, start=1)
            for rule, assoc in op
        ]
        self._ops: dict[Any, tuple[int, Assoc]] = {}
        self._load(table)

    @classmethod
    def from_table(cls, ops: Iterable[tuple[Any, int, Assoc]]) -> PrecClimber:
        """Create a climber from ``(rule, precedence, assoc)`` entries.

        Precedence starts at 1; entries need not be ordered.
        """
        climber = cls.__new__(cls)
        climber._ops = {}
        climber._load(ops)
        return climber

    def _load(self, entries: Iterable[tuple[Any, int, Assoc]]) -> None:
        for rule, precedence, assoc in entries:
            self._ops.setdefault(rule, (precedence, assoc))

    def _get(self, rule: Any) -> tuple[int, Assoc] | None:
        return self._ops.get(rule)

    def climb(
        self,
        pairs: Iterable[Any],
        primary: Callable[[Any], T],
        infix: Callable[[T, Any, T], T],
    ) -> T:
        """Map primaries with ``primary`` and reduce them with ``infix``.

        Raises ValueError when ``pairs`` is empty or an operator is not
        followed by a primary.
        """
        stream: _Peekable[Any] = _Peekable(pairs)
        lhs = primary(
            stream.next("precedence climbing requires a non-empty Pairs")
        )
        return self._climb_rec(lhs, 0, stream, primary, infix)

    def _climb_rec(
        self,
        lhs: T,
        min_prec: int,
        stream: _Peekable[Any],
        primary: Callable[[Any], T],
        infix: Callable[[T, Any, T], T],
    ) -> T:
        while stream.has_next():
            found = self._get(stream.peek().rule)
            if found is None or found[0] < min_prec:
                break
            prec = found[0]
            op = stream.next("operator expected")
            rhs = primary(
                stream.next(
                    "infix operator must be followed by a primary expression"
                )
            )
            while stream.has_next():
                following = self._get(stream.peek().rule)
                if following is None:
                    break
                new_prec, assoc = following
                if new_prec > prec or (assoc is Assoc.RIGHT and new_prec == prec):
                    rhs = self._climb_rec(rhs, new_prec, stream, primary, infix)
                else:
                    break
            lhs = infix(lhs, op, rhs)
        return lhs