"""General-purpose data structures shared across the interpreter."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class LinkedList(Generic[T]):
    """Immutable singly linked list whose tails are shared, not copied."""

    __slots__ = ("_first", "_rest")

    def __init__(self) -> None:
        self._first: Optional[T] = None
        self._rest: Optional[LinkedList[T]] = None

    @classmethod
    def _node(cls, first: T, rest: LinkedList[T]) -> LinkedList[T]:
        node = cls.__new__(cls)
        node._first = first
        node._rest = rest
        return node

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> LinkedList[T]:
        """Build a list holding ``items`` in the same order."""
        result: LinkedList[T] = cls()
        for item in reversed(list(items)):
            result = result.cons(item)
        return result

    def cons(self, item: T) -> LinkedList[T]:
        """Return a new list with ``item`` in front of this one."""
        return type(self)._node(item, self)

    def head(self) -> Optional[T]:
        """First element, or None for the empty list."""
        return self._first

    def tail(self) -> LinkedList[T]:
        """Everything after the first element; the empty list is its own tail."""
        return self if self._rest is None else self._rest

    def reverse(self) -> LinkedList[T]:
        """Return a new list with the elements in reverse order."""
        result: LinkedList[T] = type(self)()
        for item in self:
            result = result.cons(item)
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._rest is not None

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._rest is not None:
            yield node._first  # type: ignore[misc]
            node = node._rest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"