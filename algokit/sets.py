"""A set that remembers insertion order, with set algebra and subset tests."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from itertools import chain
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """A collection of distinct values kept in the order they first appeared.

    Union keeps the left operand's values first and then the new values of
    the right one; difference and intersection keep the left operand's order.
    Comparison operators test subset and superset relations.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = dict.fromkeys(values)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __or__(self, other: object) -> OrderedSet[T]:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return OrderedSet(chain(self, other))

    def __sub__(self, other: object) -> OrderedSet[T]:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return OrderedSet(value for value in self if value not in other)

    def __and__(self, other: object) -> OrderedSet[T]:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return OrderedSet(value for value in self if value in other)

    def _within(self, other: OrderedSet[T]) -> bool:
        return all(value in other for value in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return len(self) == len(other) and self._within(other)

    def __lt__(self, other: object) -> bool:
        """Return whether this set is a proper subset of *other*."""
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return len(self) < len(other) and self._within(other)

    def __le__(self, other: object) -> bool:
        """Return whether this set is a subset of *other*."""
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        """Return whether this set is a proper superset of *other*."""
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return len(self) > len(other) and other._within(self)

    def __ge__(self, other: object) -> bool:
        """Return whether this set is a superset of *other*."""
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self > other or self == other

    def __str__(self) -> str:
        if not self._items:
            return "NULL SET"
        return "{ " + ", ".join(str(value) for value in self) + " }"

    def __repr__(self) -> str:
        return f"OrderedSet({list(self)!r})"