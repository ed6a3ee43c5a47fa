"""Singly linked list with concatenation, reversal and sorted merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain, islice
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list of values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        if not isinstance(index, int):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range for length {self._size}")
        return next(islice(self, index, None))

    def __add__(self, other: object) -> LinkedList:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return LinkedList(chain(self, other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def reversed_copy(self) -> LinkedList:
        """Return a new list holding the values in reverse order."""
        result = LinkedList()
        for value in self:
            result._head = _Node(value, result._head)
            result._size += 1
        return result

    def __str__(self) -> str:
        return "-->".join(f"| {value} |" for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences into one ascending linked list.

    On ties the value from *first* comes before the one from *second*.
    """
    return LinkedList(heapq.merge(first, second))