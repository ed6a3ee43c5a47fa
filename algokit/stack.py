"""A stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack(Generic[T]):
    """Last-in, first-out stack holding at most *capacity* values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[T] = []

    def extend(self, values: Iterable[T]) -> None:
        """Push every value in order; nothing is pushed if they do not all fit."""
        batch = list(values)
        if len(batch) > self.capacity - len(self._items):
            raise StackOverflowError(
                f"{len(batch)} values do not fit in a stack with "
                f"{self.capacity - len(self._items)} free places"
            )
        self._items.extend(batch)

    def push(self, value: T) -> None:
        """Push *value* onto the top."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Draw the stack from top to bottom, one boxed value per entry."""
        parts = ["Displaying Stack: \n"]
        for value in reversed(self._items):
            parts.append(f"\t\t {value} \n\t\t____\n")
        return "".join(parts)