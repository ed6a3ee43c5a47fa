"""Array and sequence routines."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import prod
from typing import TypeVar

T = TypeVar("T")


class StockSpanner:
    """Report, for each new price, how many consecutive days it was the highest."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record *price* and return its span."""
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of length *k*."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} does not fit {len(values)} values")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(values):
        while window and window[0] <= i - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def top_two(values: Iterable[int]) -> tuple[int, int]:
    """Return the largest value and the largest value strictly below it.

    The second item is -1 when every value is the same.
    """
    first: int | None = None
    second: int | None = None
    for value in values:
        if first is None or value > first:
            second, first = first, value
        elif value != first and (second is None or value > second):
            second = value
    if first is None:
        raise ValueError("top_two() needs at least one value")
    return first, -1 if second is None else second


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run; the empty run counts as 0."""
    best = current = 0
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    prefix = [1]
    for value in values[:-1]:
        prefix.append(prefix[-1] * value)
    suffix = [1]
    for value in reversed(values[1:]):
        suffix.append(suffix[-1] * value)
    suffix.reverse()
    return [left * right for left, right in zip(prefix, suffix)]


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with *values* sorted by selection sort."""
    arr = list(values)
    for start in range(len(arr)):
        smallest = min(range(start, len(arr)), key=arr.__getitem__)
        arr[start], arr[smallest] = arr[smallest], arr[start]
    return arr


def has_pair_with_sum(first: Iterable[int], second: Iterable[int], target: int) -> bool:
    """Return whether some a from *first* and b from *second* have a + b == target."""
    wanted = {target - a for a in first}
    return any(b in wanted for b in second)


def reverse_words(text: str) -> str:
    """Return *text* with its space-separated words in reverse order."""
    return " ".join(reversed(text.split(" ")))


def repeat_value(count: int, value: T) -> list[T]:
    """Return a list holding *value* *count* times."""
    return [value] * max(count, 0)


@dataclass(frozen=True)
class VectorSummary:
    """Summary of a list of numbers."""

    values: tuple[int, ...]
    sorted_values: tuple[int, ...]
    inner_max: int
    inner_min: int
    total: int


def vector_summary(values: Iterable[int]) -> VectorSummary:
    """Summarise *values*.

    The inner extremes are taken over the sorted values without the first
    element and the last two elements, so at least four values are needed.
    """
    original = tuple(values)
    ordered = tuple(sorted(original))
    inner = ordered[1:-2]
    if not inner:
        raise ValueError("vector_summary() needs at least four values")
    return VectorSummary(
        values=original,
        sorted_values=ordered,
        inner_max=max(inner),
        inner_min=min(inner),
        total=sum(original),
    )


def _product(values: Iterable[int]) -> int:
    return prod(values)