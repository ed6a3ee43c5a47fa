"""Recursive and backtracking routines: subsequences, N-queens, Hanoi, permutations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple, TypeVar

T = TypeVar("T")


def subsequences(text: str) -> list[str]:
    """Return all 2**len(text) subsequences of *text*.

    Subsequences that leave out the first character come first, followed by
    the same subsequences with the first character prepended.
    """
    if not text:
        return [""]
    rest = subsequences(text[1:])
    return rest + [text[0] + tail for tail in rest]


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Return every placement of *n* non-attacking queens on an n x n board.

    Each placement is a tuple whose i-th entry is the column of the queen in
    row i. Placements are listed in the order a row-by-row, left-to-right
    search finds them.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")

    solutions: list[tuple[int, ...]] = []
    placement: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(tuple(placement))
            return
        for col in range(n):
            if (
                col in used_columns
                or row - col in used_diagonals
                or row + col in used_antidiagonals
            ):
                continue
            placement.append(col)
            used_columns.add(col)
            used_diagonals.add(row - col)
            used_antidiagonals.add(row + col)
            place(row + 1)
            placement.pop()
            used_columns.discard(col)
            used_diagonals.discard(row - col)
            used_antidiagonals.discard(row + col)

    place(0)
    return solutions


class Move(NamedTuple):
    """A single Tower of Hanoi move."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry *n* disks from *source* to *target*."""
    if n < 0:
        raise ValueError(f"disk count must be non-negative, got {n}")
    if n == 0:
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)


def next_permutation(items: Sequence[T]) -> list[T]:
    """Return the lexicographically next permutation of *items*.

    The last permutation wraps around to the first (sorted) one.
    """
    arr = list(items)
    pivot = next(
        (i for i in range(len(arr) - 2, -1, -1) if arr[i] < arr[i + 1]), None
    )
    if pivot is None:
        arr.reverse()
        return arr
    successor = next(
        j for j in range(len(arr) - 1, pivot, -1) if arr[j] > arr[pivot]
    )
    arr[pivot], arr[successor] = arr[successor], arr[pivot]
    arr[pivot + 1 :] = reversed(arr[pivot + 1 :])
    return arr