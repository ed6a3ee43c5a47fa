"""Contest problems: minimum-cost partition of 1..n and the modular-mode puzzle."""

from __future__ import annotations

from math import gcd

_INFINITY = 10**18


class _PrefixAddMinTree:
    """Segment tree over positions 0..size-1 with point assignment,
    prefix addition and a global minimum."""

    def __init__(self, size: int) -> None:
        width = 1
        while width < size:
            width *= 2
        self._width = width
        self._seg = [_INFINITY] * (2 * width)
        self._lazy = [0] * (2 * width)

    def _pull(self, node: int) -> None:
        left, right = 2 * node, 2 * node + 1
        self._seg[node] = min(
            self._seg[left] + self._lazy[left],
            self._seg[right] + self._lazy[right],
        )

    def assign(self, pos: int, value: int) -> None:
        """Set the value stored at *pos*."""

        def walk(node: int, lo: int, hi: int) -> None:
            if lo == hi:
                self._seg[node] = value
                return
            mid = (lo + hi) // 2
            if pos <= mid:
                walk(2 * node, lo, mid)
            else:
                walk(2 * node + 1, mid + 1, hi)
            self._pull(node)

        walk(1, 0, self._width - 1)

    def add_prefix(self, last: int, amount: int) -> None:
        """Add *amount* to every position from 0 to *last* inclusive."""

        def walk(node: int, lo: int, hi: int) -> None:
            if last < lo:
                return
            if hi <= last:
                self._lazy[node] += amount
                return
            mid = (lo + hi) // 2
            walk(2 * node, lo, mid)
            walk(2 * node + 1, mid + 1, hi)
            self._pull(node)

        walk(1, 0, self._width - 1)

    @property
    def minimum(self) -> int:
        return self._seg[1] + self._lazy[1]


def _totients(limit: int) -> list[int]:
    phi = list(range(limit + 1))
    for p in range(2, limit + 1):
        if phi[p] == p:
            for multiple in range(p, limit + 1, p):
                phi[multiple] -= phi[multiple] // p
    return phi


def _divisor_lists(limit: int) -> list[list[int]]:
    divisors: list[list[int]] = [[] for _ in range(limit + 1)]
    for d in range(1, limit + 1):
        for multiple in range(d, limit + 1, d):
            divisors[multiple].append(d)
    return divisors


class PartitionCosts:
    """Minimum cost of splitting 1..n into at most k consecutive pieces.

    A piece [l, r] costs the number of pairs l <= a <= b <= r with
    gcd(a, b) >= l. Piece counts above *max_pieces* are treated as
    *max_pieces*, which is exact once 2**max_pieces exceeds *limit*.
    """

    def __init__(self, limit: int, max_pieces: int = 18) -> None:
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        if max_pieces < 1:
            raise ValueError(f"max_pieces must be positive, got {max_pieces}")
        self.limit = limit
        self.max_pieces = max_pieces
        self._layers = self._build()

    def _build(self) -> list[list[int]]:
        limit = self.limit
        phi = _totients(limit)
        divisors = _divisor_lists(limit)
        layers = [[i * (i + 1) // 2 for i in range(limit + 1)]]
        for _ in range(2, self.max_pieces + 1):
            previous = layers[-1]
            tree = _PrefixAddMinTree(limit + 1)
            current = [0] * (limit + 1)
            for i in range(1, limit + 1):
                tree.assign(i - 1, previous[i - 1])
                for d in divisors[i]:
                    # phi(i/d) numbers x <= i have gcd(x, i) == d
                    tree.add_prefix(d - 1, phi[i // d])
                current[i] = tree.minimum
            layers.append(current)
        return layers

    def cost(self, n: int, k: int) -> int:
        """Return the minimum cost of splitting 1..n into at most *k* pieces."""
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must be between 0 and {self.limit}, got {n}")
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        return self._layers[min(k, self.max_pieces) - 1][n]


def modular_mode(x: int, y: int) -> int:
    """Return some n with n mod x == y mod n, for positive even x and y."""
    if x < 1 or y < 1:
        raise ValueError(f"x and y must be positive, got {x} and {y}")
    if x > y:
        return x + y
    k = y // x
    return (k * x + y) // 2