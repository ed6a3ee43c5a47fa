"""Small contest puzzles."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from itertools import count, islice
from math import isqrt

_DISLIKE_TABLE_SIZE = 1000
_PRIME_LIMIT = 10000


@lru_cache(maxsize=1)
def _disliked_table() -> tuple[int, ...]:
    liked = (j for j in count(1) if j % 3 != 0 and j % 10 != 3)
    return tuple(islice(liked, _DISLIKE_TABLE_SIZE))


def dislike_of_three(k: int) -> int:
    """Return the k-th positive integer neither divisible by 3 nor ending in 3.

    *k* is 1-based and at most 1000.
    """
    if not 1 <= k <= _DISLIKE_TABLE_SIZE:
        raise ValueError(f"k must be between 1 and {_DISLIKE_TABLE_SIZE}, got {k}")
    return _disliked_table()[k - 1]


def infinity_table_cell(k: int) -> tuple[int, int]:
    """Return the (row, column) where the number *k* sits in the infinite table."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    t = isqrt(k)
    if t * t == k:
        return t, 1
    offset = k - t * t
    if offset <= t + 1:
        return offset, t + 1
    return t + 1, 2 * t + 2 - offset


def opposite_person(a: int, b: int, c: int) -> int:
    """Return who faces person *c* in a circle where *a* faces *b*, or -1."""
    n = 2 * abs(a - b)
    if n < a or n < b:
        n = 0
    if n < c:
        return -1
    if n >= 2 * c:
        return n // 2 + c
    return c - n // 2


def primes_below(limit: int) -> list[int]:
    """Return all primes p with 2 <= p < limit, in increasing order."""
    if limit <= 2:
        return []
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(limit - 1) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return [n for n, flag in enumerate(sieve) if flag]


@lru_cache(maxsize=1)
def _waiter_primes() -> tuple[int, ...]:
    return tuple(primes_below(_PRIME_LIMIT))


def waiter(numbers: Iterable[int], q: int) -> list[int]:
    """Sort plates by repeatedly splitting a stack on divisibility by primes.

    The last element of *numbers* is the top of the stack. On iteration i each
    plate is taken off the top; those divisible by the i-th prime go onto
    stack B, the rest onto stack A. B is then emptied top-first into the
    answer and A becomes the working stack. Whatever remains at the end is
    emptied top-first into the answer.
    """
    primes = _waiter_primes()
    if not 0 <= q <= len(primes):
        raise ValueError(f"q must be between 0 and {len(primes)}, got {q}")
    stack = list(numbers)
    result: list[int] = []
    for prime in primes[:q]:
        kept: list[int] = []
        divisible: list[int] = []
        while stack:
            plate = stack.pop()
            (divisible if plate % prime == 0 else kept).append(plate)
        stack = kept
        result.extend(reversed(divisible))
    result.extend(reversed(stack))
    return result