from collections import Counter

import pytest

from algokit.puzzles import (
    dislike_of_three,
    infinity_table_cell,
    opposite_person,
    primes_below,
    waiter,
)


def _liked(n):
    return n % 3 != 0 and n % 10 != 3


def test_dislike_of_three_first_value():
    assert dislike_of_three(1) == 1


def test_dislike_of_three_last_value():
    assert dislike_of_three(1000) == 1666


def test_dislike_of_three_sequence_is_complete():
    values = [dislike_of_three(k) for k in range(1, 201)]
    assert values == sorted(set(values))
    assert all(_liked(v) for v in values)
    for low, high in zip(values, values[1:]):
        assert not any(_liked(n) for n in range(low + 1, high))


@pytest.mark.parametrize("k", [0, -3, 1001])
def test_dislike_of_three_out_of_range(k):
    with pytest.raises(ValueError):
        dislike_of_three(k)


def test_infinity_table_small_values():
    assert infinity_table_cell(1) == (1, 1)
    assert infinity_table_cell(11) == (2, 4)


@pytest.mark.parametrize("t", [1, 2, 5, 17, 1000])
def test_infinity_table_perfect_squares_in_first_column(t):
    assert infinity_table_cell(t * t) == (t, 1)


@pytest.mark.parametrize("n", [1, 3, 6])
def test_infinity_table_fills_square(n):
    cells = [infinity_table_cell(k) for k in range(1, n * n + 1)]
    assert set(cells) == {(r, c) for r in range(1, n + 1) for c in range(1, n + 1)}
    assert len(set(cells)) == len(cells)


def test_infinity_table_rejects_non_positive():
    with pytest.raises(ValueError):
        infinity_table_cell(0)


def test_opposite_person_found():
    assert opposite_person(6, 2, 4) == 8


@pytest.mark.parametrize("a,b,c", [(2, 3, 1), (2, 4, 10)])
def test_opposite_person_impossible(a, b, c):
    assert opposite_person(a, b, c) == -1


def test_opposite_person_is_involution_on_valid_circle():
    a, b = 6, 2
    n = 2 * abs(a - b)
    for c in range(1, n + 1):
        d = opposite_person(a, b, c)
        assert 1 <= d <= n
        assert opposite_person(a, b, d) == c


def test_primes_below_small_limits():
    assert primes_below(2) == []
    assert primes_below(0) == []


def test_primes_below_are_primes_and_complete():
    limit = 500
    primes = primes_below(limit)
    assert primes == sorted(primes)
    for p in primes:
        assert all(p % q != 0 for q in primes if q < p)
    prime_set = set(primes)
    for n in range(2, limit):
        if n not in prime_set:
            assert any(n % q == 0 for q in primes if q < n)


def test_waiter_example():
    assert waiter([3, 4, 7, 6, 5], 1) == [4, 6, 3, 7, 5]


def test_waiter_zero_iterations_reverses():
    numbers = [4, 9, 1, 7]
    assert waiter(numbers, 0) == numbers[::-1]


@pytest.mark.parametrize("q", [1, 2, 3, 5])
def test_waiter_is_permutation(q):
    numbers = [2, 3, 4, 5, 6, 7, 10, 15, 21, 35]
    assert Counter(waiter(numbers, q)) == Counter(numbers)


def test_waiter_first_batch_is_divisible_by_two():
    numbers = [2, 3, 4, 5, 6, 7]
    result = waiter(numbers, 1)
    evens = [n for n in numbers if n % 2 == 0]
    assert result[: len(evens)] == evens


def test_waiter_too_many_iterations():
    with pytest.raises(ValueError):
        waiter([1, 2], 5000)