from itertools import combinations, permutations

import pytest

from algokit.recursion import n_queens, next_permutation, subsequences, tower_of_hanoi


def _is_valid_placement(cols):
    n = len(cols)
    return (
        len(set(cols)) == n
        and len({row - col for row, col in enumerate(cols)}) == n
        and len({row + col for row, col in enumerate(cols)}) == n
    )


def test_subsequences_of_empty_string():
    assert subsequences("") == [""]


def test_subsequences_cover_all_combinations():
    text = "abcd"
    result = subsequences(text)
    assert len(result) == 2 ** len(text)
    expected = {
        "".join(combo)
        for size in range(len(text) + 1)
        for combo in combinations(text, size)
    }
    assert set(result) == expected


def test_subsequences_order_puts_first_char_last():
    text = "xyz"
    result = subsequences(text)
    half = len(result) // 2
    assert result[0] == ""
    assert result[-1] == text
    assert all(not s.startswith("x") for s in result[:half])
    assert all(s.startswith("x") for s in result[half:])
    assert [s[1:] for s in result[half:]] == result[:half]


def test_n_queens_four():
    assert n_queens(4) == [(1, 3, 0, 2), (2, 0, 3, 1)]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_no_solution(n):
    assert n_queens(n) == []


def test_n_queens_trivial_boards():
    assert n_queens(0) == [()]
    assert n_queens(1) == [(0,)]


@pytest.mark.parametrize("n", [4, 5, 6, 7])
def test_n_queens_complete_valid_and_ordered(n):
    solutions = n_queens(n)
    assert all(_is_valid_placement(cols) for cols in solutions)
    assert solutions == sorted(solutions)
    expected = {p for p in permutations(range(n)) if _is_valid_placement(p)}
    assert set(solutions) == expected
    assert len(solutions) == len(expected)


def test_n_queens_negative():
    with pytest.raises(ValueError):
        n_queens(-1)


@pytest.mark.parametrize("n", [0, 1, 3, 5])
def test_hanoi_moves_are_legal_and_complete(n):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(tower_of_hanoi(n, "A", "C", "B"))
    assert len(moves) == 2**n - 1
    for move in moves:
        disk = pegs[move.source].pop()
        assert disk == move.disk
        if pegs[move.target]:
            assert pegs[move.target][-1] > disk
        pegs[move.target].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_hanoi_move_text():
    first = next(tower_of_hanoi(3, "A", "C", "B"))
    assert str(first) == "Move disk 1 from rod A to rod C"


def test_hanoi_negative():
    with pytest.raises(ValueError):
        list(tower_of_hanoi(-2))


def test_next_permutation_example():
    assert next_permutation([1, 2, 3, 6, 5, 4]) == [1, 2, 4, 3, 5, 6]


def test_next_permutation_does_not_mutate():
    data = [3, 1, 2]
    next_permutation(data)
    assert data == [3, 1, 2]


def test_next_permutation_walks_all_orders():
    ordered = list(permutations([1, 2, 3, 4]))
    for current, following in zip(ordered, ordered[1:]):
        assert next_permutation(current) == list(following)
    assert next_permutation(ordered[-1]) == list(ordered[0])


def test_next_permutation_with_duplicates_wraps():
    assert next_permutation([2, 2, 1]) == [1, 2, 2]