# algokit

Classic algorithms and small data structures in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.recursion`

- `subsequences(text)`: all `2**len(text)` subsequences; those without the
  first character come first, then the same ones with it prepended.
- `n_queens(n)`: every placement of `n` non-attacking queens, each a tuple of
  column indices by row, in search order. Raises `ValueError` for negative `n`.
- `tower_of_hanoi(n, source="A", target="C", auxiliary="B")`: a generator of
  `Move(disk, source, target)` tuples; `str(move)` gives
  `"Move disk 1 from rod A to rod C"`.
- `next_permutation(items)`: the lexicographically next permutation as a new
  list; the last permutation wraps around to the sorted one.

### `algokit.searching`

- `binary_search(items, key)` and `binary_search_recursive(items, key)`:
  return whether `key` is in the ascending sequence `items`.

### `algokit.arrays`

- `StockSpanner`: `next(price)` records a price and returns its span, the
  number of consecutive days up to today whose price was not higher.
- `sliding_window_max(values, k)`: maximum of each window of length `k`.
- `top_two(values)`: the largest value and the largest one strictly below it
  (`-1` if there is none).
- `max_subarray_sum(values)`: largest contiguous sum, with the empty run as 0.
- `product_except_self(values)`: product of all other values per position.
- `selection_sort(values)`: a sorted new list.
- `has_pair_with_sum(first, second, target)`: whether `a + b == target` for
  some `a` in `first` and `b` in `second`.
- `reverse_words(text)`: the space-separated words in reverse order.
- `repeat_value(count, value)`: a list of `count` copies of `value`.
- `vector_summary(values)`: a `VectorSummary` holding the values, their sorted
  form, the maximum and minimum of the sorted values without the first and the
  last two, and the total. Needs at least four values.

### `algokit.puzzles`

- `dislike_of_three(k)`: the k-th positive integer neither divisible by 3 nor
  ending in 3, for `1 <= k <= 1000`.
- `infinity_table_cell(k)`: `(row, column)` of `k` in the infinite table.
- `opposite_person(a, b, c)`: who faces `c` in a circle where `a` faces `b`,
  or `-1` if no such circle exists.
- `primes_below(limit)`: primes smaller than `limit`.
- `waiter(numbers, q)`: the plate-stacking puzzle over the first `q` primes.

### `algokit.contest`

- `PartitionCosts(limit, max_pieces=18)`: precomputes, with a segment tree,
  the minimum cost of splitting `1..n` into at most `k` consecutive pieces,
  where a piece `[l, r]` costs the number of pairs `l <= a <= b <= r` with
  `gcd(a, b) >= l`. Query with `cost(n, k)`.
- `modular_mode(x, y)`: some `n` with `n % x == y % n`, for positive even
  `x` and `y`.

### `algokit.bst`

- `BinarySearchTree`: `insert(value)`, `delete(value)`, `value in tree`, and
  `render()`, which describes each node and its children in preorder
  (`"5:L:3,R:8"`).

### `algokit.binary_tree`

- `TreeNode(value, left=None, right=None)`.
- `build_preorder(values)` and `build_level_order(values)`: build trees from
  listings in which `-1` marks a missing child.
- `render(root)`, `preorder(root)`, `level_order(root)`, `height(root)`,
  `diameter(root)` (edges), `node_diameter(root)` (nodes), `mirror(root)`,
  `contains(root, value)`, `count_nodes(root)`, `count_leaves(root)`,
  `path_to(root, value)` (values from the node up to the root, or `None`).

### `algokit.graph`

- `Graph(vertex_count)`: a directed graph with `add_edge(v, w)` and
  `bfs(start)`, which returns the breadth-first visiting order.

### `algokit.linked_list`

- `LinkedList(values)`: iteration, `len`, indexing, `+` for concatenation,
  `==`, `reversed_copy()`, and `str()` as `"| 1 |-->| 2 |"`.
- `merge_sorted(first, second)`: merge two ascending sequences into one
  ascending `LinkedList`.

### `algokit.number_types`

- `Fraction(numerator, denominator=1)`: `+`, `-`, `*`, `/` give normalized
  results; comparisons work on normalized values; `normalized()` returns the
  lowest-terms form with a positive denominator. A zero denominator raises
  `ZeroDivisionError`.
- `ComplexNumber(real, imag)`: `+`, `-`, `*`, `==`, `conjugate()`, and
  indexing (`[0]` real part, `[1]` imaginary part).

### `algokit.sets`

- `OrderedSet(values)`: distinct values in first-seen order, with `|`, `-`,
  `&`, and `<`, `<=`, `>`, `>=` as subset and superset tests. An empty set
  prints as `NULL SET`.

### `algokit.stack`

- `BoundedStack(capacity)`: `push`, `pop`, `extend`, `len` and `render()`.
  Pushing onto a full stack raises `StackOverflowError`; popping an empty one
  raises `StackUnderflowError`.

### `algokit.business`

- `HotelRoom(bedrooms, bathrooms).price()`: 50 per bedroom plus 100 per
  bathroom; `HotelApartment` costs 100 more.
- `BadLengthError(length)`: an exception carrying the offending length.
- `faculty_salary(basic, experience)` and `dean_salary(basic, experience)`.

## Example

```python
from algokit.searching import binary_search
from algokit.arrays import StockSpanner
from algokit.binary_tree import build_level_order, height

binary_search([1, 3, 5, 7], 5)          # True

spanner = StockSpanner()
[spanner.next(p) for p in (100, 80, 60, 70, 60, 75, 85)]   # [1, 1, 1, 2, 1, 4, 6]

root = build_level_order([1, 2, 3, -1, -1, -1, -1])
height(root)                            # 2
```

## What it does not do

algokit is a library only. It has no command-line programs and reads nothing
from standard input; every routine is used by importing it and passing values
in.