# puzzlekit

Compact Python solutions to well-known algorithmic puzzles, grouped by theme.
Everything is plain functions and a few small classes. The package has no
runtime dependencies.

## Installation

```
pip install .
```

## Modules

- `puzzlekit.numbers`: `reverse_integer`, `is_palindrome`, `check_record`,
  `pivot_integer`
- `puzzlekit.strings`: `roman_to_int`, `find_lus_length`, `reverse_str`,
  `fraction_addition`, `check_valid_string`, `custom_sort_string`,
  `max_unique_concat_length`, `reverse_prefix`, `score_of_string`
- `puzzlekit.structures`: the `ListNode` and `TreeNode` dataclasses,
  `delete_node`, `smallest_from_leaf`
- `puzzlekit.search`: `word_exists` (grid word search) and `open_lock`
  (fewest turns of a four-wheel combination lock)
- `puzzlekit.arrays`: `two_sum`, `search_insert`, `rotate`,
  `find_max_average`, `binary_search`, `count_subarrays_with_sum`,
  `sort_by_parity`, `lucky_numbers`, `special_array`,
  `count_identical_pairs`, `is_sorted_and_rotated`,
  `maximum_happiness_sum`, `min_operations_to_empty`,
  `min_operations_to_xor`
- `puzzlekit.combinatorics`: `DisjointSet` (union-find with `find` and
  `union`), `smallest_prime_factors`, `beautiful_subsets`,
  `can_traverse_all_pairs`

## Examples

```python
from puzzlekit.strings import roman_to_int, fraction_addition
from puzzlekit.search import open_lock
from puzzlekit.arrays import search_insert, rotate
from puzzlekit.combinatorics import DisjointSet

roman_to_int("MCMXCIV")                 # 1994
fraction_addition("-1/2+1/2+1/3")       # "1/3"
open_lock(["0201", "0101", "0102", "1212", "2002"], "0202")  # 6
search_insert([1, 3, 5, 6], 2)          # 1

nums = [1, 2, 3, 4, 5]
rotate(nums, 2)                         # rotates in place
nums                                    # [4, 5, 1, 2, 3]

groups = DisjointSet(4)
groups.union(0, 1)                      # True
groups.union(1, 0)                      # False, already joined
```

## Behaviour worth knowing

- `rotate` and `delete_node` change their argument in place and return `None`.
  `delete_node` raises `ValueError` when given the tail of a list.
- Invalid input raises `ValueError`, for example a non-positive `k` in
  `reverse_str`, a malformed expression in `fraction_addition`, a window
  length out of range in `find_max_average`, or an empty list in
  `is_sorted_and_rotated` and `can_traverse_all_pairs`.
- `reverse_integer` returns 0 when the reversed value does not fit in a signed
  32-bit integer, and `check_record` counts modulo 10**9 + 7.

The package is a library only: it offers no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```