# dsakit

A library of classic algorithms and data structures, written in plain Python
with no third-party dependencies, plus a small `dsakit` command with a few
console utilities.

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

- `dsakit.arrays` – `two_sum`, `merge_sorted`, `concatenate`,
  `remove_duplicates`, `is_subset`, `difference`, `missing_in_range`,
  `missing_number`, `h_index`, `frequencies`, `four_sum`, `three_sum`,
  `add_digit_arrays`, `can_pair`, `merge_intervals`.
- `dsakit.searching` – `search_insert`, `find_in_sorted_grid`,
  `grid_contains`, `flat_matrix_contains`, `integer_sqrt`, `fixed_point`,
  `min_max_daily_time`.
- `dsakit.sorting` – `bubble_sort`, `insertion_sort`, `radix_sort`
  (non-negative integers only) and `count_smaller`, which counts the smaller
  values to the right of each position.
- `dsakit.dynamic` – `climb_stairs`, `count_change_ways`, `edit_distance`,
  `max_profit_with_cooldown`, `nth_ugly_number`, `count_texts`,
  `task_scheduler_days`, `cut_rod`, `longest_increasing_subsequence`,
  `max_envelopes`.
- `dsakit.numbers` – `power`, `power_mod`, `minimize_xor`,
  `concatenated_binary`, `pascal_triangle`, `rectangle_ways`, `digit_sum`.
- `dsakit.graphs` – `adjacency_from_edges`, `bfs_matrix`, `bfs_order`,
  `dfs_order`, `dijkstra` (unreachable vertices get `None`), `kruskal`,
  `is_star`, `flood_fill` (returns a new grid).
- `dsakit.backtracking` – `combination_sum`, `n_queens` (boards as flat
  row-major 0/1 lists), `subsequences`, `permutations`.
- `dsakit.linked` – `ListNode`, `has_cycle`, `reverse_list`; `LinkedList`
  with `push_front`, `push_back`, `pop_front`, `pop_back`, `middle`,
  `reverse` and `sum`; `CircularList` with `insert` (0-based index) and
  `delete` (1-based position); `CircularQueue`, a bounded FIFO with
  `enqueue`, `dequeue`, `front`, `rear`, `is_empty` and `is_full`.
- `dsakit.trees` – `TreeNode`; `BinarySearchTree` with `insert` (duplicates
  raise `ValueError`), `search`, `delete`, `inorder`, `preorder`,
  `postorder`, `height`, `predecessor` and `successor`; `add_one_row` and
  `time_to_burn`.
- `dsakit.strings` – `is_palindrome` (ASCII letters and digits only, case
  ignored) and `has_overlapping_ab_ba`.
- `dsakit.diagonal` – `DiagonalMatrix`, an `n` by `n` matrix indexed from 1
  as `m[i, j]` that stores only its diagonal; `rows()` gives the full matrix.
- `dsakit.cli` – `kelvin_to_celsius`, `celsius_to_kelvin`,
  `double_triangle`, `ascii_code`, `guess_feedback` and the `main` entry
  point.

Invalid arguments raise `ValueError`, `IndexError` or `KeyError` as fits the
call.

## Example

```python
from dsakit.arrays import two_sum, merge_intervals
from dsakit.dynamic import edit_distance
from dsakit.graphs import adjacency_from_edges, bfs_order

two_sum([2, 7, 11, 15], 9)                  # [0, 1]
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
edit_distance("horse", "ros")               # 3

graph = adjacency_from_edges(4, [(0, 1), (1, 2), (2, 3)])
bfs_order(graph)                            # [0, 1, 2, 3]
```

## Command line

```
dsakit to-celsius 300       # Kelvin to Celsius
dsakit to-kelvin 25         # Celsius to Kelvin
dsakit triangle 5           # hourglass of stars; rows must be odd
dsakit ascii A              # character code (defaults to "A")
dsakit guess                # guess a number between 1 and 100
dsakit guess --secret 42    # same, with a fixed number
```

The command exits with status 1 and a message on standard error when given
invalid input, and the guessing game exits with status 1 if input ends before
the number is found.

## What it does not do

There is no text-editor data structure in this package; the collection covers
the modules listed above only.