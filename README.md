# algobook

Classic textbook algorithms and data structures in plain Python, with no
third-party dependencies.

## Contents

- `algobook.sorting`: `insertion_sort`, `insertion_sort_recursive`,
  `shell_sort`, `bubble_sort`, `selection_sort`, `merge_sort`, `heap_sort`,
  `quick_sort` and `counting_sort`. Each takes any iterable and returns a new
  sorted list; the input is left unchanged. `counting_sort` accepts only
  non-negative integers and raises `ValueError` otherwise. `partition` and
  `randomized_partition` work in place on a mutable sequence and return the
  pivot's final index.
- `algobook.selection`: `randomized_select(items, i, rng=None)` returns the
  i-th smallest item (1-based).
- `algobook.dynamic`: rod cutting (`cut_rod`, `memoized_cut_rod`,
  `bottom_up_cut_rod`, where `prices[i]` is the price of length `i`), longest
  common subsequence (`lcs_tables`, `longest_common_subsequence`), Fibonacci
  numbers (`fibonacci_iterative`, `fibonacci_recursive`,
  `fibonacci_top_down`) and 0/1 knapsack (`knapsack`, `knapsack_memoized`
  over a sequence of `KnapsackItem(size, value)`).
- `algobook.greedy`: `recursive_activity_selector` and
  `greedy_activity_selector`; index 0 of the start and finish sequences is a
  placeholder and activities must be sorted by finish time.
- `algobook.subarray`: `find_max_subarray` (divide and conquer),
  `find_max_subarray_brute_force` and `find_max_crossing_subarray` return a
  `Subarray(low, high, total)`; `find_max_subarray_kadane` returns the best
  sum, counting the empty subarray as 0.
- `algobook.geometry`: `Point`, `direction`, `on_segment`,
  `segments_intersect`, `check_angle`, `polar_angle`, and convex hulls by
  `jarvis_scan` and `graham_scan`.
- `algobook.matrix`: `lu_decomposition` (no pivoting), `solve_lower_upper`,
  `solve_lu`, `transpose`, `multiply`, `inverse` and `least_squares_fit`
  for polynomial coefficients.
- `algobook.substring`: `naive_string_matcher(text, pattern)` returns the
  first match index or -1.
- `algobook.structures`: linked-list `Node` (with `insert_after`,
  `delete_after`, `cycle`) and `reverse_cycle`; bounded `Stack`,
  `LinkedStack`, `Queue`, bounded circular `ArrayQueue`, bounded
  `PriorityQueue` with `pop_max`; `BinaryTree` with the generators
  `preorder`, `preorder_stack` and `level_order`, plus `count` and `height`.
- `algobook.symbol_tables`: `Record` (key `MAX_KEY` means null, and
  `Record.random` makes a random one), `DistributedTable`,
  `SequentialTable` (with `binary_search`), `LinkedTable`,
  `BinarySearchTree` (with `insert_at_root`, `keys` and `join`),
  `HashTable` with linear probing, and `hash_string`.
- `algobook.graphs`: `Edge`, `DenseGraph`, `SparseMultiGraph`, `edges`,
  `format_graph`, `random_graph`, `SimplePath`, `HamiltonPath`,
  `Bipartite`, `BreadthFirstSearch`, `WeightedEdge` and
  `WeightedDenseGraph`.
- `algobook.examples`: `josephus`, `evaluate_postfix`, `infix_to_postfix`
  and the command-line entry `main`.

Empty stacks and queues raise `IndexError` when popped; bounded containers
raise `OverflowError` when full.

## Installation

```
pip install .
```

## Usage

```python
from algobook.sorting import merge_sort
from algobook.dynamic import longest_common_subsequence
from algobook.geometry import Point, graham_scan

print(merge_sort([5, 2, 9, 1]))  # [1, 2, 5, 9]

print(longest_common_subsequence([0, 1, 2, 1, 3, 0, 1], [1, 3, 2, 0, 1, 0]))

hull = graham_scan([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(5, 5)])
print(hull)
```

The modules `sorting`, `selection`, `dynamic`, `greedy`, `subarray`,
`geometry`, `matrix` and `substring` each provide `run_benchmark`, which
runs the module's algorithms side by side and returns a `BenchmarkResult`
holding the timings and whether the outputs agreed.

## Command line

Run the data-structure and graph examples:

```
algobook-examples
```

Options:

- `--seed N` seeds the random data.
- `--benchmarks` also runs and prints every module's benchmark first.

The command exits with status 0 when every check passes and 1 otherwise.

## Tests

```
pip install .[test]
pytest
```