# algokit

A small library of classic algorithms and data structures, written as plain
Python functions over lists, strings and simple node classes. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.strings` | `longest_palindrome`, `letter_combinations`, `num_decodings`, `summary_ranges` |
| `algokit.arrays` | `remove_duplicates`, `remove_element`, `search_insert`, `max_sub_array`, `plus_one`, `single_number`, `count_bits`, `pascal_row` |
| `algokit.backtracking` | `combination_sum2`, `permute`, `permute_unique`, `subsets` |
| `algokit.trie` | `Trie` (`insert`, `search`, `starts_with`), `word_break` |
| `algokit.dynamic` | `unique_paths`, `climb_stairs`, `rob`, `num_squares`, `coin_change`, `can_partition`, `min_cost_climbing_stairs`, `fib`, `divisor_game` |
| `algokit.grids` | `num_islands`, `max_area_of_island`, `flood_fill`, `count_sub_islands` |
| `algokit.nodes` | `TreeNode`, `ListNode`, `sorted_array_to_bst`, `get_intersection_node`, `nodes_between_critical_points` |
| `algokit.graphs` | `can_finish`, `find_order`, `find_circle_num`, `find_redundant_connection`, `eventual_safe_nodes`, `find_judge`, `min_cost_connect_points` |
| `algokit.heaps` | `find_kth_largest`, `find_relative_ranks`, `least_interval`, `k_closest`, `last_stone_weight` |

## Examples

```python
from algokit.strings import longest_palindrome, summary_ranges
from algokit.trie import Trie, word_break
from algokit.dynamic import coin_change
from algokit.graphs import find_order

longest_palindrome("cbbd")                  # "bb"
summary_ranges([0, 1, 2, 4, 5, 7])          # ["0->2", "4->5", "7"]
word_break("leetcode", ["leet", "code"])    # True
coin_change([1, 2, 5], 11)                  # 3
find_order(2, [[1, 0]])                     # [0, 1]

trie = Trie()
trie.insert("apple")
trie.search("app")       # False
trie.starts_with("app")  # True
```

## Notes

- `remove_duplicates` and `remove_element` change the list they are given:
  afterwards it holds only the kept values, and the functions return its new
  length.
- The grid functions leave their input grids unchanged; `flood_fill` returns a
  painted copy of the image.
- `ListNode` is iterable and yields the values from that node to the end of the
  list. `nodes_between_critical_points` returns a `(closest, farthest)` tuple,
  or `(-1, -1)` when there are fewer than two critical points.
- Where an input has no meaningful answer the functions raise `ValueError`
  (for example a negative `n` to `fib`, `count_bits` or `pascal_row`, an empty
  list to `max_sub_array`, a `k` out of range in `find_kth_largest` or
  `k_closest`, or a character that is not a keypad digit in
  `letter_combinations`). `flood_fill` raises `IndexError` for a start cell
  outside the image.

The package is a library only: it has no command-line program.