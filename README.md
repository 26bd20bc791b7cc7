# solvekit

Plain-Python solutions to a set of well-known algorithm problems, grouped by
the kind of data they work on. The package has no runtime dependencies and
needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `solvekit.arrays` | `three_sum`, `next_permutation`, `can_jump`, `set_zeroes`, `max_profit`, `max_profit_two_transactions`, `min_candies`, `count_subarray_ors`, `total_fruit`, `longest_ones_after_deletion`, `maximum_unique_subarray`, `maximum_difference`, `max_color_distance`, `partition_array`, `match_players_and_trainers`, `longest_max_and_subarray`, `min_swap_cost`, `divide_array`, `max_unique_sum` |
| `solvekit.strings` | `longest_palindrome`, `make_fancy_string`, `maximum_gain`, `is_valid_word`, `kth_character`, `max_manhattan_distance`, `generate_tag` |
| `solvekit.combinatorics` | `get_permutation`, `pascal_row`, `pascal_triangle`, `count_good_arrays` (modulo `MOD` = 1_000_000_007), `reordered_power_of_2`, `maximum_69_number`, `min_max_difference` |
| `solvekit.probability` | `soup_servings`, `new21_game` |
| `solvekit.subsets` | `can_partition`, `last_stone_weight_ii` |
| `solvekit.heaps` | `MedianFinder` (`add_num`, `find_median`), `find_maximized_capital`, `k_smallest_pair_sums`, `kth_smallest_matrix_sum` |
| `solvekit.grids` | `unique_paths_with_obstacles`, `word_exists`, `count_islands`, `flood_fill`, `minimum_area` |
| `solvekit.linked` | `ListNode`, `from_values`, `to_values`, `partition_list`, `has_cycle` |
| `solvekit.trees` | `TreeNode`, `build_from_preorder_inorder`, `build_from_inorder_postorder`, `is_balanced`, `count_complete_nodes`, `lowest_common_ancestor`, `find_target`, `width_of_tree`, `distance_k` |
| `solvekit.graphs` | `GraphNode`, `DisjointSet` (`find`, `union_by_size`, `union_by_rank`), `clone_graph`, `accounts_merge`, `make_connected` |

## Examples

```python
from solvekit.arrays import three_sum, can_jump
from solvekit.strings import longest_palindrome
from solvekit.heaps import MedianFinder
from solvekit.linked import from_values, to_values, partition_list

three_sum([-1, 0, 1, 2, -1, -4])      # [[-1, -1, 2], [-1, 0, 1]]
can_jump([3, 2, 1, 0, 4])             # False
longest_palindrome("cbbd")            # "bb"

finder = MedianFinder()
for value in (1, 2, 3):
    finder.add_num(value)
finder.find_median()                  # 2.0

head = partition_list(from_values([1, 4, 3, 2, 5, 2]), 3)
to_values(head)                       # [1, 2, 2, 4, 3, 5]
```

## Notes on behaviour

- `next_permutation`, `set_zeroes` and `flood_fill` change the list they are
  given; `partition_list` relinks the nodes it is given. `flood_fill` also
  returns the image.
- Invalid input is reported with `ValueError`: for example an empty list
  passed to `max_profit`, `maximum_difference`, `longest_max_and_subarray` or
  `max_unique_sum`, a `k` out of range in `get_permutation`,
  `count_good_arrays`, `kth_character` or `kth_smallest_matrix_sum`, asking a
  `MedianFinder` for a median before any number was added, a traversal value
  missing from the inorder sequence when rebuilding a tree, and calling
  `to_values` on a list with a cycle.
- Tree, list and graph nodes compare by identity, so they can be used as
  dictionary keys and passed as `p`, `q` or `target` arguments.

## What it does not do

solvekit is a library only: it has no command-line program, and it reads no
input files. Build inputs in Python (for lists, `from_values`; for trees,
`TreeNode` or the `build_from_*` functions) and call the functions directly.