# dailypuzzles

Compact solutions to classic algorithm puzzles, grouped into modules by
technique. The package is a plain library with no runtime dependencies and
no command-line interface.

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

| Module | Contents |
| --- | --- |
| `dailypuzzles.structures` | `TreeNode`, `ListNode`, `build_tree`, `build_list`, `list_values` |
| `dailypuzzles.strings` | `is_valid_parentheses`, `remove_stars`, `simplify_path`, `merge_alternately`, `predict_party_victory`, `max_vowels`, `buddy_strings`, `max_consecutive_answers`, `largest_variance` |
| `dailypuzzles.arrays` | `check_straight_line`, `can_make_arithmetic_progression`, `count_negatives`, `next_greatest_letter`, `summary_ranges`, `largest_altitude`, `get_averages`, `kids_with_candies`, `average_salary`, `array_sign`, `find_difference`, `diagonal_sum`, `spiral_order`, `generate_matrix`, `min_subarray_len` |
| `dailypuzzles.arithmetic` | `min_flips`, `max_value`, `min_cost`, `add_digits`, `bulb_switch`, `single_number`, `new21_game`, `max_gcd_score` |
| `dailypuzzles.trees` | `get_minimum_difference`, `max_level_sum`, `longest_zigzag`, `width_of_binary_tree` |
| `dailypuzzles.linked_lists` | `swap_nodes`, `swap_pairs`, `pair_sum` |
| `dailypuzzles.heaps` | `last_stone_weight`, `top_k_frequent`, `max_subsequence_score`, `KthLargest`, `SmallestInfiniteSet` |
| `dailypuzzles.disjoint` | `UnionFind`, `is_similar`, `num_similar_groups`, `distance_limited_paths_exist`, `max_num_edges_to_remove` |
| `dailypuzzles.graphs` | `shortest_path_binary_matrix`, `maximum_detonation`, `num_of_minutes`, `find_circle_num`, `can_finish`, `find_smallest_set_of_vertices`, `is_bipartite`, `calc_equation`, `shortest_bridge` |
| `dailypuzzles.systems` | `SnapshotArray`, `ParkingSystem`, `HashSet`, `UndergroundSystem` |
| `dailypuzzles.counting` | counts taken modulo `MOD` (1 000 000 007): `num_of_bst_orderings`, `count_paths`, `num_ways_to_form_target`, `profitable_schemes`, `number_of_arrays`, `num_subseq`, `count_good_strings` |
| `dailypuzzles.dynamic` | `make_array_increasing`, `longest_palindrome_subseq`, `max_value_of_coins`, `min_insertions`, `longest_obstacle_course`, `max_uncrossed_lines`, `most_points`, `stone_game_ii`, `stone_game_iii`, `min_cost_to_cut` |

## Examples

```python
from dailypuzzles.strings import simplify_path, is_valid_parentheses
from dailypuzzles.arrays import spiral_order
from dailypuzzles.structures import build_tree
from dailypuzzles.trees import max_level_sum
from dailypuzzles.heaps import KthLargest
from dailypuzzles.systems import UndergroundSystem

simplify_path("/home//foo/../bar/")         # "/home/bar"
is_valid_parentheses("([]{})")               # True
spiral_order([[1, 2, 3], [4, 5, 6]])          # [1, 2, 3, 6, 5, 4]

root = build_tree([1, 7, 0, 7, -8, None, None])
max_level_sum(root)                           # 2

kth = KthLargest(3, [4, 5, 8, 2])
kth.add(3)                                    # 4

metro = UndergroundSystem()
metro.check_in(1, "A", 3)
metro.check_out(1, "B", 8)
metro.get_average_time("A", "B")              # 5.0
```

Trees are built from level-order lists where `None` marks a missing child;
linked lists are built from and flattened back to plain Python lists with
`build_list` and `list_values`.

## Errors

Inputs that have no answer raise rather than return a sentinel. For example,
`remove_stars` raises `ValueError` for a star with nothing to its left,
`average_salary` needs at least three salaries, `swap_nodes` raises
`IndexError` when `k` is outside the list, `UnionFind` and `SnapshotArray`
raise `IndexError` for out-of-range elements, `HashSet` accepts only keys from
0 to `MAX_HASH_KEY`, and `UndergroundSystem` raises `KeyError` for a card that
is not checked in or a route with no finished journeys. Where a puzzle itself
defines a "no answer" value, such as `-1` from `shortest_path_binary_matrix`
or `make_array_increasing`, that value is returned.