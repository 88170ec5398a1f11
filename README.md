# leetkit

Classic algorithm exercises written as plain Python functions and a few
small data structures. There are no runtime dependencies.

## Modules

- `leetkit.arrays`: `two_sum`, `three_sum`, `remove_element`, `trap`,
  `jump`, `can_jump`, `max_subarray`, `max_subarray_running`,
  `merge_intervals`, `range_sums`, `longest_consecutive`, `candy`,
  `min_subarray_len`, `move_zeroes`, `reverse_string`, `intersection`,
  `search`, `sorted_squares`, `sorted_squares_bubble`, `longest_ones`,
  `largest_sum_after_k_negations`, `minimum_index`,
  `max_score_sightseeing_pair`, and the `main` command below.
- `leetkit.strings`: `length_of_longest_substring`, `convert` (zigzag),
  `group_anagrams`, `reverse_words`, `is_happy`, `is_anagram`,
  `is_anagram_counts`, `find_anagrams`, `partition_labels`, `common_chars`.
- `leetkit.linked`: `ListNode` with `from_values` and `to_list`,
  `swap_pairs`, `sort_list`, `remove_elements`, `reverse_list`; the
  index-addressed `MyLinkedList` (`get`, `add_at_head`, `add_at_tail`,
  `add_at_index`, `delete_at_index`, iteration and `len`); and `LRUCache`
  (`get`, `put`).
- `leetkit.trees`: `TreeNode` with `is_valid_bst`, `level_order`,
  `max_depth`, `max_depth_recursive`, `preorder`, `preorder_iterative`,
  `invert_tree` and `diameter`.
- `leetkit.grids`: `spiral_order`, `num_islands` (depth first) and
  `num_islands_bfs` (breadth first) over grids of `"1"`/`"0"` cells.
- `leetkit.dynamic`: `unique_paths`, `unique_paths_with_obstacles`,
  `climb_stairs`, `max_profit`, `max_profit_multi`, `word_break`, `rob`,
  `rob_circle`, `fib`, `min_cost_climbing_stairs`.
- `leetkit.backtracking`: `letter_combinations`, `generate_parenthesis`,
  `combination_sum`, `permute`, `permute_by_swap`, `combine`, `subsets`,
  `partition_palindromes`, `combination_sum3`, `can_partition_k_subsets`.

Functions that need a non-empty input (for example `max_subarray`,
`max_profit`, `rob`) raise `ValueError` when given none.

## Example

```python
from leetkit.arrays import two_sum, merge_intervals
from leetkit.linked import from_values, reverse_list, to_list, LRUCache, MyLinkedList

two_sum([2, 7, 11, 15], 9)                     # (0, 1)
two_sum([1, 2], 10)                            # None
merge_intervals([[1, 3], [2, 6], [8, 10]])     # [[1, 6], [8, 10]]
to_list(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

cache = LRUCache(2)
cache.put(1, 1)
cache.get(1)   # 1
cache.get(2)   # None

items = MyLinkedList([1, 3])
items.add_at_index(1, 2)
list(items)    # [1, 2, 3]
items.get(5)   # raises IndexError
```

## Command line

`leetkit-range-sums` reads a count `n`, then `n` integers, then pairs of
indices `a b` from standard input, and prints the inclusive sum
`values[a] + ... + values[b]` of each pair on its own line. An index pair
outside the values raises `IndexError`.

```sh
printf '5\n1 2 3 4 5\n0 1\n1 3\n' | leetkit-range-sums
```

prints `3` and `9`.

## Tests

```sh
pip install -e ".[test]"
pytest
```