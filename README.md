# algodrills

Small, self-contained solutions to well-known algorithm exercises, each written
as a plain Python function or class. Useful for studying techniques such as two
pointers, sliding windows, heaps, union-find, topological sorting and tree
traversal, or for checking your own answers.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
python -m pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.numbers` | `reverse_digits`, `is_same_after_reversals`, `add_binary`, `convert_to_base7`, `get_no_zero_integers`, `hamming_distance`, `is_happy`, `int_to_roman`, `maximum_69_number`, `get_maximum_xor`, `get_maximum_generated`, `climb_stairs` |
| `algodrills.search` | `binary_search`, `find_radius`, `find_kth_largest`, `majority_element` |
| `algodrills.min_stack` | `MinStack` with `push`, `pop`, `top`, `get_min` and `len()` |
| `algodrills.strings` | `is_subsequence`, `length_of_last_word`, `longest_common_prefix`, `length_of_longest_substring`, `group_anagrams`, `minimum_recolors` |
| `algodrills.greedy` | `max_profit`, `max_profit_with_fee`, `can_complete_circuit`, `get_last_moment`, `maximum_units`, `min_domino_rotations` |
| `algodrills.arrays` | `three_sum`, `can_reorder_doubled`, `contains_pattern`, `duplicate_zeros`, `find_disappeared_numbers`, `maximum_product`, `minimum_abs_difference`, `merge_intervals`, `total_fruit`, `count_servers` |
| `algodrills.combinations` | `combination_sum2`, `k_smallest_pairs`, `num_teams` |
| `algodrills.grids` | `num_rook_captures`, `min_area_rect` |
| `algodrills.graph_degrees` | `find_center`, `find_judge` |
| `algodrills.trees` | `TreeNode`, `build_tree`, `inorder_traversal`, `average_of_subtree`, `lowest_common_ancestor`, `max_ancestor_diff`, `merge_trees`, `min_depth` |
| `algodrills.bst` | `balance_bst`, `sorted_array_to_bst`, `lowest_common_ancestor_bst`, `get_minimum_difference` |
| `algodrills.graphs` | `find_order`, `valid_path`, `is_bipartite`, `can_visit_all_rooms` |
| `algodrills.linked_lists` | `ListNode`, `from_values`, `to_values`, `add_two_numbers`, `merge_two_lists`, `middle_node` |
| `algodrills.multilevel` | `Node`, `flatten` |

## Examples

```python
from algodrills.numbers import int_to_roman, add_binary
from algodrills.arrays import three_sum, merge_intervals
from algodrills.min_stack import MinStack
from algodrills.trees import build_tree, inorder_traversal
from algodrills.linked_lists import from_values, to_values, add_two_numbers

int_to_roman(1994)                 # 'MCMXCIV'
add_binary("11", "1")              # '100'
three_sum([-1, 0, 1, 2, -1, -4])   # [[-1, -1, 2], [-1, 0, 1]]
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                    # 1

root = build_tree([1, None, 2, 3])
inorder_traversal(root)            # [1, 3, 2]

total = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
to_values(total)                   # [7, 0, 8]
```

`build_tree` takes values in level order, with `None` for a missing child.

## Things to know

- Some functions change what they are given: `duplicate_zeros` rewrites its
  list in place and returns `None`; `merge_trees` adds the second tree into the
  first; `balance_bst`, `merge_two_lists` and `flatten` relink the existing
  nodes rather than copying them.
- Inputs that have no answer raise `ValueError` (for example an empty list for
  `majority_element`, or `k` out of range for `find_kth_largest`);
  `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack.

## What it does not do

This is a library of functions only. It has no command-line program, reads no
files and keeps no state between calls beyond the objects you pass in.