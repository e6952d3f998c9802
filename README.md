# drills

Small, tested implementations of classic algorithm exercises, grouped by
topic. The package has no runtime dependencies.

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

### `drills.searching`

- `binary_search(nums, target)`: the index of `target` in the sorted `nums`, or `-1` if it is not there.
- `search_insert(nums, target)`: the index of `target`, or the index where it would be inserted to keep `nums` sorted.
- `find_peak_element(nums)`: the index of an element larger than its neighbours, where positions outside the sequence count as minus infinity. Raises `ValueError` for an empty sequence.
- `first_bad_version(n, is_bad)`: the first version in `1..n` for which the monotone predicate `is_bad(version)` is true, or `n + 1` if none is.
- `two_sum_sorted(numbers, target)`: a tuple of 1-based positions of two entries of a sorted sequence that add up to `target`, or `None`.

### `drills.arrays`

- `remove_duplicates(nums)`: moves the distinct values of a sorted list to its front and returns their count `k`; `nums[:k]` then holds them in order.
- `reverse_in_place(chars)`: reverses a list in place.
- `two_sum(nums, target)`: a tuple of the indices of two entries that add up to `target`, or `None`.

### `drills.text`

- `length_of_last_word(s)`: the length of the last space-separated word, ignoring trailing spaces.
- `is_valid_brackets(s)`: whether every `(`, `[` and `{` is closed in the right order. Every character that is not an opening bracket is treated as a closer and consumes one open bracket.

### `drills.containers`

- `StackQueue`: a FIFO queue built from two stacks, with `push`, `pop`, `peek`, `is_empty` and `len()`. `pop` and `peek` raise `IndexError` on an empty queue.
- `MinStack`: a stack with `push`, `pop`, `top`, `get_min` and `len()`, each in constant time. `pop` on an empty stack does nothing; `top` and `get_min` raise `IndexError`.

### `drills.linked_list`

- `ListNode`, plus `build_list(values)` and `list_values(head)` to convert to and from Python lists.
- `has_cycle(head)`, `merge_two_lists(list1, list2)` (splices the existing nodes), `reverse_list(head)` (in place).

### `drills.tree`

- `TreeNode`, plus `build_tree(values)` and `tree_values(root)` to convert to and from level-order lists, with `None` for missing children.
- `invert_tree(root)` (in place), `max_depth(root)`, `min_depth(root)`, `is_same_tree(p, q)`, `is_symmetric(root)`.

## Example

```python
from drills.searching import binary_search
from drills.tree import build_tree, is_symmetric, max_depth

binary_search([-1, 0, 3, 5, 9, 12], 9)        # 4

root = build_tree([1, 2, 2, 3, 4, 4, 3])
is_symmetric(root)                             # True
max_depth(root)                                # 3
```

## What it does not do

The package is a library only: it has no command-line interface, and it
reads no input files.