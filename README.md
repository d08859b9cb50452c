# algodrills

Small, self-contained algorithm exercises on linked lists, binary trees,
arrays, matrices, numbers, strings and text layout. Each exercise is a plain
function. The package uses only the standard library.

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
| `algodrills.linkedlist` | `ListNode` (with `from_values` and `to_list`), `partition`, `delete_duplicates`, `remove_nth_from_end`, `reverse_between`, `reverse_k_group`, `rotate_right` |
| `algodrills.trees` | `TreeNode`, `Node` (both with `from_level_order`), `has_path_sum`, `connect`, `is_same_tree`, `sum_numbers`, `is_symmetric`, `is_valid_bst` |
| `algodrills.numbers` | `hamming_weight`, `is_palindrome_number`, `reverse_bits`, `single_number`, `single_number_ii`, `my_pow`, `my_sqrt`, `plus_one`, `roman_to_int` |
| `algodrills.matrix` | `rotate_matrix`, `set_zeroes`, `spiral_order`, `is_valid_sudoku` |
| `algodrills.arrays` | `min_sub_array_len`, `product_except_self`, `remove_duplicates`, `remove_element`, `rotate`, `summary_ranges`, `three_sum`, `two_sum`, `two_sum_sorted`, `longest_consecutive` |
| `algodrills.strings` | `reverse_words`, `simplify_path`, `is_subsequence`, `is_anagram`, `is_valid_parentheses`, `is_palindrome`, `word_pattern`, `word_break`, `zigzag_convert` |
| `algodrills.text` | `find_substring`, `full_justify` |

## Examples

Linked lists are built from, and turned back into, Python lists:

```python
from algodrills.linkedlist import ListNode, reverse_k_group

head = ListNode.from_values([1, 2, 3, 4, 5])
print(reverse_k_group(head, 2).to_list())   # [2, 1, 4, 3, 5]
```

Binary trees are built from a heap-indexed list (the children of slot `i`
are at `2i+1` and `2i+2`), with `None` marking an empty slot:

```python
from algodrills.trees import TreeNode, is_symmetric

root = TreeNode.from_level_order([1, 2, 2, 3, 4, 4, 3])
print(is_symmetric(root))   # True
```

Arrays, strings and text:

```python
from algodrills.arrays import summary_ranges
from algodrills.strings import simplify_path
from algodrills.text import full_justify

print(summary_ranges([0, 1, 2, 4, 5, 7]))        # ['0->2', '4->5', '7']
print(simplify_path("/home//foo/"))              # /home/foo
print(full_justify(["What", "must", "be"], 16))  # ['What must be    ']
```

## Behaviour worth knowing

- Some functions work in place: `rotate_matrix` and `set_zeroes` change the
  matrix, and `rotate` changes the list. `remove_element` shortens the list
  and returns its new length. `remove_duplicates` moves the kept values
  (at most two of each run) to the front and returns how many there are;
  the elements after them are left as they were.
- The linked-list functions relink the nodes they are given and return the
  new head.
- `connect` fills in the `next` pointers of a `Node` tree and returns its
  root.
- Invalid input raises an exception rather than returning a marker value:
  for example `two_sum` and `two_sum_sorted` raise `ValueError` when no pair
  adds up to the target, `my_sqrt` raises `ValueError` for a negative
  number, `my_pow` raises `ZeroDivisionError` for zero to a negative power,
  and `roman_to_int` raises `ValueError` for an unknown symbol.

## What the package does not do

It is a library of functions only: there is no command-line program, and
nothing is read from or written to files.