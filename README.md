# katas

Small, dependency-free solutions to classic programming exercises. They cover
arrays, strings, integers, singly linked lists and binary trees. Everything is
a plain function or a small node class; there is no command-line tool.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest for running the test suite
```

## Modules

### `katas.numeric`

- `is_palindrome_number(x)`: whether the decimal digits of `x` read the same
  reversed. Negative numbers never do.
- `plus_one(digits)`: adds one to a number given as most-significant-first
  digits and returns a new list.
- `add_binary(a, b)`: sums two binary strings. Raises `ValueError` if either
  holds anything other than `0` and `1`.
- `int_sqrt(x)`: integer square root, rounded down. Raises `ValueError` for
  negative `x`.
- `climb_stairs(n)`: the number of ways to climb `n` steps taking one or two at
  a time.

### `katas.strings`

- `longest_common_prefix(strs)`: the prefix shared by every string. Raises
  `ValueError` for an empty sequence.
- `is_valid_parentheses(s)`: whether `s` consists only of correctly nested
  `()[]{}` pairs.
- `find_substring(haystack, needle)`: index of the first occurrence, or `-1`.
- `length_of_last_word(s)`: length of the last run of non-space characters.
- `is_palindrome_text(s)`: compares only ASCII letters and digits, ignoring
  case.
- `roman_to_int(s)`: value of a Roman numeral. Characters that are not
  numerals count as zero.

### `katas.arrays`

- `remove_duplicates(nums)` and `remove_element(nums, val)`: compact a list in
  place and return the length of the kept prefix. Values past that length are
  left as they were.
- `search_insert(nums, target)`: binary search in an ascending list. Returns
  the index of `target`, or the index where it would be inserted.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` values of `nums2`
  into the first `m` values of `nums1`, in place. Raises `ValueError` on
  negative counts or when `nums1` lacks room for `m + n` values.
- `single_number(nums)`: the first value that occurs exactly once, or `0`.
- `majority_element(nums)`: the first value seen more than `len(nums) // 2`
  times, or `0`.

### `katas.linked_lists`

`ListNode` is a singly linked list node that compares by identity.
`ListNode.from_values` builds a list from any iterable and returns `None` for
empty input. Iterating over a node yields the values from that node to the end.

- `merge_two_lists(list1, list2)`: splices two sorted lists into one. On equal
  values, nodes from `list1` come first.
- `delete_duplicates(head)`: removes repeated values from a sorted list in
  place.
- `has_cycle(head)`: whether following `next` ever loops back.
- `get_intersection_node(head_a, head_b)`: the first node shared by both lists,
  or `None`.

### `katas.trees`

`TreeNode` is a binary tree node that compares by identity.
`tree_from_level_order` builds a tree from level-order values, where `None`
marks a missing child.

- `inorder_traversal`, `preorder_traversal`, `postorder_traversal`: return
  lists of values.
- `is_same_tree(p, q)`: same shape and values.
- `is_symmetric(root)`: whether a tree mirrors itself. An empty tree counts as
  not symmetric.
- `is_balanced(root)`: whether the subtree heights at every node differ by at
  most one.
- `max_depth(root)`: the number of nodes on the longest root-to-leaf path.
- `has_path_sum(root, target_sum)`: whether some root-to-leaf path adds up to
  `target_sum`.
- `sorted_array_to_bst(nums)`: builds a height-balanced search tree from
  ascending values.

## Example

```python
from katas.linked_lists import ListNode, merge_two_lists
from katas.trees import tree_from_level_order, inorder_traversal, is_symmetric
from katas.strings import roman_to_int

merged = merge_two_lists(ListNode.from_values([1, 2, 4]), ListNode.from_values([1, 3, 4]))
print(list(merged))                    # [1, 1, 2, 3, 4, 4]

root = tree_from_level_order([1, 2, 2, 3, 4, 4, 3])
print(inorder_traversal(root))         # [3, 2, 4, 1, 4, 2, 3]
print(is_symmetric(root))              # True

print(roman_to_int("MCMXCIV"))         # 1994
```

## Running the tests

```
pytest
```