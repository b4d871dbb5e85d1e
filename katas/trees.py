"""Binary trees and the classic operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.val
        yield from _inorder(root.right)


def _preorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is not None:
        yield root.val
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _postorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.val


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _is_mirror(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and _is_mirror(p.left, q.right) and _is_mirror(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether a tree is its own mirror image; an empty tree is not."""
    if root is None:
        return False
    return _is_mirror(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending values."""

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = low + (high - low) // 2
        return TreeNode(nums[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(nums) - 1)


def _balanced_height(root: Optional[TreeNode]) -> Optional[int]:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return target_sum == root.val
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)