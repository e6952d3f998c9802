"""Binary tree nodes and recursive operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _next_child(values: Iterator[Any], queue: deque[TreeNode]) -> TreeNode | None:
    value = next(values, None)
    if value is None:
        return None
    child = TreeNode(value)
    queue.append(child)
    return child


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values, with ``None`` for missing nodes."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left = _next_child(items, queue)
        node.right = _next_child(items, queue)
    return root


def tree_values(root: TreeNode | None) -> list[Any]:
    """Return level-order values with ``None`` for gaps, trailing gaps removed."""
    values: list[Any] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    invert_tree(root.left)
    invert_tree(root.right)
    root.left, root.right = root.right, root.left
    return root


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def min_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    if root.left is None:
        return min_depth(root.right) + 1
    if root.right is None:
        return min_depth(root.left) + 1
    return min(min_depth(root.left), min_depth(root.right)) + 1


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrors(p: TreeNode | None, q: TreeNode | None) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and _mirrors(p.left, q.right) and _mirrors(p.right, q.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Return whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)