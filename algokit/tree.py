"""Binary tree traversals and binary-search-tree queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield root.val
    yield from _preorder(root.left)
    yield from _preorder(root.right)


def _inorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root.val
    yield from _inorder(root.right)


def _postorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield from _postorder(root.left)
    yield from _postorder(root.right)
    yield root.val


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Return values in root, left, right order."""
    return list(_preorder(root))


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return values in left, root, right order."""
    return list(_inorder(root))


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Return values in left, right, root order."""
    return list(_postorder(root))


def level_order_traversal(root: TreeNode | None) -> list[int]:
    """Return values level by level, left to right."""
    if root is None:
        return []
    order: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return order


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def _is_valid_bst(node: TreeNode | None, lower: int | None, upper: int | None) -> bool:
    if node is None:
        return True
    if lower is not None and node.val <= lower:
        return False
    if upper is not None and node.val >= upper:
        return False
    return _is_valid_bst(node.left, lower, node.val) and _is_valid_bst(
        node.right, node.val, upper
    )


def is_valid_bst(root: TreeNode | None) -> bool:
    """Return True if the tree is a binary search tree with distinct values."""
    return _is_valid_bst(root, None, None)


def search_bst(root: TreeNode | None, target: int) -> TreeNode | None:
    """Return the node holding ``target`` in a binary search tree, or None."""
    current = root
    while current is not None:
        if current.val == target:
            return current
        current = current.left if target < current.val else current.right
    return None