"""Binary search tree construction, insertion and lookup."""

from __future__ import annotations

from collections.abc import Iterable

from structkit.binary_tree import TreeNode


def from_sorted(values: Iterable[int]) -> TreeNode | None:
    """Build a height-balanced search tree from the given values.

    The values are sorted first. Each subtree is rooted at the middle
    element (the lower middle for even lengths) of its slice.
    """
    ordered = sorted(values)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        mid = (low + high) // 2
        return TreeNode(ordered[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(ordered) - 1)


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert value as a new leaf and return the root of the tree.

    Values smaller than a node go to its left; equal or larger values go
    to its right. Inserting into an empty tree returns a new root.
    """
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def contains(root: TreeNode | None, value: int) -> bool:
    """Return True if value is found by a search-tree descent from root."""
    node = root
    while node is not None:
        if node.value == value:
            return True
        node = node.left if value < node.value else node.right
    return False