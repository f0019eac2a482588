"""Binary tree nodes, level-order parsing, traversals and measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

EMPTY = -1
"""Token that marks a missing child in level-order input."""


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with optional left and right children."""

    value: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def parse_level_order(tokens: Iterable[int | str] | str) -> TreeNode | None:
    """Build a tree from level-order tokens where -1 stands for no node.

    The first token is the root; then each real node, in breadth-first order,
    takes two tokens for its left and right child. A string is split on
    whitespace. Tokens left over once the tree is complete are ignored.
    Raises ValueError if the tokens run out before the tree is complete.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    stream = iter(tokens)

    def take() -> TreeNode | None:
        try:
            raw = next(stream)
        except StopIteration:
            raise ValueError("ran out of tokens while reading tree") from None
        value = int(raw)
        return None if value == EMPTY else TreeNode(value)

    root = take()
    pending: deque[TreeNode] = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        node.left = take()
        node.right = take()
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return root


def _walk(root: TreeNode | None) -> Iterator[TreeNode]:
    """Yield nodes breadth-first, left child before right."""
    pending: deque[TreeNode] = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        yield node
        pending.extend(child for child in (node.left, node.right) if child is not None)


def level_order(root: TreeNode | None) -> list[int]:
    """Return the values level by level, left to right."""
    return [node.value for node in _walk(root)]


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, root order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(root))


def count_leaves(root: TreeNode | None) -> int:
    """Return the number of nodes that have no children."""
    return sum(1 for node in _walk(root) if node.left is None and node.right is None)


def max_height(root: TreeNode | None) -> int:
    """Return the number of levels on the longest root-to-leaf path."""
    height = 0
    level = [root] if root is not None else []
    while level:
        height += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return height