"""Binary tree traversals and comparisons."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

_ABSENT_LEFT = -10001


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values level by level, each level read left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Values level by level, alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    return sum(1 for _ in _levels(root))


def min_depth(root: TreeNode | None) -> int:
    """Number of nodes on the shortest path from the root down to a leaf."""
    for depth, level in enumerate(_levels(root), start=1):
        if any(node.left is None and node.right is None for node in level):
            return depth
    return 0


def _signature(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode | None] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node.val
        yield node.val if node.left is not None else _ABSENT_LEFT
        if node.right is not None:
            yield node.val
        stack.append(node.right)
        stack.append(node.left)


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether two trees have the same pre-order signature of values and children."""
    return list(_signature(p)) == list(_signature(q))


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    pairs: deque[tuple[TreeNode | None, TreeNode | None]] = deque(
        [(root.left, root.right)]
    )
    while pairs:
        left, right = pairs.popleft()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pairs.append((left.left, right.right))
        pairs.append((left.right, right.left))
    return True