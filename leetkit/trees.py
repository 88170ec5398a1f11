"""Binary trees: validation, traversals, inversion and measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_valid_bst(root: TreeNode | None) -> bool:
    """Return True if the tree is a strict binary search tree."""

    def check(node: TreeNode | None, low: int | None, high: int | None) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, None, None)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the node values level by level, left to right."""
    result: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        result.append(level)
    return result


def max_depth(root: TreeNode | None) -> int:
    """Return the number of levels, counted breadth first."""
    if root is None:
        return 0
    depth = 0
    queue = deque([root])
    while queue:
        depth += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            queue.extend(child for child in (node.left, node.right) if child is not None)
    return depth


def max_depth_recursive(root: TreeNode | None) -> int:
    """Return the number of levels, found by a depth-first walk."""
    best = 0

    def walk(node: TreeNode, depth: int) -> None:
        nonlocal best
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                walk(child, depth + 1)

    if root is not None:
        walk(root, 1)
    return best


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def preorder(root: TreeNode | None) -> list[int]:
    """Return node values in preorder, walking recursively."""
    return list(_preorder(root))


def preorder_iterative(root: TreeNode | None) -> list[int]:
    """Return node values in preorder, using an explicit stack."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    most_nodes = 1

    def height(node: TreeNode | None) -> int:
        nonlocal most_nodes
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        most_nodes = max(most_nodes, left + right + 1)
        return max(left, right) + 1

    height(root)
    return most_nodes - 1