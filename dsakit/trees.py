"""Binary tree nodes, traversals and level-order insertion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``data`` and optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.data
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.data
    yield from _inorder(node.right)


def preorder(root: TreeNode | None) -> list[Any]:
    """Root, left subtree, right subtree (recursive)."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[Any]:
    """Left subtree, root, right subtree (recursive)."""
    return list(_inorder(root))


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """Pre-order traversal with an explicit stack."""
    result: list[Any] = []
    if root is None:
        return result
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """In-order traversal with an explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.data)
            node = node.right
    return result


def postorder_iterative(root: TreeNode | None) -> list[Any]:
    """Post-order traversal using two stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[TreeNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(visited)]


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the node values grouped by depth, left to right."""
    levels: list[list[Any]] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level: list[Any] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def insert_level_order(root: TreeNode | None, data: Any) -> TreeNode | None:
    """Attach ``data`` at the first free child slot in breadth-first order.

    Returns the root. An empty tree stays empty and ``None`` is returned.
    """
    if root is None:
        return root
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = TreeNode(data)
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = TreeNode(data)
            return root
        queue.append(node.right)
    return root