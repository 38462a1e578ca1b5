"""Binary tree nodes, tree building from a preorder description, and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[int], sentinel: int = -1) -> Optional[TreeNode]:
    """Build a tree from a preorder listing in which the sentinel marks a missing child."""
    stream = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("tree description ended early") from None
        if value == sentinel:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, node, right order."""
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


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in node, left, right order."""
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


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, right, node order."""
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


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, each level from left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.value for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def reverse_level_order(root: Optional[TreeNode]) -> list[int]:
    """Return the values from the deepest level up, each level from left to right."""
    collected: list[int] = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        collected.append(node.value)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    collected.reverse()
    return collected