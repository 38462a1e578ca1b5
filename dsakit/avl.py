"""Self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    value: int
    height: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    new_root = node.left
    assert new_root is not None
    node.left = new_root.right
    new_root.right = node
    _update(node)
    _update(new_root)
    return new_root


def _rotate_left(node: _Node) -> _Node:
    new_root = node.right
    assert new_root is not None
    node.right = new_root.left
    new_root.left = node
    _update(node)
    _update(new_root)
    return new_root


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance == 2:
        assert node.left is not None
        if _balance(node.left) == -1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance == -2:
        assert node.right is not None
        if _balance(node.right) == 1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


class AVLTree:
    """An AVL tree of integers; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value and rebalance along the insertion path."""
        self._root = _insert(self._root, value)
        self._size += 1

    def height(self) -> int:
        """Return the number of levels, 0 for an empty tree."""
        return _height(self._root)

    def level_order(self) -> list[list[int]]:
        """Return the values level by level, each level from left to right."""
        levels: list[list[int]] = []
        current = [self._root] if self._root is not None else []
        while current:
            levels.append([node.value for node in current])
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"