"""Unbalanced binary search tree; equal values go to the right."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from dsakit.traversal import TreeNode, inorder, level_order, postorder, preorder


class BinarySearchTree:
    """A binary search tree of integers allowing duplicates."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value; values not smaller than a node go to its right."""
        node = TreeNode(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, value: int) -> Optional[TreeNode]:
        """Return the first node holding value on its search path, or None."""
        current = self._root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def delete(self, value: int) -> bool:
        """Remove one node holding value; return whether one was found."""
        parent: Optional[TreeNode] = None
        current = self._root
        while current is not None and current.value != value:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            return False
        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.value = successor.value
            parent, current = successor_parent, successor
        child = current.left if current.left is not None else current.right
        if parent is None:
            self._root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def min(self) -> int:
        """Return the smallest value."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> int:
        """Return the largest value."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
        return inorder(self._root)

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        return preorder(self._root)

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        return postorder(self._root)

    def level_order(self) -> list[list[int]]:
        """Return the values level by level."""
        return level_order(self._root)

    def inorder_ascii(self) -> list[str]:
        """Return the in-order values as ASCII characters, '?' for those outside 0..127."""
        return [chr(value) if 0 <= value <= 127 else "?" for value in self.inorder()]

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"