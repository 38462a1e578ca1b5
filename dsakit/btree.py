"""B-tree of integers with a configurable minimum degree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    leaf: bool = True
    keys: list[int] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)


class BTree:
    """A B-tree whose nodes hold between t - 1 and 2t - 1 keys (the root at least one)."""

    def __init__(self, min_degree: int = 2, values: Iterable[int] = ()) -> None:
        if min_degree < 2:
            raise ValueError("minimum degree must be at least 2")
        self._t = min_degree
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    @property
    def min_degree(self) -> int:
        """The tree's minimum degree t."""
        return self._t

    def _split_child(self, parent: _Node, i: int) -> None:
        t = self._t
        child = parent.children[i]
        sibling = _Node(leaf=child.leaf, keys=child.keys[t:])
        if not child.leaf:
            sibling.children = child.children[t:]
            child.children = child.children[:t]
        median = child.keys[t - 1]
        child.keys = child.keys[: t - 1]
        parent.children.insert(i + 1, sibling)
        parent.keys.insert(i, median)

    def _insert_non_full(self, node: _Node, key: int) -> None:
        while True:
            i = len(node.keys) - 1
            while i >= 0 and key < node.keys[i]:
                i -= 1
            i += 1
            if node.leaf:
                node.keys.insert(i, key)
                return
            if len(node.children[i].keys) == 2 * self._t - 1:
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]

    def insert(self, key: int) -> None:
        """Add a key, splitting full nodes on the way down."""
        self._size += 1
        root = self._root
        if root is None:
            self._root = _Node(keys=[key])
            return
        if len(root.keys) == 2 * self._t - 1:
            new_root = _Node(leaf=False, children=[root])
            self._split_child(new_root, 0)
            self._root = new_root
            child = new_root.children[1 if new_root.keys[0] < key else 0]
            self._insert_non_full(child, key)
        else:
            self._insert_non_full(root, key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        node = self._root
        while node is not None:
            i = 0
            while i < len(node.keys) and key > node.keys[i]:
                i += 1
            if i < len(node.keys) and node.keys[i] == key:
                return True
            if node.leaf:
                return False
            node = node.children[i]
        return False

    def __iter__(self) -> Iterator[int]:
        def walk(node: _Node) -> Iterator[int]:
            for i, key in enumerate(node.keys):
                if not node.leaf:
                    yield from walk(node.children[i])
                yield key
            if not node.leaf:
                yield from walk(node.children[len(node.keys)])

        if self._root is not None:
            yield from walk(self._root)

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the number of levels, 0 for an empty tree."""
        levels = 0
        node = self._root
        while node is not None:
            levels += 1
            node = None if node.leaf else node.children[0]
        return levels

    def __repr__(self) -> str:
        return f"BTree(min_degree={self._t}, keys={list(self)!r})"