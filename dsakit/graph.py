"""Undirected graph on numbered vertices with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Graph:
    """Undirected graph over vertices 0 .. vertices - 1, kept as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("Number of vertices must be positive.")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"Invalid vertex: {vertex}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect u and v in both directions."""
        if not (0 <= u < len(self._adjacency) and 0 <= v < len(self._adjacency)):
            raise ValueError(f"Invalid edge: ({u}, {v})")
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, u: int) -> list[int]:
        """Return the neighbours of u in the order their edges were added."""
        self._check(u)
        return list(self._adjacency[u])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from start, level by level."""
        self._check(start)
        visited = [False] * len(self._adjacency)
        visited[start] = True
        pending = deque([start])
        order: list[int] = []
        while pending:
            u = pending.popleft()
            order.append(u)
            for v in self._adjacency[u]:
                if not visited[v]:
                    visited[v] = True
                    pending.append(v)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from start in depth-first preorder."""
        self._check(start)
        visited = [False] * len(self._adjacency)
        visited[start] = True
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    order.append(v)
                    stack.append(iter(self._adjacency[v]))
                    break
            else:
                stack.pop()
        return order

    def adjacency(self) -> list[list[int]]:
        """Return a copy of every vertex's adjacency list."""
        return [list(neighbours) for neighbours in self._adjacency]

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._adjacency)})"