"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

import math
from collections.abc import Sequence

INF = math.inf


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the shortest-path matrix for a square weight matrix.

    Missing edges are marked with INF; the input is left unchanged.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if size == 0:
        raise ValueError("Number of vertices must be positive.")
    if any(len(row) != size for row in dist):
        raise ValueError("matrix must be square")
    for k in range(size):
        via = dist[k]
        for row in dist:
            through = row[k]
            if through == INF:
                continue
            for j, step in enumerate(via):
                if step != INF and through + step < row[j]:
                    row[j] = through + step
    return dist