"""Directed graph stored as adjacency lists, with breadth-first traversal."""

from __future__ import annotations

from collections import deque


class Graph:
    """Directed graph on the vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(
                f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}"
            )

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from *v* to *w*."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from *start* in breadth-first order.

        Neighbours are visited in the order their edges were added.
        """
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order