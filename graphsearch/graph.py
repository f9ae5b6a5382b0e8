"""Undirected weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class Graph:
    """An undirected graph on vertices ``0 .. size - 1``.

    A weight of zero means there is no edge between two vertices.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"graph size must be non-negative, got {size}")
        self.size = size
        self._weights = [[0] * size for _ in range(size)]

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Sequence[int]]) -> "Graph":
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples."""
        graph = cls(size)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Set the weight of the undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._weights[u][v] = weight
        self._weights[v][u] = weight

    def has_edge(self, u: int, v: int) -> bool:
        return self.weight(u, v) != 0

    def weight(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        return self._weights[u][v]

    def neighbors(self, u: int) -> list[int]:
        """Vertices adjacent to ``u``, in ascending order."""
        self._check(u)
        return [v for v, w in enumerate(self._weights[u]) if w != 0]

    def __len__(self) -> int:
        return self.size

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and 0 <= vertex < self.size

    def _check(self, vertex: int) -> None:
        if vertex not in self:
            raise IndexError(
                f"vertex {vertex!r} out of range for graph of size {self.size}"
            )