"""Uninformed searches: breadth-first, depth-first and their variants."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .graph import Graph


@dataclass
class DeepeningResult:
    """Outcome of an iterative deepening search.

    ``traces`` holds the visit order for each depth limit tried.
    """

    found: bool
    depth: int | None
    traces: list[list[int]] = field(default_factory=list)


def _require(graph: Graph, *vertices: int) -> None:
    for vertex in vertices:
        if vertex not in graph:
            raise IndexError(
                f"vertex {vertex!r} out of range for graph of size {graph.size}"
            )


def _walk_back(parent: dict[int, int], goal: int) -> list[int]:
    path = [goal]
    while path[-1] in parent:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def bfs_path(graph: Graph, start: int, goal: int) -> list[int] | None:
    """Shortest path (by edge count) from ``start`` to ``goal``, or None."""
    _require(graph, start, goal)
    parent: dict[int, int] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return _walk_back(parent, goal)
        for nb in graph.neighbors(current):
            if nb not in visited:
                visited.add(nb)
                parent[nb] = current
                queue.append(nb)
    return None


def dfs_path(graph: Graph, start: int, goal: int) -> list[int] | None:
    """First path found by depth-first search, lowest neighbours first."""
    _require(graph, start, goal)
    visited: set[int] = set()
    path: list[int] = []

    def visit(vertex: int) -> bool:
        visited.add(vertex)
        path.append(vertex)
        if vertex == goal:
            return True
        for nb in graph.neighbors(vertex):
            if nb not in visited and visit(nb):
                return True
        path.pop()
        return False

    return path if visit(start) else None


def iterative_deepening(graph: Graph, start: int, goal: int) -> DeepeningResult:
    """Depth-limited searches with limits ``0 .. size - 1``."""
    _require(graph, start, goal)
    traces: list[list[int]] = []

    def limited(node: int, depth: int, limit: int,
                visited: set[int], order: list[int]) -> bool:
        visited.add(node)
        order.append(node)
        if node == goal:
            return True
        if depth >= limit:
            return False
        for nb in graph.neighbors(node):
            if nb not in visited and limited(nb, depth + 1, limit, visited, order):
                return True
        return False

    for limit in range(graph.size):
        order: list[int] = []
        found = limited(start, 0, limit, set(), order)
        traces.append(order)
        if found:
            return DeepeningResult(True, limit, traces)
    return DeepeningResult(False, None, traces)


def british_museum(graph: Graph, start: int, goal: int) -> list[int] | None:
    """Exhaustive simple-path enumeration; returns the first solution."""
    _require(graph, start, goal)
    path: list[int] = []

    def explore(current: int) -> bool:
        path.append(current)
        if current == goal:
            return True
        for nb in graph.neighbors(current):
            if nb not in path and explore(nb):
                return True
        path.pop()
        return False

    return path if explore(start) else None


def bfs_with_history(graph: Graph, start: int, goal: int) -> list[int] | None:
    """Breadth-first search that remembers and skips dead-end vertices."""
    _require(graph, start, goal)
    parent: dict[int, int] = {}
    visited = {start}
    dead_ends: set[int] = set()
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return _walk_back(parent, goal)
        expanded = False
        for nb in graph.neighbors(current):
            if nb not in visited and nb not in dead_ends:
                visited.add(nb)
                parent[nb] = current
                queue.append(nb)
                expanded = True
        if not expanded:
            dead_ends.add(current)
    return None


def dfs_with_history(graph: Graph, start: int, goal: int) -> list[int] | None:
    """Depth-first search that never re-enters a vertex known to be a dead end."""
    _require(graph, start, goal)
    visited: set[int] = set()
    dead_ends: set[int] = set()

    def visit(current: int) -> list[int] | None:
        if current == goal:
            return [current]
        visited.add(current)
        for nb in graph.neighbors(current):
            if nb not in visited and nb not in dead_ends:
                tail = visit(nb)
                if tail is not None:
                    tail.append(current)
                    return tail
        dead_ends.add(current)
        visited.discard(current)
        return None

    reversed_path = visit(start)
    if reversed_path is None:
        return None
    reversed_path.reverse()
    return reversed_path