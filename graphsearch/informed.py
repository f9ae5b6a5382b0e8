"""Heuristic searches: hill climbing, oracle, beam, branch and bound, A*."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from itertools import count

from .graph import Graph

# Hill climbing only considers neighbours whose heuristic is below this value.
_HILL_CEILING = 9999


@dataclass
class ClimbResult:
    """Outcome of a greedy walk: the vertices visited and whether the goal was reached."""

    path: list[int]
    reached: bool


@dataclass
class BeamResult:
    """Outcome of a beam search.

    ``history`` lists every vertex in the order it was first visited.
    ``path`` is None when the goal was not reached.
    """

    path: list[int] | None
    history: list[int] = field(default_factory=list)

    @property
    def reached(self) -> bool:
        return self.path is not None


@dataclass
class CostedPath:
    """A path together with the sum of its edge weights."""

    path: list[int]
    cost: int


def _require(graph: Graph, *vertices: int) -> None:
    for vertex in vertices:
        if vertex not in graph:
            raise IndexError(
                f"vertex {vertex!r} out of range for graph of size {graph.size}"
            )


def _require_values(graph: Graph, values: Sequence[int], name: str) -> None:
    if len(values) < graph.size:
        raise ValueError(
            f"{name} has {len(values)} values, graph has {graph.size} vertices"
        )


def hill_climb(graph: Graph, heuristic: Sequence[int],
               start: int, goal: int) -> ClimbResult:
    """Move to the unvisited neighbour with the lowest heuristic while it improves."""
    _require(graph, start, goal)
    _require_values(graph, heuristic, "heuristic")
    current = start
    path = [current]
    visited = {current}
    while current != goal:
        candidates = [
            v for v in graph.neighbors(current)
            if v not in visited and heuristic[v] < _HILL_CEILING
        ]
        if not candidates:
            return ClimbResult(path, False)
        best = min(candidates, key=lambda v: heuristic[v])
        if heuristic[best] >= heuristic[current]:
            return ClimbResult(path, False)
        current = best
        visited.add(current)
        path.append(current)
    return ClimbResult(path, True)


def oracle_search(graph: Graph, oracle_dist: Sequence[int],
                  start: int, goal: int) -> ClimbResult:
    """Follow the neighbour that most reduces the known distance to the goal."""
    _require(graph, start, goal)
    _require_values(graph, oracle_dist, "oracle distances")
    current = start
    path = [current]
    visited = {current}
    while current != goal:
        candidates = [
            v for v in graph.neighbors(current)
            if v not in visited and oracle_dist[v] < oracle_dist[current]
        ]
        if not candidates:
            return ClimbResult(path, False)
        current = min(candidates, key=lambda v: oracle_dist[v])
        visited.add(current)
        path.append(current)
    return ClimbResult(path, True)


def _exchange_sort(items: list[int], key: Callable[[int], int]) -> None:
    """Sort in place by pairwise exchange; equal keys may change order.

    The beam keeps whatever this ordering puts first, so ties are resolved
    exactly as this exchange pattern leaves them rather than stably.
    """
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if key(items[j]) < key(items[i]):
                items[i], items[j] = items[j], items[i]


def beam_search(graph: Graph, heuristic: Sequence[int],
                start: int, goal: int, width: int = 2) -> BeamResult:
    """Breadth-wise search keeping only the ``width`` best vertices per level."""
    if width < 1:
        raise ValueError(f"beam width must be at least 1, got {width}")
    _require(graph, start, goal)
    _require_values(graph, heuristic, "heuristic")
    parent: dict[int, int] = {}
    visited = {start}
    history = [start]
    beam = [start]
    while beam:
        next_beam: list[int] = []
        for u in beam:
            if u == goal:
                path = [goal]
                while path[-1] in parent:
                    path.append(parent[path[-1]])
                path.reverse()
                return BeamResult(path, history)
            for v in graph.neighbors(u):
                if v not in visited:
                    visited.add(v)
                    parent[v] = u
                    history.append(v)
                    next_beam.append(v)
        _exchange_sort(next_beam, key=lambda v: heuristic[v])
        beam = next_beam[:width]
    return BeamResult(None, history)


def _best_first(graph: Graph, start: int, goal: int,
                estimate: Callable[[int], int]) -> CostedPath | None:
    """Expand partial paths cheapest-first by ``cost + estimate(last vertex)``.

    Ties go to the path that entered the queue first.
    """
    order = count()
    queue: list[tuple[int, int, int, list[int]]] = [
        (estimate(start), next(order), 0, [start])
    ]
    while queue:
        _, _, cost, path = heapq.heappop(queue)
        last = path[-1]
        if last == goal:
            return CostedPath(path, cost)
        for v in graph.neighbors(last):
            if v not in path:
                child_cost = cost + graph.weight(last, v)
                heapq.heappush(
                    queue,
                    (child_cost + estimate(v), next(order), child_cost, path + [v]),
                )
    return None


def branch_and_bound(graph: Graph, start: int, goal: int) -> CostedPath | None:
    """Cheapest simple path from ``start`` to ``goal`` by uniform-cost expansion."""
    _require(graph, start, goal)
    return _best_first(graph, start, goal, lambda v: 0)


def branch_and_bound_heuristic(graph: Graph, heuristic: Sequence[int],
                               start: int, goal: int) -> CostedPath | None:
    """Branch and bound ordered by path cost plus heuristic estimate."""
    _require(graph, start, goal)
    _require_values(graph, heuristic, "heuristic")
    return _best_first(graph, start, goal, lambda v: heuristic[v])


def a_star(graph: Graph, heuristic: Sequence[int],
           start: int, goal: int) -> CostedPath | None:
    """A* search: expand by ``g + h`` over simple paths."""
    _require(graph, start, goal)
    _require_values(graph, heuristic, "heuristic")
    return _best_first(graph, start, goal, lambda v: heuristic[v])