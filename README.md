# graphsearch

Textbook graph search algorithms on small undirected graphs whose vertices
are numbered `0 .. size - 1`. It comes as a library and as a command that
reads a graph from standard input.

## Installation

```
pip install .
```

## The graph

`graphsearch.graph.Graph(size)` is an undirected graph stored as an
adjacency matrix. A weight of zero means "no edge".

- `Graph.from_edges(size, edges)` builds a graph from `(u, v)` or
  `(u, v, weight)` tuples.
- `add_edge(u, v, weight=1)` sets the weight of the edge in both directions.
- `has_edge(u, v)` and `weight(u, v)` query an edge.
- `neighbors(u)` returns the adjacent vertices in ascending order; this order
  fixes how every search explores and breaks ties.
- `len(graph)` is the number of vertices and `v in graph` checks a vertex.

Vertices out of range raise `IndexError`; a negative size raises `ValueError`.

## Uninformed searches (`graphsearch.uninformed`)

Each returns a list of vertices from `start` to `goal`, or `None` when there
is no path, unless noted.

- `bfs_path(graph, start, goal)` – breadth-first, shortest path by edge count.
- `dfs_path(graph, start, goal)` – depth-first, lowest neighbours first.
- `iterative_deepening(graph, start, goal)` – depth-limited searches with
  limits `0 .. size - 1`; returns a `DeepeningResult` with `found`, `depth`
  (the limit that succeeded, or `None`) and `traces` (the visit order for
  each limit tried).
- `british_museum(graph, start, goal)` – explores simple paths exhaustively
  and returns the first one that reaches the goal.
- `bfs_with_history(graph, start, goal)` – breadth-first search that skips
  vertices already found to be dead ends.
- `dfs_with_history(graph, start, goal)` – depth-first search that never
  re-enters a known dead end.

## Heuristic and cost-based searches (`graphsearch.informed`)

Heuristic and oracle-distance sequences need at least one value per vertex,
otherwise `ValueError` is raised.

- `hill_climb(graph, heuristic, start, goal)` – moves to the unvisited
  neighbour with the lowest heuristic while that is lower than the current
  one; returns a `ClimbResult` (`path`, `reached`).
- `oracle_search(graph, oracle_dist, start, goal)` – steps to the neighbour
  that most reduces the known distance to the goal; returns a `ClimbResult`.
- `beam_search(graph, heuristic, start, goal, width=2)` – keeps the `width`
  best vertices at each level; returns a `BeamResult` with `path` (or
  `None`), `history` (every vertex in the order first visited) and a
  `reached` property. A width below 1 raises `ValueError`.
- `branch_and_bound(graph, start, goal)` – cheapest simple path by
  uniform-cost expansion.
- `branch_and_bound_heuristic(graph, heuristic, start, goal)` and
  `a_star(graph, heuristic, start, goal)` – best-first expansion by path
  cost plus heuristic.

The last three return a `CostedPath` (`path`, `cost`) or `None`.

## Library use

```python
from graphsearch.graph import Graph
from graphsearch.uninformed import bfs_path
from graphsearch.informed import a_star

graph = Graph.from_edges(5, [(0, 1, 2), (1, 2, 3), (0, 3, 1), (3, 4, 1), (4, 2, 1)])

print(bfs_path(graph, 0, 2))        # [0, 1, 2]

heuristic = [3, 2, 0, 2, 1]
print(a_star(graph, heuristic, 0, 2))  # CostedPath(path=[0, 3, 4, 2], cost=3)
```

## Command line

```
graphsearch ALGORITHM [-w WIDTH] [-q]
```

`ALGORITHM` is one of `a-star`, `beam`, `beam-history`, `bfs`,
`bfs-history`, `bnb-heuristic`, `branch-and-bound`, `british-museum`,
`dfs`, `dfs-history`, `hill-climb`, `iddfs`, `oracle`.

The command reads whitespace-separated integers from standard input, in
this order:

1. the number of vertices and the number of edges;
2. each edge as `u v`, or `u v w` for `branch-and-bound`, `bnb-heuristic`
   and `a-star`;
3. one heuristic value per vertex for `hill-climb`, `beam`, `beam-history`,
   `bnb-heuristic` and `a-star`, or one oracle distance per vertex for
   `oracle`;
4. the start vertex and the goal vertex.

It prints a prompt before each value unless `-q`/`--quiet` is given, then
the result of the search. `-w`/`--width` sets the beam width (default 2)
for `beam` and `beam-history`. `dfs-history` prints its path goal first.
Malformed or missing input, or a vertex out of range, is reported on
standard error and the command exits with status 1.

```
printf '3 2\n0 1\n1 2\n0 2\n' | graphsearch bfs -q
```

## Running the tests

```
pip install .[test]
pytest
```