"""Command-line front end: read a graph from standard input and run a search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from .graph import Graph
from .informed import (
    a_star,
    beam_search,
    branch_and_bound,
    branch_and_bound_heuristic,
    hill_climb,
    oracle_search,
)
from .uninformed import (
    bfs_path,
    bfs_with_history,
    british_museum,
    dfs_path,
    dfs_with_history,
    iterative_deepening,
)


class InputError(Exception):
    """Raised when standard input does not hold the expected numbers."""


class _Reader:
    """Reads whitespace-separated integers, printing a prompt before each."""

    def __init__(self, stream: TextIO, out: TextIO, echo: bool) -> None:
        self._tokens = self._split(stream)
        self._out = out
        self._echo = echo

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def say(self, text: str) -> None:
        if self._echo:
            self._out.write(text)
            self._out.flush()

    def number(self, prompt: str = "") -> int:
        if prompt:
            self.say(prompt)
        token = next(self._tokens, None)
        if token is None:
            raise InputError("unexpected end of input")
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None


@dataclass(frozen=True)
class _Values:
    """How per-vertex values (heuristics or oracle distances) are asked for."""

    header: str
    label: str


_HEURISTIC = _Values("Enter heuristic values for each vertex:\n", "h")
_ORACLE = _Values(
    "Enter oracle distances for each vertex (distance to goal):\n", "oracleDist"
)

_Runner = Callable[[Graph, list[int], int, int, argparse.Namespace, TextIO], None]


@dataclass(frozen=True)
class _Algorithm:
    weighted: bool
    values: _Values | None
    run: _Runner


def _arrows(path: Sequence[int]) -> str:
    return " -> ".join(str(v) for v in path)


def _spaced(path: Sequence[int]) -> str:
    return "".join(f"{v} " for v in path)


def _run_bfs(graph, values, start, goal, args, out):
    path = bfs_path(graph, start, goal)
    if path is None:
        out.write(f"No path found from {start} to {goal}.\n")
    else:
        out.write(f"Shortest path from {start} to {goal}: {_spaced(path)}\n")


def _run_dfs(graph, values, start, goal, args, out):
    path = dfs_path(graph, start, goal)
    if path is None:
        out.write(f"No path found from {start} to {goal}.\n")
    else:
        out.write(f"Path from start to goal: {_spaced(path)}\n")


def _run_iddfs(graph, values, start, goal, args, out):
    result = iterative_deepening(graph, start, goal)
    for limit, trace in enumerate(result.traces):
        out.write(f"\nDepth Limit {limit}: {_spaced(trace)}")
    if result.found:
        out.write(f"\nGoal {goal} found at depth {result.depth}!\n")
    else:
        out.write("\nGoal not found.\n")


def _run_british_museum(graph, values, start, goal, args, out):
    path = british_museum(graph, start, goal)
    if path is None:
        out.write("No path found.\n")
    else:
        out.write(f"Solution Path Found: {_arrows(path)}\n")


def _run_bfs_history(graph, values, start, goal, args, out):
    path = bfs_with_history(graph, start, goal)
    if path is None:
        out.write("No path found.\n")
    else:
        out.write(f"BFS with history path: {_spaced(path)}\n")


def _run_dfs_history(graph, values, start, goal, args, out):
    out.write("DFS with history (avoiding dead-ends):\n")
    path = dfs_with_history(graph, start, goal)
    if path is None:
        out.write("No path found.\n")
    else:
        # Goal first, start last.
        out.write(f"{_spaced(list(reversed(path)))}\n")


def _write_climb(out: TextIO, path: Sequence[int], reached: bool,
                 success: str, failure: str) -> None:
    out.write(f"Path: {_arrows(path)}")
    out.write(f"\n{success}\n" if reached else f"\n{failure}\n")


def _run_hill_climb(graph, values, start, goal, args, out):
    result = hill_climb(graph, values, start, goal)
    _write_climb(out, result.path, result.reached,
                 "Goal reached!", "No better neighbor found. Stopping.")


def _run_oracle(graph, values, start, goal, args, out):
    result = oracle_search(graph, values, start, goal)
    _write_climb(out, result.path, result.reached,
                 "Goal reached optimally!", "No step reduces distance. Stopping.")


def _run_beam(graph, values, start, goal, args, out):
    result = beam_search(graph, values, start, goal, args.width)
    if result.path is None:
        out.write("Goal not found.\n")
    else:
        out.write(f"Path: {_arrows(result.path)}\nGoal reached!\n")


def _run_beam_history(graph, values, start, goal, args, out):
    result = beam_search(graph, values, start, goal, args.width)
    out.write(f"Visited Order (History): {_spaced(result.history)}")
    if result.path is None:
        out.write("\nGoal not found.\n")
    else:
        out.write(f"\nFinal Path: {_arrows(result.path)}\nGoal reached!\n")


def _write_costed(out: TextIO, result) -> None:
    if result is None:
        out.write("No path found.\n")
    else:
        out.write(f"Optimal Path: {_arrows(result.path)}\n"
                  f"Total Cost: {result.cost}\n")


def _run_branch_and_bound(graph, values, start, goal, args, out):
    _write_costed(out, branch_and_bound(graph, start, goal))


def _run_bnb_heuristic(graph, values, start, goal, args, out):
    _write_costed(out, branch_and_bound_heuristic(graph, values, start, goal))


def _run_a_star(graph, values, start, goal, args, out):
    _write_costed(out, a_star(graph, values, start, goal))


ALGORITHMS: dict[str, _Algorithm] = {
    "bfs": _Algorithm(False, None, _run_bfs),
    "dfs": _Algorithm(False, None, _run_dfs),
    "iddfs": _Algorithm(False, None, _run_iddfs),
    "british-museum": _Algorithm(False, None, _run_british_museum),
    "bfs-history": _Algorithm(False, None, _run_bfs_history),
    "dfs-history": _Algorithm(False, None, _run_dfs_history),
    "hill-climb": _Algorithm(False, _HEURISTIC, _run_hill_climb),
    "oracle": _Algorithm(False, _ORACLE, _run_oracle),
    "beam": _Algorithm(False, _HEURISTIC, _run_beam),
    "beam-history": _Algorithm(False, _HEURISTIC, _run_beam_history),
    "branch-and-bound": _Algorithm(True, None, _run_branch_and_bound),
    "bnb-heuristic": _Algorithm(True, _HEURISTIC, _run_bnb_heuristic),
    "a-star": _Algorithm(True, _HEURISTIC, _run_a_star),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphsearch",
        description="Read a graph from standard input and search it.",
    )
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS))
    parser.add_argument("-w", "--width", type=int, default=2,
                        help="beam width for the beam searches (default: 2)")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="do not print input prompts")
    return parser


def _read_graph(reader: _Reader, weighted: bool) -> Graph:
    size = reader.number("Enter number of vertices: ")
    edge_count = reader.number("Enter number of edges: ")
    graph = Graph(size)
    reader.say("Enter edges with weights (u v w):\n" if weighted
               else "Enter edges (u v):\n")
    for _ in range(edge_count):
        u = reader.number()
        v = reader.number()
        weight = reader.number() if weighted else 1
        graph.add_edge(u, v, weight)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen search on a graph read from standard input."""
    args = _build_parser().parse_args(argv)
    algorithm = ALGORITHMS[args.algorithm]
    out = sys.stdout
    reader = _Reader(sys.stdin, out, echo=not args.quiet)
    try:
        graph = _read_graph(reader, algorithm.weighted)
        values: list[int] = []
        if algorithm.values is not None:
            reader.say(algorithm.values.header)
            values = [reader.number(f"{algorithm.values.label}({i}): ")
                      for i in range(graph.size)]
        start = reader.number("Enter start vertex: ")
        goal = reader.number("Enter goal vertex: ")
        algorithm.run(graph, values, start, goal, args, out)
    except (InputError, ValueError, IndexError) as exc:
        sys.stderr.write(f"graphsearch: error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())