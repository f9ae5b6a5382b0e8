import pytest

from graphsearch.graph import Graph
from graphsearch.uninformed import (
    DeepeningResult,
    bfs_path,
    bfs_with_history,
    british_museum,
    dfs_path,
    dfs_with_history,
    iterative_deepening,
)

PATH_SEARCHES = [bfs_path, dfs_path, british_museum, bfs_with_history, dfs_with_history]


@pytest.fixture
def graph():
    # 0 - 1 - 3 - 4 - 6 and 0 - 2 - 3 ; 5 isolated ; 2 - 7 dead end
    return Graph.from_edges(
        8, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 6), (2, 7)]
    )


def _assert_valid(graph, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert graph.has_edge(a, b)


@pytest.mark.parametrize("search", PATH_SEARCHES)
def test_path_is_valid(search, graph):
    path = search(graph, 0, 6)
    _assert_valid(graph, path, 0, 6)


@pytest.mark.parametrize("search", PATH_SEARCHES)
def test_unreachable_goal_gives_none(search, graph):
    assert search(graph, 0, 5) is None


@pytest.mark.parametrize("search", PATH_SEARCHES)
def test_start_equals_goal(search, graph):
    assert search(graph, 3, 3) == [3]


@pytest.mark.parametrize("search", PATH_SEARCHES)
def test_out_of_range_rejected(search, graph):
    with pytest.raises(IndexError) as high:
        search(graph, 0, 8)
    assert high.type is IndexError
    with pytest.raises(IndexError) as low:
        search(graph, -1, 0)
    assert low.type is IndexError
    assert search(graph, 7, 7) == [7]


def test_bfs_finds_shortest_path():
    graph = Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (0, 4), (4, 3)])
    assert bfs_path(graph, 0, 3) == [0, 4, 3]


def test_dfs_prefers_lowest_neighbor(graph):
    path = dfs_path(graph, 0, 6)
    assert path[1] == min(graph.neighbors(0))


def test_dfs_can_return_longer_path_than_bfs():
    graph = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3), (0, 3)])
    assert dfs_path(graph, 0, 3) == [0, 1, 2, 3]
    assert len(bfs_path(graph, 0, 3)) < len(dfs_path(graph, 0, 3))


def test_british_museum_explores_lowest_first(graph):
    path = british_museum(graph, 0, 6)
    assert path == dfs_path(graph, 0, 6)


def test_dfs_with_history_skips_dead_branch():
    graph = Graph.from_edges(4, [(0, 1), (0, 2), (2, 3)])
    path = dfs_with_history(graph, 0, 3)
    _assert_valid(graph, path, 0, 3)
    assert 1 not in path


def test_iterative_deepening_found(graph):
    result = iterative_deepening(graph, 0, 6)
    assert result.found
    assert len(result.traces) == result.depth + 1
    assert all(trace[0] == 0 for trace in result.traces)
    assert result.traces[-1][-1] == 6
    assert all(6 not in trace for trace in result.traces[:-1])


def test_iterative_deepening_trace_zero_is_start_only(graph):
    result = iterative_deepening(graph, 0, 6)
    assert result.traces[0] == [0]


def test_iterative_deepening_not_found(graph):
    result = iterative_deepening(graph, 0, 5)
    assert not result.found
    assert result.depth is None
    assert len(result.traces) == graph.size


def test_iterative_deepening_start_is_goal(graph):
    result = iterative_deepening(graph, 4, 4)
    assert result.found
    assert result.depth == 0
    assert result.traces == [[4]]


def test_iterative_deepening_empty_graph():
    with pytest.raises(IndexError):
        iterative_deepening(Graph(0), 0, 0)