import pytest

from algokit.graphs import Graph, min_connecting_values

TREE_EDGES = [
    (1, 2), (1, 3), (1, 4), (2, 5), (2, 6), (5, 9),
    (5, 10), (4, 7), (4, 8), (7, 11), (7, 12),
]


def build(count, edges):
    graph = Graph(count)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_bfs_visits_tree_level_by_level():
    assert build(13, TREE_EDGES).bfs() == list(range(13))


def test_dfs_visits_tree_depth_first():
    assert build(13, TREE_EDGES).dfs() == [0, 1, 2, 5, 9, 10, 6, 3, 4, 7, 11, 12, 8]


def test_traversals_cover_every_vertex_once():
    graph = build(8, [(0, 3), (3, 5), (1, 2), (6, 7), (5, 0)])
    assert sorted(graph.bfs()) == list(range(8))
    assert sorted(graph.dfs()) == list(range(8))


def test_dfs_follows_edges():
    graph = build(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert graph.dfs() == graph.bfs()
    assert graph.dfs()[0] == 0


def test_greedy_coloring_first_source_graph():
    graph = build(5, [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (3, 4)])
    assert graph.greedy_coloring() == [0, 1, 2, 0, 1]


@pytest.mark.parametrize(
    "edges",
    [
        [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (3, 4)],
        [(0, 1), (0, 2), (1, 2), (1, 4), (2, 4), (4, 3)],
    ],
)
def test_greedy_coloring_is_proper(edges):
    graph = build(5, edges)
    colours = graph.greedy_coloring()
    assert all(colours[u] != colours[v] for u, v in edges)
    assert colours[0] == 0


def test_add_edge_rejects_unknown_vertex():
    with pytest.raises(IndexError):
        Graph(3).add_edge(0, 3)


def test_connecting_value_through_highest_corner():
    grid = [[1, 2], [3, 4]]
    assert min_connecting_values(grid, [(0, 0, 1, 1)]) == [grid[1][1]]


def test_connecting_value_goes_around_wall():
    grid = [[1, 9, 1], [1, 9, 1], [1, 1, 1]]
    assert min_connecting_values(grid, [(0, 0, 0, 2)]) == [grid[0][0]]


def test_connecting_value_same_cell_and_bounds():
    grid = [[5, 7, 3], [2, 8, 6], [4, 1, 9]]
    queries = [(1, 1, 1, 1), (0, 0, 2, 2), (0, 1, 1, 0)]
    answers = min_connecting_values(grid, queries)
    assert answers[0] == 1
    for (x1, y1, x2, y2), answer in zip(queries[1:], answers[1:]):
        assert answer >= max(grid[x1][y1], grid[x2][y2])
        assert answer in {value for row in grid for value in row}


def test_connecting_value_rejects_zero():
    with pytest.raises(ValueError):
        min_connecting_values([[0, 1], [1, 1]], [])


def test_connecting_value_rejects_outside_cell():
    with pytest.raises(IndexError):
        min_connecting_values([[1, 1], [1, 1]], [(0, 0, 2, 0)])