import pytest

from dsbasics.graph import MatrixGraph


def _sample():
    graph = MatrixGraph(3)
    graph.add_edge(0, 1, 2)
    graph.add_edge(0, 2, 9)
    graph.add_edge(2, 1, 10)
    return graph


def test_new_graph_has_no_edges():
    graph = MatrixGraph(4)
    assert graph.edges == 0
    assert graph.matrix == [[0] * 4 for _ in range(4)]


def test_weighted_edges_are_symmetric():
    graph = _sample()
    assert graph.edges == 3
    assert graph.matrix[0][1] == graph.matrix[1][0] == 2
    assert graph.matrix[0][2] == graph.matrix[2][0] == 9
    assert graph.matrix[1][2] == graph.matrix[2][1] == 10
    for v in range(3):
        assert graph.matrix[v][v] == 0


def test_default_weight_is_one():
    graph = MatrixGraph(2)
    graph.add_edge(0, 1)
    assert graph.matrix == [[0, 1], [1, 0]]


def test_printout_layout():
    expected = (
        "Graph: \n"
        "     0 1 2 \n"
        "     | | | \n"
        "0--  0 2 9 \n"
        "1--  2 0 10 \n"
        "2--  9 10 0 \n"
    )
    assert str(_sample()) == expected


def test_printout_has_row_per_vertex():
    lines = str(MatrixGraph(5)).splitlines()
    assert len(lines) == 3 + 5


@pytest.mark.parametrize("v1, v2", [(0, 3), (-1, 0), (5, 1)])
def test_out_of_range_vertex(v1, v2):
    graph = MatrixGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(v1, v2, 4)
    assert graph.edges == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        MatrixGraph(-1)