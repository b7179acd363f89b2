import pytest

from evocolor.graph_io import GraphData, read_col


def test_from_matrix_derives_neighbors_and_degree():
    m = [
        [0, 1, 1, 0],
        [1, 0, 0, 0],
        [1, 0, 0, 1],
        [0, 0, 1, 0],
    ]
    g = GraphData.from_matrix(m)
    assert g.n_vertices == 4
    assert g.adjacency == [(1, 2), (0,), (0, 3), (2,)]
    assert g.degree == [2, 1, 2, 1]
    assert g.edges == [(0, 1), (0, 2), (2, 3)]
    assert g.max_degree == 2


def test_from_matrix_copies_caller_storage():
    m = [[0, 1], [1, 0]]
    g = GraphData.from_matrix(m)
    m[0][1] = 0
    m[1][0] = 0
    assert g.matrix[0][1] is True
    assert g.adjacency == [(1,), (0,)]


def test_from_matrix_rejects_non_square():
    with pytest.raises(ValueError):
        GraphData.from_matrix([[0, 1, 0], [1, 0]])


def test_from_edges_drops_self_loops():
    g = GraphData.from_edges(3, [(0, 0), (0, 2)])
    assert g.edges == [(0, 2)]
    assert g.degree == [1, 0, 1]


def test_read_col(tmp_path):
    p = tmp_path / "g.col"
    p.write_text(
        "c sample instance\n"
        "\n"
        "p edge 4 4\n"
        "e 1 2\n"
        "e 2 3\n"
        "e 3 2\n"
        "e 4 4\n"
        "e 1 4\n"
    )
    g = read_col(str(p))
    assert g.n_vertices == 4
    assert g.edges == [(0, 1), (0, 3), (1, 2)]


def test_read_col_accepts_problem_line_without_format_word(tmp_path):
    p = tmp_path / "g.txt"
    p.write_text("p 3 1\ne 1 3\n")
    g = read_col(str(p))
    assert g.n_vertices == 3
    assert g.edges == [(0, 2)]


def test_read_col_without_problem_line(tmp_path):
    p = tmp_path / "bad.col"
    p.write_text("c nothing here\n")
    with pytest.raises(ValueError, match="Could not parse"):
        read_col(str(p))


def test_read_col_malformed_edge_reports_line(tmp_path):
    p = tmp_path / "bad.col"
    p.write_text("p edge 3 1\ne 1 x\n")
    with pytest.raises(ValueError, match=":2:"):
        read_col(str(p))


def test_read_col_vertex_out_of_range(tmp_path):
    p = tmp_path / "bad.col"
    p.write_text("p edge 3 1\ne 1 4\n")
    with pytest.raises(ValueError, match="out of range"):
        read_col(str(p))


def test_read_col_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_col(str(tmp_path / "missing.col"))


def test_read_col_zero_vertices(tmp_path):
    p = tmp_path / "empty.col"
    p.write_text("c no vertices\np edge 0 0\n")
    g = read_col(str(p))
    assert g.n_vertices == 0
    assert g.edges == []


@pytest.mark.parametrize("problem", ["p edge -3 2", "p edge 5x 4", "p edge", "p"])
def test_read_col_malformed_problem_line(tmp_path, problem):
    p = tmp_path / "bad.col"
    p.write_text(f"c header\n{problem}\ne 1 2\n")
    with pytest.raises(ValueError, match=":2:"):
        read_col(str(p))
