import os
import random

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from evocolor.graph_io import GraphData  # noqa: E402
from evocolor.generator import generate_graph  # noqa: E402


@pytest.fixture
def k4():
    return GraphData.from_matrix([[int(i != j) for j in range(4)] for i in range(4)])


@pytest.fixture
def empty5():
    return GraphData.from_matrix([[0] * 5 for _ in range(5)])


@pytest.fixture
def cycle5():
    return GraphData.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


@pytest.fixture
def random_graphs():
    rnd = random.Random(7)
    return [generate_graph(n, level, rnd) for n in (1, 2, 9, 25, 40) for level in (1, 3, 5)]
