from __future__ import annotations

import logging
import os
import random
from typing import Optional

from .graph_io import GraphData

logger = logging.getLogger(__name__)

# density level -> edge probability
DENSITY_LEVELS = {1: 0.1, 2: 0.3, 3: 0.5, 4: 0.7, 5: 0.9}
DEFAULT_DENSITY = 0.5


def edge_probability(density_level: int) -> float:
    if density_level not in DENSITY_LEVELS:
        logger.warning("Unknown density level %r, using edge probability %.1f", density_level, DEFAULT_DENSITY)
        return DEFAULT_DENSITY
    return DENSITY_LEVELS[density_level]


def generate_graph(n_vertices: int, density_level: int, rnd: Optional[random.Random] = None) -> GraphData:
    """
    Random undirected graph without self-loops: every unordered pair is an
    edge with the probability of the given density level (1 sparse .. 5 dense).
    """
    if n_vertices < 0:
        raise ValueError("n_vertices must be >= 0")
    if rnd is None:
        rnd = random.Random()

    p = edge_probability(density_level)
    rows = [[0] * n_vertices for _ in range(n_vertices)]
    for i in range(n_vertices):
        for j in range(i + 1, n_vertices):
            if rnd.random() < p:
                rows[i][j] = 1
                rows[j][i] = 1
    return GraphData.from_matrix(rows)


def write_col(graph: GraphData, path: str, comment: Optional[str] = None) -> None:
    """Write `graph` as a DIMACS .col file (1-based vertex ids)."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if comment:
            for line in comment.splitlines():
                f.write(f"c {line}\n")
        f.write(f"p edge {graph.n_vertices} {len(graph.edges)}\n")
        for u, v in graph.edges:
            f.write(f"e {u + 1} {v + 1}\n")
