from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from .graph_io import GraphData

DEFAULT_PENALTY = 1000


@dataclass(frozen=True)
class FitnessResult:
    conflicts: int
    n_colors_used: int
    score: int  # lower is better


def count_conflicts(graph: GraphData, chrom: List[int]) -> int:
    """Number of edges whose endpoints share a color, each edge counted once."""
    c = 0
    for v in range(graph.n_vertices):
        cv = chrom[v]
        for nb in graph.adjacency[v]:
            if nb > v and chrom[nb] == cv:
                c += 1
    return c


def count_colors(chrom: List[int]) -> int:
    return len(set(chrom))


def default_penalty(graph: GraphData) -> int:
    # colors used never exceeds n_vertices, so this keeps conflicts dominant
    return max(DEFAULT_PENALTY, graph.n_vertices + 1)


def evaluate(graph: GraphData, chrom: List[int], penalty: Optional[int] = None) -> FitnessResult:
    """
    chrom[i] = color assigned to vertex i (integer)

    conflicts: number of edges (u,v) where chrom[u] == chrom[v]
    n_colors_used: number of distinct colors used in the chromosome

    We want: conflicts -> 0, and then minimize colors used:
        score = penalty * conflicts + n_colors_used
    Any coloring with fewer conflicts scores strictly lower, whatever its colors.
    """
    if len(chrom) != graph.n_vertices:
        raise ValueError(
            f"Chromosome length {len(chrom)} does not match number of vertices {graph.n_vertices}"
        )
    if penalty is None:
        penalty = default_penalty(graph)

    conflicts = count_conflicts(graph, chrom)
    n_colors_used = count_colors(chrom)
    score = penalty * conflicts + n_colors_used

    return FitnessResult(conflicts=conflicts, n_colors_used=n_colors_used, score=score)
