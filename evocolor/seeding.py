from __future__ import annotations
import random
from typing import Callable, Dict, List

from .graph_io import GraphData

UNCOLORED = -1

Seeder = Callable[[GraphData, int, random.Random], List[List[int]]]


def first_fit_color(graph: GraphData, chrom: List[int], v: int) -> int:
    """Smallest color id not used by an already-colored neighbor of v."""
    used = {chrom[nb] for nb in graph.adjacency[v] if chrom[nb] != UNCOLORED}
    color = 0
    while color in used:
        color += 1
    return color


def greedy_degree_coloring(graph: GraphData, rnd: random.Random) -> List[int]:
    """
    First-fit coloring in descending-degree order.
    Ties are broken by one random key per vertex, drawn once for this call.
    Always conflict-free and uses at most max_degree + 1 colors.
    """
    n = graph.n_vertices
    tiebreak = [rnd.random() for _ in range(n)]
    order = sorted(range(n), key=lambda v: (-graph.degree[v], tiebreak[v]))

    chrom = [UNCOLORED] * n
    for v in order:
        chrom[v] = first_fit_color(graph, chrom, v)
    return chrom


def random_coloring(n_vertices: int, rnd: random.Random) -> List[int]:
    return [rnd.randrange(n_vertices) for _ in range(n_vertices)]


def hybrid_population(graph: GraphData, pop_size: int, rnd: random.Random) -> List[List[int]]:
    """One greedy anchor plus pop_size - 1 uniformly random colorings."""
    pop = [greedy_degree_coloring(graph, rnd)]
    while len(pop) < pop_size:
        pop.append(random_coloring(graph.n_vertices, rnd))
    return pop


def random_population(graph: GraphData, pop_size: int, rnd: random.Random) -> List[List[int]]:
    return [random_coloring(graph.n_vertices, rnd) for _ in range(pop_size)]


SEEDERS: Dict[str, Seeder] = {
    "hybrid": hybrid_population,
    "random": random_population,
}
