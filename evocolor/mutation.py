from __future__ import annotations
import random
from typing import List

from .graph_io import GraphData


def mutate_legal_recolor(graph: GraphData, chrom: List[int], p: float, rnd: random.Random) -> List[int]:
    """
    Each gene mutates independently with probability p.
    A mutated vertex takes a color drawn uniformly from [0, n-1] minus the
    colors currently on its neighbors; with no such color it is left as is.
    """
    c = chrom[:]
    n = len(c)
    for v in range(n):
        if rnd.random() < p:
            used = {c[nb] for nb in graph.adjacency[v]}
            candidates = [col for col in range(n) if col not in used]
            if candidates:
                c[v] = rnd.choice(candidates)
    return c
