from __future__ import annotations
import random
from typing import Callable, Dict, List

from .graph_io import GraphData
from .seeding import UNCOLORED, first_fit_color

Crossover = Callable[[GraphData, List[int], List[int], random.Random], List[int]]


def _check_parents(p1: List[int], p2: List[int]) -> None:
    if len(p1) != len(p2):
        raise ValueError("Parents must have same length")


def central_window(n: int) -> range:
    """Positions of the middle half: [n/2 - n/4, n/2 + n/4)."""
    mid, quarter = n // 2, n // 4
    return range(mid - quarter, mid + quarter)


def window_repair(graph: GraphData, p1: List[int], p2: List[int], rnd: random.Random) -> List[int]:
    """
    Segment inheritance + degree-guided greedy repair:
    - inside the central window, each gene comes from p1 or p2 with 50/50 odds
    - every other gene starts uncolored
    - uncolored vertices, highest degree first, get the smallest color not used
      by an already-colored neighbor in the child

    The child is fully colored but may still hold conflicts between repaired
    vertices and neighbors colored after them.
    """
    _check_parents(p1, p2)

    n = len(p1)
    child = [UNCOLORED] * n
    for i in central_window(n):
        child[i] = p1[i] if rnd.random() < 0.5 else p2[i]

    pending = [v for v in range(n) if child[v] == UNCOLORED]
    pending.sort(key=lambda v: -graph.degree[v])
    for v in pending:
        child[v] = first_fit_color(graph, child, v)
    return child


def one_point(graph: GraphData, p1: List[int], p2: List[int], rnd: random.Random) -> List[int]:
    """
    One-point crossover:
    - choose a cut position in [0, n-1]
    - head from p1, tail from p2
    """
    _check_parents(p1, p2)

    n = len(p1)
    if n == 0:
        return []

    cut = rnd.randrange(n)
    return p1[:cut] + p2[cut:]


CROSSOVERS: Dict[str, Crossover] = {
    "window": window_repair,
    "one_point": one_point,
}
