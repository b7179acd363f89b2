from __future__ import annotations
import random
from typing import List


def tournament_selection(pop: List[List[int]], scores: List[int], rnd: random.Random, k: int = 2) -> List[int]:
    """
    Tournament selection (lower score wins):
    - draw k individuals uniformly at random, with replacement
    - return a copy of the best one; ties go to the first drawn
    k = 2 is the binary tournament.
    """
    if len(pop) != len(scores):
        raise ValueError("pop and scores must have same length")
    if k < 1:
        raise ValueError("tournament size k must be >= 1")

    n = len(pop)
    best_idx = rnd.randrange(n)
    for _ in range(k - 1):
        idx = rnd.randrange(n)
        if scores[idx] < scores[best_idx]:
            best_idx = idx

    return pop[best_idx][:]
