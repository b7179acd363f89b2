from __future__ import annotations
from typing import Optional, Union


class FixedGenerations:
    """Run until the generation budget is spent."""

    def should_stop(self, best_score: int) -> bool:
        return False


class Stagnation:
    """Stop once the best score has not improved for more than `patience` generations."""

    def __init__(self, patience: int):
        if patience <= 0:
            raise ValueError("patience must be > 0")
        self.patience = patience
        self.best: Optional[int] = None
        self.no_improve = 0

    def should_stop(self, best_score: int) -> bool:
        if self.best is None or best_score < self.best:
            self.best = best_score
            self.no_improve = 0
            return False
        self.no_improve += 1
        return self.no_improve > self.patience


def make_termination(patience: Optional[int]) -> Union[FixedGenerations, Stagnation]:
    if patience is None:
        return FixedGenerations()
    return Stagnation(patience)
