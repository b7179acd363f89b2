from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .graph_io import GraphData
from .fitness import FitnessResult, default_penalty, evaluate
from .seeding import SEEDERS
from .selection import tournament_selection
from .crossover import CROSSOVERS
from .mutation import mutate_legal_recolor
from .termination import make_termination

logger = logging.getLogger(__name__)


@dataclass
class GAConfig:
    # GA parameters
    pop_size: int = 100
    generations: int = 2000
    mutation_rate: float = 0.1       # probability per gene

    elitism: int = 2                 # best individuals copied unchanged each generation
    patience: Optional[int] = None   # None: always run all generations; int: stagnation stop

    seeding: str = "hybrid"          # "hybrid" or "random"
    crossover: str = "window"        # "window" or "one_point"
    tournament_k: int = 2

    # Problem setup
    penalty: Optional[int] = None    # None: max(1000, n_vertices + 1)

    def validate(self) -> None:
        if self.pop_size <= 0:
            raise ValueError("pop_size must be > 0")
        if self.generations <= 0:
            raise ValueError("generations must be > 0")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be in [0, 1]")
        if not 0 <= self.elitism < self.pop_size:
            raise ValueError("elitism must be >= 0 and < pop_size")
        if self.patience is not None and self.patience <= 0:
            raise ValueError("patience must be > 0 or None")
        if self.seeding not in SEEDERS:
            raise ValueError(f"cfg.seeding must be one of {sorted(SEEDERS)}")
        if self.crossover not in CROSSOVERS:
            raise ValueError(f"cfg.crossover must be one of {sorted(CROSSOVERS)}")
        if self.tournament_k < 1:
            raise ValueError("tournament_k must be >= 1")
        if self.penalty is not None and self.penalty <= 0:
            raise ValueError("penalty must be > 0 or None")


@dataclass
class GARunResult:
    best_chrom: List[int]
    best_eval: FitnessResult
    best_score_history: List[int] = field(default_factory=list)
    best_conflicts_history: List[int] = field(default_factory=list)
    best_colors_used_history: List[int] = field(default_factory=list)
    stopped_early: bool = False
    generations_run: int = 0

    @property
    def chromatic_estimate(self) -> int:
        return self.best_eval.n_colors_used


def _best_of(evals: List[FitnessResult]) -> int:
    return min(range(len(evals)), key=lambda i: evals[i].score)


def run_ga(graph: GraphData, cfg: GAConfig, seed: Optional[int] = None,
           rnd: Optional[random.Random] = None) -> GARunResult:
    """
    Evolve colorings of `graph` and return the best individual of the final population.

    The run owns one random stream: `rnd` when given, else random.Random(seed).
    With seed=None the stream is seeded from the OS. Passing both is an error.
    """
    cfg.validate()
    if seed is not None and rnd is not None:
        raise ValueError("pass either seed or rnd, not both")

    if graph.n_vertices == 0:
        logger.info("Empty graph, nothing to color")
        return GARunResult(best_chrom=[], best_eval=FitnessResult(conflicts=0, n_colors_used=0, score=0))

    if rnd is None:
        rnd = random.Random(seed)

    penalty = cfg.penalty if cfg.penalty is not None else default_penalty(graph)
    seeder = SEEDERS[cfg.seeding]
    crossover = CROSSOVERS[cfg.crossover]
    termination = make_termination(cfg.patience)

    logger.info(
        "GA start: n=%d edges=%d pop=%d gens=%d mut=%.3f elite=%d patience=%s seeding=%s crossover=%s",
        graph.n_vertices, len(graph.edges), cfg.pop_size, cfg.generations, cfg.mutation_rate,
        cfg.elitism, cfg.patience, cfg.seeding, cfg.crossover,
    )

    pop = seeder(graph, cfg.pop_size, rnd)
    evals = [evaluate(graph, ind, penalty=penalty) for ind in pop]
    termination.should_stop(evals[_best_of(evals)].score)

    best_score_hist: List[int] = []
    best_conf_hist: List[int] = []
    best_cols_hist: List[int] = []

    stopped_early = False
    generations_run = 0

    for gen in range(cfg.generations):
        generations_run = gen + 1
        scores = [e.score for e in evals]

        ranked = sorted(range(len(pop)), key=lambda i: scores[i])
        next_pop: List[List[int]] = [pop[i][:] for i in ranked[:cfg.elitism]]

        while len(next_pop) < cfg.pop_size:
            p1 = tournament_selection(pop, scores, rnd, k=cfg.tournament_k)
            p2 = tournament_selection(pop, scores, rnd, k=cfg.tournament_k)
            child = crossover(graph, p1, p2, rnd)
            child = mutate_legal_recolor(graph, child, cfg.mutation_rate, rnd)
            next_pop.append(child)

        pop = next_pop
        evals = [evaluate(graph, ind, penalty=penalty) for ind in pop]

        best = evals[_best_of(evals)]
        best_score_hist.append(best.score)
        best_conf_hist.append(best.conflicts)
        best_cols_hist.append(best.n_colors_used)
        logger.debug("gen %d: best score=%d conflicts=%d colors=%d",
                     generations_run, best.score, best.conflicts, best.n_colors_used)

        if termination.should_stop(best.score):
            stopped_early = True
            logger.info("No improvement for more than %d generations, stopping at generation %d",
                        cfg.patience, generations_run)
            break

    best_idx = _best_of(evals)
    result = GARunResult(
        best_chrom=pop[best_idx][:],
        best_eval=evals[best_idx],
        best_score_history=best_score_hist,
        best_conflicts_history=best_conf_hist,
        best_colors_used_history=best_cols_hist,
        stopped_early=stopped_early,
        generations_run=generations_run,
    )
    logger.info("GA done after %d generations: conflicts=%d colors=%d",
                generations_run, result.best_eval.conflicts, result.best_eval.n_colors_used)
    return result
