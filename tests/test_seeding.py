import random

from evocolor.fitness import count_colors, count_conflicts
from evocolor.seeding import (
    SEEDERS,
    UNCOLORED,
    greedy_degree_coloring,
    hybrid_population,
    random_population,
)


def test_greedy_seed_is_conflict_free(random_graphs):
    rnd = random.Random(1)
    for g in random_graphs:
        chrom = greedy_degree_coloring(g, rnd)
        assert UNCOLORED not in chrom
        assert count_conflicts(g, chrom) == 0
        assert count_colors(chrom) <= g.max_degree + 1


def test_greedy_seed_on_complete_graph(k4):
    chrom = greedy_degree_coloring(k4, random.Random(3))
    assert sorted(chrom) == [0, 1, 2, 3]


def test_greedy_seed_on_empty_graph(empty5):
    assert greedy_degree_coloring(empty5, random.Random(3)) == [0] * 5


def test_greedy_seed_colors_highest_degree_first():
    from evocolor.graph_io import GraphData

    # star: the hub is processed first and takes color 0
    g = GraphData.from_edges(5, [(4, 0), (4, 1), (4, 2), (4, 3)])
    chrom = greedy_degree_coloring(g, random.Random(0))
    assert chrom == [1, 1, 1, 1, 0]


def test_hybrid_population(cycle5):
    pop = hybrid_population(cycle5, 8, random.Random(2))
    assert len(pop) == 8
    assert count_conflicts(cycle5, pop[0]) == 0
    for ind in pop[1:]:
        assert len(ind) == 5
        assert all(0 <= c < 5 for c in ind)


def test_random_population_in_range(cycle5):
    pop = random_population(cycle5, 6, random.Random(2))
    assert len(pop) == 6
    assert all(0 <= c < 5 for ind in pop for c in ind)


def test_population_members_are_independent(cycle5):
    pop = hybrid_population(cycle5, 3, random.Random(2))
    pop[1][0] = 99
    assert all(ind[0] != 99 for ind in (pop[0], pop[2]))


def test_seeders_registry():
    assert set(SEEDERS) == {"hybrid", "random"}


def test_greedy_seed_ties_broken_randomly():
    from evocolor.graph_io import GraphData

    # every vertex of a cycle has degree 2, so only the tiebreak decides the order
    g = GraphData.from_edges(6, [(i, (i + 1) % 6) for i in range(6)])
    colorings = {tuple(greedy_degree_coloring(g, random.Random(seed))) for seed in range(20)}
    assert len(colorings) > 1
    for chrom in colorings:
        assert count_conflicts(g, list(chrom)) == 0
