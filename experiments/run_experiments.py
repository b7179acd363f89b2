from __future__ import annotations

import argparse
import csv
import glob
import logging
import os
import random
import sys
from typing import Dict, Any, List, Optional

import matplotlib.pyplot as plt

from evocolor.graph_io import GraphData, read_col
from evocolor.generator import generate_graph, write_col
from evocolor.ga_runner import GAConfig, run_ga
from evocolor.report import write_report

logger = logging.getLogger(__name__)

INSTANCE_PATTERNS = ("*.col", "*.txt")


def ensure_dirs(results_dir: str, plots_dir: str):
    os.makedirs(results_dir, exist_ok=True)
    os.makedirs(plots_dir, exist_ok=True)


def save_csv(path: str, rows: List[Dict[str, Any]]):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)


def plot_history(path: str, y: List[float], xlabel: str, ylabel: str, title: str):
    plt.figure()
    plt.plot(y)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.title(title)
    plt.savefig(path, dpi=200)
    plt.close()


def collect_instances(graphs: List[str], instances_dir: Optional[str]) -> List[str]:
    paths = list(graphs)
    if instances_dir:
        for pattern in INSTANCE_PATTERNS:
            paths.extend(sorted(glob.glob(os.path.join(instances_dir, pattern))))
    return paths


def instance_tags(paths: List[str]) -> List[str]:
    """File name with extension; repeated names get a _<n> suffix."""
    seen: Dict[str, int] = {}
    tags = []
    for path in paths:
        name = os.path.basename(path)
        seen[name] = seen.get(name, 0) + 1
        tags.append(name if seen[name] == 1 else f"{name}_{seen[name]}")
    return tags


def generate_instances(count: int, n_vertices: int, density: int, out_dir: str, seed: Optional[int]) -> List[str]:
    rnd = random.Random(seed)
    paths = []
    for i in range(1, count + 1):
        graph = generate_graph(n_vertices, density, rnd)
        path = os.path.join(out_dir, f"Instance{i}_rand{n_vertices}_d{density}.col")
        write_col(graph, path, comment=f"random graph: {n_vertices} vertices, density level {density}")
        paths.append(path)
        print(f"Generated: {path} ({len(graph.edges)} edges)")
    return paths


def run_instance(graph: GraphData, tag: str, cfg: GAConfig, seed: Optional[int],
                 results_dir: str, plots_dir: str) -> Dict[str, Any]:
    res = run_ga(graph, cfg, seed=seed)
    conf = res.best_eval.conflicts
    colors_used = res.chromatic_estimate

    out_txt = os.path.join(results_dir, f"output_{tag}.txt")
    write_report(out_txt, res.best_chrom, colors_used)

    if res.best_score_history:
        out_png = os.path.join(plots_dir, f"{tag}_fitness.png")
        plot_history(
            out_png,
            res.best_score_history,
            xlabel="Generation",
            ylabel="Best score",
            title=f"{tag} GA | best conflicts={conf}, colors={colors_used}",
        )
        print(f"Saved: {out_png}")

    print(f"[{tag}] GA: conflicts={conf} colors={colors_used} gens={res.generations_run}")
    print(f"Saved: {out_txt}")

    return {
        "dataset": tag,
        "vertices": graph.n_vertices,
        "edges": len(graph.edges),
        "pop_size": cfg.pop_size,
        "generations_target": cfg.generations,
        "generations_run": res.generations_run,
        "stopped_early": res.stopped_early,
        "mutation_rate": cfg.mutation_rate,
        "elitism": cfg.elitism,
        "patience": cfg.patience,
        "seeding": cfg.seeding,
        "crossover": cfg.crossover,
        "best_conflicts": conf,
        "best_colors_used": colors_used,
        "best_score": res.best_eval.score,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Batch genetic-algorithm graph coloring")
    parser.add_argument("--graph", action="append", default=[], help="Path to .col file (repeatable)")
    parser.add_argument("--instances", default=None, help="Directory of .col/.txt instances")
    parser.add_argument("--generate", type=int, default=0, help="Number of random instances to generate")
    parser.add_argument("--vertices", type=int, default=100, help="Vertices per generated instance")
    parser.add_argument("--density", type=int, default=3, help="Density level 1..5 of generated instances")
    parser.add_argument("--instances_out", default="instances", help="Where generated instances are written")

    parser.add_argument("--pop_size", type=int, default=500)
    parser.add_argument("--generations", type=int, default=10000)
    parser.add_argument("--mutation_rate", type=float, default=0.2)
    parser.add_argument("--elitism", type=int, default=2)
    parser.add_argument("--patience", type=int, default=None,
                        help="Stop after this many generations without improvement")
    parser.add_argument("--seeding", choices=["hybrid", "random"], default="hybrid")
    parser.add_argument("--crossover", choices=["window", "one_point"], default="window")
    parser.add_argument("--seed", type=int, default=None)

    parser.add_argument("--results", default="results")
    parser.add_argument("--plots", default="plots")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cfg = GAConfig(
        pop_size=args.pop_size,
        generations=args.generations,
        mutation_rate=args.mutation_rate,
        elitism=args.elitism,
        patience=args.patience,
        seeding=args.seeding,
        crossover=args.crossover,
    )
    try:
        cfg.validate()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    ensure_dirs(args.results, args.plots)

    paths = collect_instances(args.graph, args.instances)
    if args.generate > 0:
        paths.extend(generate_instances(args.generate, args.vertices, args.density, args.instances_out, args.seed))
    if not paths:
        logger.error("No instances given: use --graph, --instances or --generate")
        return 2

    rows: List[Dict[str, Any]] = []
    failed = 0
    for path, tag in zip(paths, instance_tags(paths)):
        print(f"\n=== Processing {path} ===")
        try:
            graph = read_col(path)
        except (OSError, ValueError) as e:
            logger.error("Skipping %s: %s", path, e)
            failed += 1
            continue
        rows.append(run_instance(graph, tag, cfg, args.seed, args.results, args.plots))

    if rows:
        out_csv = os.path.join(args.results, "summary.csv")
        save_csv(out_csv, rows)
        print(f"Saved: {out_csv}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
