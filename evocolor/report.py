from __future__ import annotations

import os
from typing import List, Tuple

HEADER = "Chromatic number estimate:"


def write_report(path: str, coloring: List[int], n_colors: int) -> None:
    """
    Human-readable result file:
      Chromatic number estimate: <k>
      Coloring:
      <c0> <c1> ... (vertex order)
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{HEADER} {n_colors}\n")
        f.write("Coloring:\n")
        f.write(" ".join(str(c) for c in coloring))
        f.write("\n")


def read_report(path: str) -> Tuple[int, List[int]]:
    with open(path, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()

    if len(lines) < 2 or not lines[0].startswith(HEADER):
        raise ValueError(f"Not a coloring report: {path}")

    n_colors = int(lines[0][len(HEADER):].strip())
    coloring = [int(tok) for tok in lines[2].split()] if len(lines) > 2 else []
    return n_colors, coloring
