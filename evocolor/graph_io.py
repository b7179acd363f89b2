from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class GraphData:
    """
    Read-only graph view in 0-based indexing.
    matrix: owned copy of the boolean adjacency matrix
    adjacency: ordered neighbor list per vertex
    degree: number of neighbors per vertex
    edges: undirected edges (u, v) with u < v
    """
    n_vertices: int
    matrix: Tuple[Tuple[bool, ...], ...]
    adjacency: List[Tuple[int, ...]]
    degree: List[int]
    edges: List[Tuple[int, int]]

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "GraphData":
        """
        Build the view from a square adjacency matrix in O(V^2).
        The matrix is copied, later changes to the caller's rows are not seen.
        """
        n = len(matrix)
        owned = tuple(tuple(bool(x) for x in row) for row in matrix)
        for i, row in enumerate(owned):
            if len(row) != n:
                raise ValueError(f"Adjacency matrix must be square: row {i} has {len(row)} entries, expected {n}")

        adjacency: List[Tuple[int, ...]] = [
            tuple(j for j in range(n) if owned[i][j]) for i in range(n)
        ]
        degree = [len(nbs) for nbs in adjacency]
        edges = [(u, v) for u in range(n) for v in adjacency[u] if v > u]
        return cls(n_vertices=n, matrix=owned, adjacency=adjacency, degree=degree, edges=edges)

    @classmethod
    def from_edges(cls, n_vertices: int, edges: Sequence[Tuple[int, int]]) -> "GraphData":
        """0-based edge list -> graph view. Self-loops are dropped."""
        rows = [[0] * n_vertices for _ in range(n_vertices)]
        for u, v in edges:
            if u == v:
                continue
            rows[u][v] = 1
            rows[v][u] = 1
        return cls.from_matrix(rows)

    @property
    def max_degree(self) -> int:
        return max(self.degree) if self.degree else 0


def read_col(path: str) -> GraphData:
    """
    Read a DIMACS .col graph coloring instance.

    Typical format:
      c comment lines
      p edge <n_vertices> <n_edges>   (or: p <n_vertices> <n_edges>)
      e u v     (1-based vertex ids)

    We convert vertices to 0-based indexing.
    Raises ValueError with file and line number on malformed input.
    """
    n_vertices: Optional[int] = None
    edges: List[Tuple[int, int]] = []

    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("c"):
                continue

            parts = line.split()
            if parts[0] == "p":
                # optional format word ("edge", "col"), then the vertex count
                fields = parts[1:]
                if fields and fields[0].isalpha():
                    fields = fields[1:]
                try:
                    n_vertices = int(fields[0])
                except (IndexError, ValueError):
                    raise ValueError(f"{path}:{lineno}: malformed problem line: {line!r}") from None
                if n_vertices < 0:
                    raise ValueError(f"{path}:{lineno}: negative vertex count: {line!r}")
            elif parts[0] == "e":
                if n_vertices is None:
                    raise ValueError(f"{path}:{lineno}: edge line before problem line")
                try:
                    u = int(parts[1]) - 1
                    v = int(parts[2]) - 1
                except (IndexError, ValueError):
                    raise ValueError(f"{path}:{lineno}: malformed edge line: {line!r}") from None
                if not (0 <= u < n_vertices and 0 <= v < n_vertices):
                    raise ValueError(f"{path}:{lineno}: vertex out of range 1..{n_vertices}: {line!r}")
                if u == v:
                    continue
                a, b = (u, v) if u < v else (v, u)
                edges.append((a, b))

    if n_vertices is None:
        raise ValueError(f"Could not parse 'p edge n m' line in file: {path}")

    # remove duplicates (some files can have repeated edges)
    edges = sorted(set(edges))

    return GraphData.from_edges(n_vertices, edges)
