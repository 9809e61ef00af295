"""An undirected graph stored as an adjacency matrix of edge weights."""

from __future__ import annotations


class MatrixGraph:
    """An undirected graph on vertices ``0..size-1``; weight 0 means no edge."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")
        self.size = size
        self.edges = 0
        self.matrix: list[list[int]] = [[0] * size for _ in range(size)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.size:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, v1: int, v2: int, weight: int = 1) -> None:
        """Join two vertices with an edge of the given weight."""
        self._check_vertex(v1)
        self._check_vertex(v2)
        self.edges += 1
        self.matrix[v1][v2] = weight
        self.matrix[v2][v1] = weight

    def __str__(self) -> str:
        vertices = range(self.size)
        lines = [
            "Graph: ",
            "     " + "".join(f"{v} " for v in vertices),
            "     " + "| " * self.size,
        ]
        lines.extend(
            f"{v}--  " + "".join(f"{weight} " for weight in row)
            for v, row in enumerate(self.matrix)
        )
        return "\n".join(lines) + "\n"