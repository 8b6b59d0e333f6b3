"""Graph stored as an adjacency matrix with 1-based vertex numbers."""

from __future__ import annotations

from dataclasses import dataclass, replace


class MatrixGraphError(Exception):
    """Raised when an operation refers to missing vertices or edges."""


@dataclass
class Vertex:
    """Bookkeeping for one vertex: its degree and its weight."""

    degree: int = 0
    weight: int = 0


class AdjacencyMatrixGraph:
    """Optionally weighted, optionally directed graph on a square matrix.

    A cell holds the weight of the edge it stands for, or ``None`` when there
    is no edge. An undirected graph keeps the matrix symmetric.
    """

    def __init__(self, weighted: bool = False, directed: bool = False, vertices: int = 0):
        if vertices < 0:
            raise MatrixGraphError(f"negative number of vertices: {vertices}")
        self.weighted = weighted
        self.directed = directed
        self._vertices: list[Vertex] = [Vertex() for _ in range(vertices)]
        self._cells: list[list[int | None]] = [
            [None] * vertices for _ in range(vertices)
        ]

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, vertex: int) -> Vertex:
        self._check(vertex)
        return replace(self._vertices[vertex - 1])

    def _check(self, vertex: int) -> None:
        if not 1 <= vertex <= len(self._vertices):
            raise MatrixGraphError(f"no such vertex: {vertex}")

    def _set(self, origin: int, target: int, weight: int) -> None:
        row = self._cells[origin - 1]
        if row[target - 1] is None:
            self._vertices[origin - 1].degree += 1
        row[target - 1] = weight

    def _clear(self, origin: int, target: int) -> None:
        row = self._cells[origin - 1]
        if row[target - 1] is not None:
            row[target - 1] = None
            self._vertices[origin - 1].degree -= 1

    def add_edge(self, origin: int, target: int, weight: int = 1) -> None:
        """Insert an edge; an unweighted graph accepts only weight 1."""
        self._check(origin)
        self._check(target)
        if not self.weighted and weight != 1:
            raise MatrixGraphError("an unweighted graph only takes edges of weight 1")
        if origin == target and not self.directed:
            if self._cells[origin - 1][origin - 1] is None:
                self._vertices[origin - 1].degree += 2
            self._cells[origin - 1][origin - 1] = weight
            return
        self._set(origin, target, weight)
        if not self.directed:
            self._set(target, origin, weight)

    def remove_edge(self, origin: int, target: int) -> None:
        """Remove the edge between two vertices, both ways if undirected."""
        self._check(origin)
        self._check(target)
        if self._cells[origin - 1][target - 1] is None:
            raise MatrixGraphError(f"no edge from {origin} to {target}")
        if origin == target and not self.directed:
            self._cells[origin - 1][origin - 1] = None
            self._vertices[origin - 1].degree -= 2
            return
        self._clear(origin, target)
        if not self.directed:
            self._clear(target, origin)

    def add_vertex(self, weight: int = 0) -> int:
        """Append an isolated vertex; returns its number."""
        for row in self._cells:
            row.append(None)
        self._vertices.append(Vertex(weight=weight))
        self._cells.append([None] * len(self._vertices))
        return len(self._vertices)

    def remove_vertex(self, vertex: int) -> None:
        """Delete a vertex with all edges touching it and renumber the rest."""
        self._check(vertex)
        for number, row in enumerate(self._cells, start=1):
            if number != vertex and row[vertex - 1] is not None:
                self._vertices[number - 1].degree -= 1
        del self._cells[vertex - 1]
        del self._vertices[vertex - 1]
        for row in self._cells:
            del row[vertex - 1]

    def has_edge(self, origin: int, target: int) -> bool:
        """Whether an edge leads from ``origin`` to ``target``."""
        self._check(origin)
        self._check(target)
        return self._cells[origin - 1][target - 1] is not None

    def edge_weight(self, origin: int, target: int) -> int:
        """Weight of the edge from ``origin`` to ``target``."""
        self._check(origin)
        self._check(target)
        weight = self._cells[origin - 1][target - 1]
        if weight is None:
            raise MatrixGraphError(f"no edge from {origin} to {target}")
        return weight

    def degree(self, vertex: int) -> int:
        """Degree of the vertex (out-degree in a directed graph)."""
        self._check(vertex)
        return self._vertices[vertex - 1].degree

    def render(self) -> str:
        """Text drawing of the matrix with 1 for an edge and 0 otherwise."""
        size = len(self._vertices)
        lines = [
            "Matriz de Adjacencia:",
            "   " + "".join(f"{column} " for column in range(1, size + 1)),
            "   " + "__" * size,
        ]
        lines.extend(
            f"{number}| " + "".join(f"{int(cell is not None)} " for cell in row)
            for number, row in enumerate(self._cells, start=1)
        )
        return "\n".join(lines)