"""Graph stored as adjacency lists with 1-based vertex numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class GraphError(Exception):
    """Raised when an operation refers to missing vertices or edges."""


@dataclass(frozen=True)
class Edge:
    """An edge towards ``target`` carrying ``weight``."""

    target: int
    weight: int = 1


class AdjacencyListGraph:
    """Optionally weighted, optionally directed graph on adjacency lists.

    Each vertex keeps its edges newest first. In an undirected graph every
    edge is stored in both endpoint lists.
    """

    def __init__(self, weighted: bool = False, directed: bool = False, vertices: int = 0):
        if vertices < 0:
            raise GraphError(f"negative number of vertices: {vertices}")
        self.weighted = weighted
        self.directed = directed
        self._weights: list[int] = [0] * vertices
        self._edges: list[list[Edge]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._edges)

    def _check(self, vertex: int) -> None:
        if not 1 <= vertex <= len(self._edges):
            raise GraphError(f"no such vertex: {vertex}")

    def _drop(self, origin: int, target: int) -> None:
        self._edges[origin - 1] = [
            edge for edge in self._edges[origin - 1] if edge.target != target
        ]

    def add_edge(self, origin: int, target: int, weight: int = 1) -> None:
        """Insert an edge; an unweighted graph accepts only weight 1."""
        self._check(origin)
        self._check(target)
        if not self.weighted and weight != 1:
            raise GraphError("an unweighted graph only takes edges of weight 1")
        self._edges[origin - 1].insert(0, Edge(target, weight))
        if not self.directed:
            self._edges[target - 1].insert(0, Edge(origin, weight))

    def remove_edge(self, origin: int, target: int) -> None:
        """Remove an edge.

        A directed graph loses its newest edge from ``origin`` to ``target``;
        an undirected graph loses every edge between the two vertices.
        """
        self._check(origin)
        self._check(target)
        edges = self._edges[origin - 1]
        position = next(
            (index for index, edge in enumerate(edges) if edge.target == target), None
        )
        if position is None:
            raise GraphError(f"no edge from {origin} to {target}")
        if self.directed:
            del edges[position]
        else:
            self._drop(origin, target)
            self._drop(target, origin)

    def add_vertex(self, weight: int = 0) -> int:
        """Append an isolated vertex; returns its number."""
        self._weights.append(weight)
        self._edges.append([])
        return len(self._edges)

    def remove_vertex(self, vertex: int) -> None:
        """Delete a vertex with all edges touching it and renumber the rest."""
        self._check(vertex)
        del self._edges[vertex - 1]
        del self._weights[vertex - 1]
        self._edges = [
            [
                Edge(edge.target - (edge.target > vertex), edge.weight)
                for edge in edges
                if edge.target != vertex
            ]
            for edges in self._edges
        ]

    def degree(self, vertex: int) -> int:
        """Number of edges stored in the vertex's list."""
        self._check(vertex)
        return len(self._edges[vertex - 1])

    def neighbors(self, vertex: int) -> list[Edge]:
        """Edges leaving ``vertex``, newest first."""
        self._check(vertex)
        return list(self._edges[vertex - 1])

    def render(self) -> str:
        """Text listing of every vertex's adjacency list."""
        lines = ["Lista de Adjacencia do Grafo:"]
        for number, edges in enumerate(self._edges, start=1):
            links = "".join(
                f"-> {edge.target} (peso {edge.weight}) "
                if self.weighted
                else f"-> {edge.target} "
                for edge in edges
            )
            lines.append(f"Vertice {number}: {links}-> NULL")
        return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small example graph and print it as edges change."""
    graph = AdjacencyListGraph(weighted=False, directed=False, vertices=5)
    print("Grafo criado com sucesso!")
    print(f"Numero de vertices: {len(graph)}")
    print(f"Eh ponderado: {int(graph.weighted)}")
    print(f"Eh digrafo: {int(graph.directed)}")

    print("\n\n" + graph.render())

    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    print("\n\n" + graph.render())

    graph.remove_edge(1, 2)
    print("\nAresta (1, 2) removida.")
    print("\n\n" + graph.render())
    return 0