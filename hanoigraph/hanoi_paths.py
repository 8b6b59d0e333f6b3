"""Shortest paths between four-disk Tower of Hanoi configurations.

Configurations use 1-based peg numbers, and disk 0 is the smallest disk.
Both Bellman-Ford and Dijkstra return predecessor lists, with ``None``
marking a vertex that has no predecessor.
"""

from __future__ import annotations

import heapq
import itertools
import math
import time
from typing import Sequence

NUM_DISKS = 4
NUM_PEGS = 3
NUM_CONFIGURATIONS = NUM_PEGS**NUM_DISKS

Configuration = tuple[int, ...]
Adjacency = Sequence[Sequence[int]]
Predecessors = Sequence[int | None]


def generate_configurations() -> list[Configuration]:
    """All configurations in base-3 order, disk 0 varying fastest."""
    return [
        tuple(reversed(pegs))
        for pegs in itertools.product(range(1, NUM_PEGS + 1), repeat=NUM_DISKS)
    ]


def is_edge(first: Configuration, second: Configuration) -> bool:
    """Whether exactly one disk moved and no smaller disk blocks it.

    The moved disk must have no smaller disk on its peg before the move
    and none on its peg after the move.
    """
    if len(first) != len(second):
        raise ValueError("configurations differ in number of disks")
    changed = [
        disk for disk, (before, after) in enumerate(zip(first, second)) if before != after
    ]
    if len(changed) != 1:
        return False
    disk = changed[0]
    return first[disk] not in first[:disk] and second[disk] not in second[:disk]


def build_adjacency(configurations: Sequence[Configuration]) -> list[list[int]]:
    """Adjacency matrix with 1 for every legal move between configurations."""
    return [
        [int(is_edge(first, second)) for second in configurations]
        for first in configurations
    ]


def _check_vertex(adjacency: Adjacency, vertex: int) -> None:
    if not 0 <= vertex < len(adjacency):
        raise ValueError(f"vertex out of range: {vertex}")


def bellman_ford(adjacency: Adjacency, source: int) -> list[int | None]:
    """Predecessor list of shortest paths from ``source`` (Ford-Moore-Bellman)."""
    _check_vertex(adjacency, source)
    size = len(adjacency)
    distance = [math.inf] * size
    distance[source] = 0
    predecessors: list[int | None] = [None] * size

    for _ in range(size - 1):
        changed = False
        for j, row in enumerate(adjacency):
            if distance[j] == math.inf:
                continue
            for k, value in enumerate(row):
                if value == 1 and distance[j] + 1 < distance[k]:
                    distance[k] = distance[j] + 1
                    predecessors[k] = j
                    changed = True
        if not changed:
            break
    return predecessors


def dijkstra(adjacency: Adjacency, source: int) -> list[int | None]:
    """Predecessor list of shortest paths from ``source``.

    Among vertices at equal distance the lowest index is settled first.
    """
    _check_vertex(adjacency, source)
    size = len(adjacency)
    distance = [math.inf] * size
    distance[source] = 0
    predecessors: list[int | None] = [None] * size
    visited = [False] * size
    queue = [(0, source)]

    while queue:
        dist, u = heapq.heappop(queue)
        if visited[u]:
            continue
        visited[u] = True
        for v, value in enumerate(adjacency[u]):
            if value == 1 and dist + 1 < distance[v]:
                distance[v] = dist + 1
                predecessors[v] = u
                heapq.heappush(queue, (dist + 1, v))
    return predecessors


def path_to(predecessors: Predecessors, target: int) -> list[int]:
    """Follow predecessors back from ``target``; returns the path in order."""
    if not 0 <= target < len(predecessors):
        raise ValueError(f"vertex out of range: {target}")
    path = [target]
    while (previous := predecessors[path[-1]]) is not None:
        path.append(previous)
        if len(path) > len(predecessors):
            raise ValueError("predecessor list contains a cycle")
    path.reverse()
    return path


def format_path(predecessors: Predecessors, source: int, target: int) -> str:
    """Describe the path ending at ``target`` and its number of moves."""
    path = path_to(predecessors, target)
    return "\n".join(
        [
            f"Caminho minimo entre configuracoes {source} e {target}:",
            " ".join(str(vertex) for vertex in path),
            f"Quantidade de movimentos: {len(path) - 1}",
        ]
    )


def format_configurations(configurations: Sequence[Configuration]) -> str:
    """One line per configuration listing the peg of each disk."""
    return "\n".join(
        f"Configuracao {index}: " + "".join(f"{peg} " for peg in config)
        for index, config in enumerate(configurations)
    )


def format_matrix(adjacency: Adjacency) -> str:
    """The adjacency matrix with row and column indices."""
    lines = [
        "Matriz de Adjacencia:",
        "   " + "".join(f"{column:2d} " for column in range(len(adjacency))),
    ]
    lines.extend(
        f"{index:2d} " + "".join(f"{value:2d} " for value in row)
        for index, row in enumerate(adjacency)
    )
    return "\n".join(lines)


def timing_report(adjacency: Adjacency, source: int, runs: int = 1000) -> str:
    """Time both algorithms over ``runs`` repetitions and summarise in ms."""
    if runs <= 0:
        raise ValueError("runs must be positive")
    dijkstra_ms = 0.0
    bellman_ms = 0.0
    for _ in range(runs):
        start = time.perf_counter()
        dijkstra(adjacency, source)
        dijkstra_ms += (time.perf_counter() - start) * 1000
        start = time.perf_counter()
        bellman_ford(adjacency, source)
        bellman_ms += (time.perf_counter() - start) * 1000

    return "\n".join(
        [
            "==== TESTES DE TEMPO ====",
            f"Realizando {runs} testes...",
            "",
            f"Tempo total Dijkstra: {dijkstra_ms:.6f} ms",
            f"Tempo medio Dijkstra: {dijkstra_ms / runs:.6f} ms",
            "",
            f"Tempo total Ford-Moore-Bellman: {bellman_ms:.6f} ms",
            f"Tempo medio Ford-Moore-Bellman: {bellman_ms / runs:.6f} ms",
            "",
            "==== FIM DOS TESTES ====",
        ]
    )


_MENU = """

==== MENU ====
1. Imprimir configuracoes do grafo
2. Imprimir matriz de adjacencia
3. Encontrar caminho minimo com Ford-Moore-Bellman
4. Encontrar caminho minimo com Dijkstra
5. Testes de tempo
0. Sair"""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu; returns the exit status."""
    configurations = generate_configurations()
    adjacency = build_adjacency(configurations)
    origin = 0
    destination = len(configurations) - 1

    while True:
        print(_MENU)
        try:
            text = input("Escolha uma opcao: ")
        except EOFError:
            print("Saindo...")
            return 0
        try:
            option = int(text.strip())
        except ValueError:
            option = None

        if option == 0:
            print("Saindo...")
            return 0
        if option == 1:
            print(format_configurations(configurations))
        elif option == 2:
            print("\n" + format_matrix(adjacency))
        elif option in (3, 4):
            if option == 3:
                name, algorithm = "Dijkstra", dijkstra
            else:
                name, algorithm = "Ford-Moore-Bellman", bellman_ford
            print(f"Encontrando caminho minimo com {name}...")
            start = time.perf_counter()
            predecessors = algorithm(adjacency, origin)
            elapsed_ms = (time.perf_counter() - start) * 1000
            print("\n" + format_path(predecessors, origin, destination))
            print(f"Tempo de execucao ({name}): {elapsed_ms:.6f} ms")
        elif option == 5:
            print("\n" + timing_report(adjacency, origin))
        else:
            print("Opcao invalida!")