"""State graph of the four-disk Tower of Hanoi and its shortest solution."""

from __future__ import annotations

import heapq
import time
from dataclasses import dataclass
from typing import Iterable, Sequence

NUM_DISKS = 4
NUM_PEGS = 3
NUM_CONFIGURATIONS = NUM_PEGS**NUM_DISKS
THEORETICAL_MINIMUM = (1 << NUM_DISKS) - 1

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Configuration:
    """Placement of every disk: ``disks[i]`` is the peg holding disk ``i``."""

    disks: tuple[int, ...]

    def __post_init__(self) -> None:
        disks = tuple(self.disks)
        if len(disks) != NUM_DISKS:
            raise ValueError(f"expected {NUM_DISKS} disks, got {len(disks)}")
        if any(not 0 <= peg < NUM_PEGS for peg in disks):
            raise ValueError(f"pegs must lie in 0..{NUM_PEGS - 1}: {disks}")
        object.__setattr__(self, "disks", disks)


INITIAL = Configuration((0,) * NUM_DISKS)
FINAL = Configuration((NUM_PEGS - 1,) * NUM_DISKS)


def config_to_index(config: Configuration) -> int:
    """Encode a configuration as a base-3 number, disk 0 least significant."""
    return sum(peg * NUM_PEGS**position for position, peg in enumerate(config.disks))


def index_to_config(index: int) -> Configuration:
    """Decode an index produced by :func:`config_to_index`."""
    if not 0 <= index < NUM_CONFIGURATIONS:
        raise ValueError(f"index out of range: {index}")
    pegs = []
    for _ in range(NUM_DISKS):
        index, peg = divmod(index, NUM_PEGS)
        pegs.append(peg)
    return Configuration(tuple(pegs))


def is_valid_move(origin: Configuration, target: Configuration) -> bool:
    """Whether ``target`` follows from ``origin`` by one legal disk move.

    A disk with a higher index is smaller; the moved disk must be free on its
    peg and may not land on a peg that holds a smaller disk.
    """
    changed = [
        disk
        for disk, (before, after) in enumerate(zip(origin.disks, target.disks))
        if before != after
    ]
    if len(changed) != 1:
        return False
    disk = changed[0]
    from_peg = origin.disks[disk]
    to_peg = target.disks[disk]
    if from_peg in origin.disks[disk + 1 :]:
        return False
    return to_peg not in target.disks[disk + 1 :]


def build_adjacency_matrix() -> list[list[int]]:
    """Build the 81x81 matrix with weight 1 for every legal move."""
    configs = [index_to_config(i) for i in range(NUM_CONFIGURATIONS)]
    return [
        [
            1 if i != j and is_valid_move(first, second) else 0
            for j, second in enumerate(configs)
        ]
        for i, first in enumerate(configs)
    ]


def shortest_path(matrix: Matrix, origin: int, target: int) -> list[int]:
    """Dijkstra over a weight matrix; returns the vertex path or ``[]``.

    Ties are broken towards the lowest vertex index.
    """
    size = len(matrix)
    for vertex in (origin, target):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex out of range: {vertex}")

    distance: dict[int, int] = {origin: 0}
    previous: dict[int, int] = {}
    visited: set[int] = set()
    queue = [(0, origin)]

    while queue:
        dist, u = heapq.heappop(queue)
        if u in visited:
            continue
        visited.add(u)
        if u == target:
            break
        for v, weight in enumerate(matrix[u]):
            if v in visited or weight <= 0:
                continue
            candidate = dist + weight
            if candidate < distance.get(v, candidate + 1):
                distance[v] = candidate
                previous[v] = u
                heapq.heappush(queue, (candidate, v))

    if target not in distance:
        return []
    path = [target]
    while path[-1] in previous:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def describe_configuration(config: Configuration) -> str:
    """One-line description naming the peg of every disk (1-based)."""
    placements = " ".join(
        f"D{disk + 1}->P{peg + 1}" for disk, peg in enumerate(config.disks)
    )
    return f"Configuracao: {placements}"


def render_pegs(config: Configuration) -> str:
    """Draw the pegs with their disks, top level first."""
    stacks: list[list[int]] = [[] for _ in range(NUM_PEGS)]
    for disk in reversed(range(NUM_DISKS)):
        stacks[config.disks[disk]].append(disk + 1)

    lines = ["Estado visual dos pinos:"]
    for level in reversed(range(NUM_DISKS)):
        lines.append(
            "".join(
                f"  D{stack[level]}  " if level < len(stack) else "  |   "
                for stack in stacks
            )
        )
    lines.append(" --- " * NUM_PEGS)
    lines.append("".join(f" P{peg + 1}  " for peg in range(NUM_PEGS)))
    return "\n".join(lines)


def _count_connections(matrix: Matrix) -> int:
    return sum(value == 1 for row in matrix for value in row)


def render_matrix(matrix: Matrix) -> str:
    """Full matrix listing followed by its statistics."""
    size = len(matrix)
    lines = [
        f"=== MATRIZ DE ADJACENCIA {size}x{size} ===",
        "    " + " ".join(f"{j:2d}" for j in range(size)),
        "   " + "---" * size,
    ]
    lines.extend(
        f"{i:2d}|" + " ".join(f"{value:2d}" for value in row)
        for i, row in enumerate(matrix)
    )
    lines += [
        "",
        "Estatisticas da matriz:",
        f"Tamanho: {size}x{size}",
        f"Total de conexoes (arestas): {_count_connections(matrix)}",
        f"Total de elementos: {size * size}",
    ]
    return "\n".join(lines)


def _pegs_list(config: Configuration) -> str:
    return "[" + ",".join(str(peg) for peg in config.disks) + "]"


def render_connections(matrix: Matrix) -> str:
    """List every existing connection of the configuration matrix."""
    lines = [
        "=== CONEXOES DA MATRIZ DE ADJACENCIA ===",
        "Mostrando apenas conexoes existentes (valor 1):",
        "",
    ]
    count = 0
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value != 1:
                continue
            count += 1
            lines.append(
                f"Conexao {count}: {_pegs_list(index_to_config(i))} -> "
                f"{_pegs_list(index_to_config(j))} (indice {i} -> {j})"
            )
    lines += ["", f"Total de conexoes encontradas: {count}"]
    return "\n".join(lines)


def _format_path(path: Iterable[int]) -> str:
    return "Caminho: " + " -> ".join(str(vertex) for vertex in path)


def _problem_text() -> str:
    """Initial and final configurations, described and drawn."""
    parts = []
    for title, config in (
        ("\nConfiguracao inicial:", INITIAL),
        ("Configuracao final:", FINAL),
    ):
        parts.append(
            f"{title}\n{describe_configuration(config)}\n\n{render_pegs(config)}\n\n"
        )
    return "".join(parts)


def _timed_build() -> tuple[list[list[int]], float]:
    start = time.perf_counter()
    print("Criando matriz de adjacencia...")
    matrix = build_adjacency_matrix()
    print("Matriz de adjacencia criada!")
    return matrix, time.perf_counter() - start


def _timed_solve(matrix: Matrix) -> tuple[list[int], float]:
    start = time.perf_counter()
    path = shortest_path(matrix, config_to_index(INITIAL), config_to_index(FINAL))
    return path, time.perf_counter() - start


_MENU = """
=== MENU TORRE DE HANOI ===
1. Criar matriz de adjacencia
2. Mostrar matriz de adjacencia (81x81)
3. Mostrar conexoes da matriz
4. Encontrar menor caminho (Dijkstra)
5. Mostrar configuracao inicial e final
6. Executar tudo (opcao completa)
0. Sair"""

_NO_MATRIX = "Erro: Matriz ainda nao foi criada! Use a opcao 1 primeiro."


def _read_option() -> int | None:
    print(_MENU)
    text = input("Escolha uma opcao: ")
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu; returns the exit status."""
    print("=== TORRE DE HANOI COM 4 DISCOS ===")
    matrix: list[list[int]] | None = None

    while True:
        try:
            option = _read_option()
        except EOFError:
            print("Encerrando programa...")
            return 0

        if option == 0:
            print("Encerrando programa...")
            return 0

        if option == 1:
            if matrix is None:
                print("\nCriando matriz de adjacencia...")
                matrix, elapsed = _timed_build()
                print("Matriz criada com sucesso!")
                print(f"Tempo gasto: {elapsed:.6f} segundos")
            else:
                print("Matriz ja foi criada!")

        elif option == 2:
            print("\n" + render_matrix(matrix) if matrix is not None else _NO_MATRIX)

        elif option == 3:
            print("\n" + render_connections(matrix) if matrix is not None else _NO_MATRIX)

        elif option == 4:
            if matrix is None:
                print(_NO_MATRIX)
                continue
            print("\nEncontrando menor caminho usando Dijkstra...")
            path, elapsed = _timed_solve(matrix)
            if not path:
                print("Nao foi possivel encontrar uma solucao!")
                continue
            moves = len(path) - 1
            print("\nSolucao encontrada!")
            print(f"Numero de movimentos: {moves}")
            print(f"Tempo do algoritmo: {elapsed:.6f} segundos")
            print(f"Numero minimo teorico: {THEORETICAL_MINIMUM} movimentos")
            if moves == THEORETICAL_MINIMUM:
                print("✓ Solucao otima encontrada!")
            try:
                answer = input("\nDeseja ver o caminho completo? (s/n): ")
            except EOFError:
                answer = ""
            if answer.strip()[:1] in ("s", "S"):
                print("\nCaminho pelos vertices:")
                print("=" * 41)
                print(_format_path(path))
                print("=" * 41)

        elif option == 5:
            print("\nConfiguracoes do problema:")
            print(_problem_text(), end="")

        elif option == 6:
            print("\nExecutando solucao completa...")
            print(_problem_text(), end="")
            if matrix is None:
                matrix, elapsed = _timed_build()
                print(f"Tempo para criar matriz: {elapsed:.6f} segundos\n")
            print("Executando algoritmo de Dijkstra...")
            path, elapsed = _timed_solve(matrix)
            if not path:
                print("Nao foi possivel encontrar uma solucao!")
                continue
            moves = len(path) - 1
            print("\nSolucao encontrada!")
            print(f"Numero minimo de movimentos: {moves}")
            print(f"Tempo do algoritmo de Dijkstra: {elapsed:.6f} segundos\n")
            print("Caminho pelos vertices:")
            print("=" * 41)
            print(_format_path(path))
            print("=" * 41)
            print("Solucao completa!")
            print(f"Numero total de movimentos: {moves}")
            print(f"Numero minimo teorico: {THEORETICAL_MINIMUM} movimentos")
            if moves == THEORETICAL_MINIMUM:
                print("Solucao otima encontrada!")
            else:
                print(f"Solucao nao otima (diferenca: {moves - THEORETICAL_MINIMUM})")

        else:
            print("Opcao invalida! Tente novamente.")