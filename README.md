# hanoigraph

Explore the Tower of Hanoi with four discs and three pegs as a graph.
Every one of the 3^4 = 81 placements of the discs is a vertex. Two
vertices are joined when a single legal move turns one placement into the
other. Shortest paths through that graph give the optimal solution of
15 moves.

The package also contains two small general-purpose graph containers.
One is backed by adjacency lists and the other by an adjacency matrix.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

The menus are text-based and read their choices from standard input.
Enter `0` to leave a menu. End of input also closes it.

### `hanoigraph`

An interactive menu with these choices:

- build the 81 x 81 adjacency matrix, timed;
- print the matrix with its statistics;
- list every connection in the matrix;
- draw the start and goal pegs;
- find the shortest path with Dijkstra's algorithm, from all discs on the first peg to all discs on the third;
- run all of the above in one go.

After a solution is found, the menu can print the full path of vertex numbers.

```
hanoigraph
```

### `hanoigraph-paths`

A second interactive menu over the same state graph. Its choices are:

- list every configuration;
- print the adjacency matrix;
- find the path from configuration 0 to configuration 80 with Dijkstra's algorithm or with Bellman-Ford, timed in milliseconds;
- run both algorithms 1000 times and report total and average times.

```
hanoigraph-paths
```

### `hanoigraph-list-demo`

Builds an undirected graph of five vertices on adjacency lists. It adds
the edges 1–2, 1–3 and 2–4, then removes 1–2. The lists are printed
after each step.

```
hanoigraph-list-demo
```

## Library use

### `hanoigraph.hanoi`

```python
from hanoigraph.hanoi import (
    build_adjacency_matrix,
    config_to_index,
    index_to_config,
    shortest_path,
    render_pegs,
)

matrix = build_adjacency_matrix()
start = index_to_config(0)    # every disc on the first peg
goal = index_to_config(80)    # every disc on the third peg
path = shortest_path(matrix, config_to_index(start), config_to_index(goal))
print(len(path) - 1)          # 15
print(render_pegs(goal))
```

**`Configuration`**

- A frozen dataclass whose `disks[i]` is the peg (0–2) of disc `i`.
- The smallest disc is last.
- Wrong lengths or peg numbers raise `ValueError`.

**Converting and checking configurations**

- `config_to_index` and `index_to_config` convert between a configuration and its number in base three, with disc 0 least significant.
- `is_valid_move` tells whether one configuration follows from another by a single legal move.

**Building and searching the graph**

- `build_adjacency_matrix` returns the 81 x 81 matrix as nested lists, with 1 for every legal move.
- `shortest_path` runs Dijkstra's algorithm over any weight matrix.
  - It returns the list of vertices on the path, or `[]` when the target cannot be reached.
  - Out-of-range vertices raise `ValueError`.

**Text output**

`describe_configuration`, `render_pegs`, `render_matrix` and `render_connections` return the text that the menu prints.

### `hanoigraph.hanoi_paths`

```python
from hanoigraph.hanoi_paths import (
    generate_configurations,
    build_adjacency,
    dijkstra,
    bellman_ford,
    path_to,
)

configurations = generate_configurations()
adjacency = build_adjacency(configurations)
predecessors = dijkstra(adjacency, 0)
print(path_to(predecessors, 80))
```

**Configurations**

- Configurations here are plain tuples of 1-based peg numbers.
- Disc 0 is the smallest.
- `is_edge` tests a single pair of configurations.

**Shortest paths**

- `dijkstra` and `bellman_ford` both return a predecessor list.
  - `None` marks a vertex without a predecessor.
  - An out-of-range source raises `ValueError`.
- `path_to` follows the predecessors back from a target.

**Text output**

- `format_path`, `format_configurations` and `format_matrix` return the text that `hanoigraph-paths` prints.
- `timing_report(adjacency, source, runs=1000)` times both algorithms and summarises the results in milliseconds.

### `hanoigraph.adjacency_list` and `hanoigraph.adjacency_matrix`

`AdjacencyListGraph(weighted=False, directed=False, vertices=0)` and
`AdjacencyMatrixGraph(weighted=False, directed=False, vertices=0)` hold
a graph whose vertices are numbered from 1. The graph may be weighted or
unweighted, directed or undirected. `len(graph)` gives the number of
vertices.

Both classes offer these methods:

- **`add_edge(origin, target, weight=1)`**: adds an edge. An unweighted graph accepts only weight 1.
- **`remove_edge(origin, target)`**: removes an edge.
- **`add_vertex(weight=0)`**: adds a vertex and returns its number.
- **`remove_vertex(vertex)`**: drops every edge touching the vertex, then renumbers the vertices after it.
- **`degree(vertex)`**: gives the degree of a vertex.
- **`render()`**: returns a text drawing of the graph.

The two classes differ in what else they offer:

- **`AdjacencyListGraph`**
  - `neighbors(vertex)` returns a list of `Edge(target, weight)` records, newest first.
- **`AdjacencyMatrixGraph`**
  - `has_edge(origin, target)` tells whether an edge exists.
  - `edge_weight(origin, target)` returns the weight of an edge.
  - `graph[vertex]` returns a copy of the vertex's `Vertex(degree, weight)` record.

Vertex numbers outside the graph, and removing an edge that does not
exist, raise `GraphError` or `MatrixGraphError` respectively.

## Limits

- The Tower of Hanoi tools are fixed at four discs and three pegs.
- The adjacency-matrix graph is available only as a library class. No command demonstrates it.