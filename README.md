# pathfinding

Search, flow, strong-component and cycle-detection algorithms that work on
*implicit* graphs: instead of building a graph object, you describe the graph
with callables.

- `successors(node)` returns the neighbours of a node (for weighted
  algorithms, pairs of `(neighbour, cost)`).
- `success(node)` tells whether a node is a goal, so the target can be a
  condition rather than a fixed node.
- `heuristic(node)` (for A*, IDA* and fringe search) estimates the remaining
  cost and must never overestimate it.

Nodes may be any hashable values; costs may be any numbers that add and
compare. When no path exists, the search functions return `None`. The package
has no dependencies beyond the standard library.

## Unweighted searches

Modules `pathfinding.directed.bfs`, `pathfinding.directed.dfs` and
`pathfinding.directed.iddfs`.

```python
from pathfinding.directed.bfs import bfs, bfs_loop, bfs_reach
from pathfinding.directed.dfs import dfs, dfs_reach
from pathfinding.directed.iddfs import iddfs

GOAL = (4, 6)

def knight(pos):
    x, y = pos
    return [(x + 1, y + 2), (x + 1, y - 2), (x - 1, y + 2), (x - 1, y - 2),
            (x + 2, y + 1), (x + 2, y - 1), (x - 2, y + 1), (x - 2, y - 1)]

path = bfs((1, 1), knight, lambda p: p == GOAL)
assert len(path) == 5            # start and goal included

assert len(iddfs((1, 1), knight, lambda p: p == GOAL)) == 5

# dfs tries successors in the order given
assert dfs(1, lambda n: [x for x in (n * n, n + 1) if x <= 17],
           lambda n: n == 17) == [1, 2, 4, 16, 17]

# every node reachable from a start, lazily (these are generators)
assert list(bfs_reach(3, lambda _: range(1, 6))) == [3, 1, 2, 4, 5]
assert list(dfs_reach(3, lambda _: range(1, 6))) == [3, 1, 2, 4, 5]
```

`bfs_loop(start, successors)` returns one of the shortest paths leading from
`start` back to itself, with `start` at both ends, or `None`.

`dfs` and `iddfs` never put a node twice in a path; `iddfs` returns a shortest
path.

## Weighted searches

`dijkstra` (`pathfinding.directed.dijkstra`), `astar`
(`pathfinding.directed.astar`), `fringe` (`pathfinding.directed.fringe`) and
`idastar` (`pathfinding.directed.idastar`) each return `(path, cost)` or
`None`.

```python
from pathfinding.directed.astar import astar
from pathfinding.directed.dijkstra import dijkstra
from pathfinding.directed.fringe import fringe
from pathfinding.directed.idastar import idastar

def weighted(pos):
    return [(p, 1) for p in knight(pos)]

def estimate(pos):
    return (abs(GOAL[0] - pos[0]) + abs(GOAL[1] - pos[1])) // 3

path, cost = astar((1, 1), weighted, estimate, lambda p: p == GOAL)
assert cost == 4
assert dijkstra((1, 1), weighted, lambda p: p == GOAL)[1] == 4
assert fringe((1, 1), weighted, estimate, lambda p: p == GOAL)[1] == 4
assert idastar((1, 1), weighted, estimate, lambda p: p == GOAL)[1] == 4
```

### All shortest paths

`astar_bag(start, successors, heuristic, success)` returns
`(solutions, cost)` or `None`. `solutions` is an `AstarSolution`, an iterator
that yields every shortest path once; paths share the start node but may end
at different goal nodes. `astar_bag_collect` takes the same arguments and
returns the paths already gathered into a list.

```python
from pathfinding.directed.astar import astar_bag_collect

graph = {1: [(2, 1), (3, 1)], 2: [(4, 1)], 3: [(4, 1)], 4: []}
paths, cost = astar_bag_collect(1, graph.__getitem__, lambda _: 0, lambda n: n == 4)
assert cost == 2
assert sorted(paths) == [[1, 2, 4], [1, 3, 4]]
```

### Dijkstra over a whole graph

`dijkstra_all(start, successors)` maps every node reachable from `start`
(except `start` itself) to `(parent, cost)`. `dijkstra_partial(start,
successors, stop)` explores until `stop(node)` is true for an examined node and
returns that map together with the node that stopped it (or `None`).
`build_path(target, parents)` turns such a map into a path:

```python
from pathfinding.directed.dijkstra import build_path, dijkstra_all

def doubling(n):
    return [(n * 2, 10), (n * 2 + 1, 10)] if n <= 4 else []

reachables = dijkstra_all(1, doubling)
assert reachables[9] == (4, 30)
assert build_path(9, reachables) == [1, 2, 4, 9]
```

## Counting paths

```python
from pathfinding.directed.count_paths import count_paths

n = count_paths(
    (0, 0),
    lambda c: [(x, y) for x, y in ((c[0] + 1, c[1]), (c[0], c[1] + 1)) if x < 8 and y < 8],
    lambda c: c == (7, 7),
)
assert n == 3432
```

The graph must be acyclic, or the counting never ends.

## Strongly connected components

Module `pathfinding.directed.strongly_connected_components`:

- `strongly_connected_components(nodes, successors)` partitions a whole graph
  into lists of nodes;
- `strongly_connected_components_from(start, successors)` partitions only the
  part reachable from `start`;
- `strongly_connected_component(node, successors)` returns the component that
  holds `node`.

```python
from pathfinding.directed.strongly_connected_components import strongly_connected_component

graph = {0: [1], 1: [2], 2: [0, 3], 3: []}
assert sorted(strongly_connected_component(0, graph.__getitem__)) == [0, 1, 2]
```

## Maximum flow and minimum cut

Module `pathfinding.directed.edmonds_karp`.

```python
from pathfinding.directed.edmonds_karp import edmonds_karp_dense

caps = [(("A", "B"), 3), (("A", "D"), 3), (("B", "C"), 4), (("C", "A"), 3),
        (("C", "D"), 1), (("C", "E"), 2), (("D", "E"), 2), (("D", "F"), 6),
        (("E", "B"), 1), (("E", "G"), 1), (("F", "G"), 9)]
flows, total, cut = edmonds_karp_dense(list("ABCDEFGH"), "A", "G", caps)
assert total == 5
assert sorted(cut) == [(("A", "D"), 3), (("C", "D"), 1), (("E", "G"), 1)]
```

The result is the list of positive flows `((from, to), flow)`, the total flow
and the edges of a minimum cut. `edmonds_karp_sparse` does the same with
adjacency maps, and `edmonds_karp(vertices, source, sink, caps,
capacity_class)` takes `DenseCapacity` or `SparseCapacity` explicitly. A
source, sink or edge end that is not among the vertices raises `ValueError`.

`DenseCapacity` and `SparseCapacity` (both `EdmondsKarp` subclasses) can also
be used directly on nodes numbered `0 .. size - 1`:

```python
from pathfinding.directed.edmonds_karp import SparseCapacity

network = SparseCapacity(4, 0, 3)        # size, source, sink
network.set_capacity(0, 1, 5)
network.set_capacity(1, 3, 4)
network.set_capacity(0, 2, 2)
network.set_capacity(2, 3, 3)
assert network.augment()[1] == 6

network.set_capacity(1, 3, 1)            # lower a capacity and recompute
assert network.augment()[1] == 3
```

Changing a capacity with `set_capacity` and calling `augment` again reuses the
flow already found; a capacity lowered below its current flow cancels the
excess. `EdmondsKarp.from_vec(source, sink, capacities)` builds a network from
the row-major values of a square capacity matrix. Call `omit_details()` when
only the total is wanted: `augment` then returns empty flow and cut lists.
A `size`, `source` or `sink` out of range raises `ValueError`.

## Cycle detection

```python
from pathfinding.cycle_detection import brent, floyd

# (cycle length, first element of the cycle, index of that element)
assert floyd(-10, lambda x: (x + 5) % 6 + 3) == (3, 6, 2)
assert brent(-10, lambda x: (x + 5) % 6 + 3) == (3, 6, 2)
```

Without a cycle these functions never return.

## Sliding puzzle demo

`pathfinding.sliding_puzzle` models the sliding puzzle with a frozen `Game`
dataclass: `Game.goal(side)`, `Game.from_array(positions)`,
`Game.shuffled(side, rng)` (a random solvable board), and the methods
`switch`, `distance`, `solved`, `successors` and `is_solvable`. The `weight` of
a board is the sum of the Manhattan distances of its pieces, used as the
heuristic.

The `sliding-puzzle` command shuffles a board, solves it with A* and IDA* at
the same time, prints the board, each solver's number of moves and timings,
and raises an error if the two disagree:

```
sliding-puzzle --side 3 --seed 42
```

`--side` sets the board side (4 by default, which may take a long time to
solve) and `--seed` makes the shuffle reproducible.

## What this package does not provide

It has no undirected-graph algorithms (connected components, minimum spanning
trees), no topological sort, no k-shortest-paths search, no assignment-problem
solver, and no grid or matrix types; every algorithm here works on the
callables described above.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.