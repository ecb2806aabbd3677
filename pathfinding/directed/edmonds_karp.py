"""Maximum flow and minimum cut with the Edmonds-Karp algorithm.

Besides the helper functions working on arbitrary vertices, the capacity
classes can be modified after a flow has been computed. The flow is then
recomputed, reusing the work already done on unchanged or augmented edges.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

from pathfinding.directed.bfs import bfs

N = TypeVar("N", bound=Hashable)

Edge = tuple[tuple[Any, Any], Any]
EKFlows = tuple[list[Edge], Any, list[Edge]]


class EdmondsKarp(ABC):
    """Capacity and flow data of a network between nodes ``0 .. size - 1``."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        if not 0 <= source < size:
            raise ValueError("source is greater or equal than size")
        if not 0 <= sink < size:
            raise ValueError("sink is greater or equal than size")
        self.size = size
        self.source = source
        self.sink = sink
        self.total_capacity: Any = 0
        self._details = True

    @classmethod
    def from_vec(cls, source: int, sink: int, capacities: Sequence[Any]) -> EdmondsKarp:
        """Build a network from the row-major values of a square capacity matrix."""
        values = list(capacities)
        side = math.isqrt(len(values))
        if side * side != len(values):
            raise ValueError("capacities do not form a square matrix")
        rows = [values[r * side : (r + 1) * side] for r in range(side)]
        if not 0 <= source < side:
            raise ValueError("source is greater or equal than matrix side")
        if not 0 <= sink < side:
            raise ValueError("sink is greater or equal than matrix side")
        return cls._from_rows(source, sink, rows)

    @classmethod
    def _from_rows(cls, source: int, sink: int, rows: list[list[Any]]) -> EdmondsKarp:
        result = cls(len(rows), source, sink)
        for from_node, row in enumerate(rows):
            for to_node, capacity in enumerate(row):
                if capacity > 0:
                    result.set_capacity(from_node, to_node, capacity)
        return result

    @abstractmethod
    def residual_successors(self, from_node: int) -> list[tuple[int, Any]]:
        """Successors with a positive residual capacity, with that capacity."""

    @abstractmethod
    def residual_capacity(self, from_node: int, to_node: int) -> Any:
        """Residual capacity between two nodes."""

    @abstractmethod
    def flow(self, from_node: int, to_node: int) -> Any:
        """Flow between two nodes."""

    @abstractmethod
    def flows_from(self, from_node: int) -> list[int]:
        """Nodes receiving a positive flow from ``from_node``."""

    @abstractmethod
    def flows(self) -> list[Edge]:
        """All positive flows between nodes."""

    @abstractmethod
    def add_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        """Add a flow between two nodes; not meant to be used directly."""

    @abstractmethod
    def add_residual_capacity(self, from_node: int, to_node: int, capacity: Any) -> None:
        """Add some residual capacity between two nodes."""

    def set_capacity(self, from_node: int, to_node: int, capacity: Any) -> None:
        """Set the capacity between two nodes, cancelling any excess flow."""
        flow = self.flow(from_node, to_node)
        delta = capacity - (self.residual_capacity(from_node, to_node) + flow)
        if capacity < flow:
            to_cancel = flow - capacity
            self.add_flow(to_node, from_node, to_cancel)
            self._cancel_flow(self.source, from_node, to_cancel)
            self._cancel_flow(to_node, self.sink, to_cancel)
            self.total_capacity = self.total_capacity - to_cancel
        self.add_residual_capacity(from_node, to_node, delta)

    def omit_details(self) -> None:
        """Make :meth:`augment` return empty flow and cut lists."""
        self._details = False

    def augment(self) -> EKFlows:
        """Compute the maximum flow and a minimum cut.

        Return the positive flows, the total flow and the edges of the cut.
        """
        source_nodes = self._update_flows()
        if not self._details:
            return [], self.total_capacity, []
        flows = self.flows()
        cuts = [
            edge
            for edge in flows
            if edge[0][0] in source_nodes and edge[0][1] not in source_nodes
        ]
        return flows, self.total_capacity, cuts

    def _update_flows(self) -> set[int]:
        """Augment the flow until no path remains; return the nodes seen last."""
        source, sink = self.source, self.sink
        while True:
            parents: list[int | None] = [None] * self.size
            path_capacity: list[Any] = [math.inf] * self.size
            to_see = deque([source])
            seen: set[int] = set()
            augmented = False
            while to_see and not augmented:
                node = to_see.popleft()
                seen.add(node)
                capacity_so_far = path_capacity[node]
                for successor, residual in self.residual_successors(node):
                    if successor == source or parents[successor] is not None:
                        continue
                    parents[successor] = node
                    path_capacity[successor] = min(capacity_so_far, residual)
                    if successor == sink:
                        amount = path_capacity[sink]
                        n = sink
                        while n != source:
                            p = parents[n]
                            self.add_flow(p, n, amount)
                            n = p
                        self.total_capacity = self.total_capacity + amount
                        augmented = True
                        break
                    to_see.append(successor)
            if not augmented:
                return seen

    def _cancel_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        if from_node == to_node:
            return
        while capacity > 0:
            path = bfs(from_node, self.flows_from, lambda n: n == to_node)
            if path is None:
                raise RuntimeError("no flow to cancel")
            steps = list(zip(path, path[1:]))
            cancelable = min(max(self.flow(src, dst) for src, dst in steps), capacity)
            for src, dst in steps:
                self.add_flow(dst, src, cancelable)
            capacity = capacity - cancelable


class SparseCapacity(EdmondsKarp):
    """Capacity and flow data kept in adjacency maps, for sparse graphs."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        super().__init__(size, source, sink)
        self._flows: dict[int, dict[int, Any]] = {}
        self._residuals: dict[int, dict[int, Any]] = {}

    @staticmethod
    def _set_value(data: dict[int, dict[int, Any]], from_node: int, to_node: int, value: Any) -> None:
        sub = data.setdefault(from_node, {})
        if value == 0:
            sub.pop(to_node, None)
        else:
            sub[to_node] = value
        if not sub:
            del data[from_node]

    @staticmethod
    def _get_value(data: dict[int, dict[int, Any]], from_node: int, to_node: int) -> Any:
        return data.get(from_node, {}).get(to_node, 0)

    def residual_successors(self, from_node: int) -> list[tuple[int, Any]]:
        targets = self._residuals.get(from_node, {})
        return [(n, c) for n, c in sorted(targets.items()) if c > 0]

    def residual_capacity(self, from_node: int, to_node: int) -> Any:
        return self._get_value(self._residuals, from_node, to_node)

    def flow(self, from_node: int, to_node: int) -> Any:
        return self._get_value(self._flows, from_node, to_node)

    def flows(self) -> list[Edge]:
        return [
            ((k, v), c)
            for k, targets in sorted(self._flows.items())
            for v, c in sorted(targets.items())
            if c > 0
        ]

    def add_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        direct = self.flow(from_node, to_node) + capacity
        self._set_value(self._flows, from_node, to_node, direct)
        self._set_value(self._flows, to_node, from_node, -direct)
        self.add_residual_capacity(from_node, to_node, -capacity)
        self.add_residual_capacity(to_node, from_node, capacity)

    def add_residual_capacity(self, from_node: int, to_node: int, capacity: Any) -> None:
        new_capacity = self.residual_capacity(from_node, to_node) + capacity
        self._set_value(self._residuals, from_node, to_node, new_capacity)

    def flows_from(self, from_node: int) -> list[int]:
        targets = self._flows.get(from_node, {})
        return [n for n, c in sorted(targets.items()) if c > 0]


class DenseCapacity(EdmondsKarp):
    """Capacity and flow data kept in adjacency matrices, for dense graphs."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        super().__init__(size, source, sink)
        self._residuals: list[list[Any]] = [[0] * size for _ in range(size)]
        self._flows: list[list[Any]] = [[0] * size for _ in range(size)]

    @classmethod
    def _from_rows(cls, source: int, sink: int, rows: list[list[Any]]) -> DenseCapacity:
        result = cls(len(rows), source, sink)
        result._residuals = [list(row) for row in rows]
        return result

    def residual_successors(self, from_node: int) -> list[tuple[int, Any]]:
        return [(n, r) for n, r in enumerate(self._residuals[from_node]) if r > 0]

    def residual_capacity(self, from_node: int, to_node: int) -> Any:
        return self._residuals[from_node][to_node]

    def flow(self, from_node: int, to_node: int) -> Any:
        return self._flows[from_node][to_node]

    def flows(self) -> list[Edge]:
        return [
            ((from_node, to_node), f)
            for from_node, row in enumerate(self._flows)
            for to_node, f in enumerate(row)
            if f > 0
        ]

    def add_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        self._flows[from_node][to_node] += capacity
        self._flows[to_node][from_node] -= capacity
        self._residuals[from_node][to_node] -= capacity
        self._residuals[to_node][from_node] += capacity

    def add_residual_capacity(self, from_node: int, to_node: int, capacity: Any) -> None:
        self._residuals[from_node][to_node] += capacity

    def flows_from(self, from_node: int) -> list[int]:
        return [to for to, f in enumerate(self._flows[from_node]) if f > 0]


def edmonds_karp(
    vertices: Sequence[N],
    source: N,
    sink: N,
    caps: Iterable[Edge],
    capacity_class: type[EdmondsKarp],
) -> EKFlows:
    """Compute the maximum flow and a minimum cut from ``source`` to ``sink``.

    ``caps`` yields ``((from, to), capacity)`` edges. Return the positive
    flows, the total flow and the edges of the minimum cut, all expressed
    with the given vertices. Raise ``ValueError`` for an unknown vertex.
    """
    reverse: dict[N, int] = {}
    for i, vertex in enumerate(vertices):
        reverse.setdefault(vertex, i)

    def index_of(vertex: N) -> int:
        try:
            return reverse[vertex]
        except KeyError:
            raise ValueError(f"unknown vertex {vertex!r}") from None

    network = capacity_class(len(vertices), index_of(source), index_of(sink))
    for (from_vertex, to_vertex), capacity in caps:
        network.set_capacity(index_of(from_vertex), index_of(to_vertex), capacity)
    paths, total, cut = network.augment()
    return (
        [((vertices[a], vertices[b]), c) for (a, b), c in paths],
        total,
        [((vertices[a], vertices[b]), c) for (a, b), c in cut],
    )


def edmonds_karp_dense(vertices: Sequence[N], source: N, sink: N, caps: Iterable[Edge]) -> EKFlows:
    """:func:`edmonds_karp` using an adjacency matrix."""
    return edmonds_karp(vertices, source, sink, caps, DenseCapacity)


def edmonds_karp_sparse(vertices: Sequence[N], source: N, sink: N, caps: Iterable[Edge]) -> EKFlows:
    """:func:`edmonds_karp` using adjacency maps."""
    return edmonds_karp(vertices, source, sink, caps, SparseCapacity)