"""Shortest paths, or all shortest paths, with the A* search algorithm."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from pathfinding.directed.common import reverse_path

N = TypeVar("N", bound=Hashable)


class _Entry:
    """Heap entry: lowest estimate first, then highest cost, then oldest."""

    __slots__ = ("estimated_cost", "cost", "sequence", "index")

    def __init__(self, estimated_cost: Any, cost: Any, sequence: int, index: int) -> None:
        self.estimated_cost = estimated_cost
        self.cost = cost
        self.sequence = sequence
        self.index = index

    def __lt__(self, other: _Entry) -> bool:
        if self.estimated_cost != other.estimated_cost:
            return self.estimated_cost < other.estimated_cost
        if self.cost != other.cost:
            return self.cost > other.cost
        return self.sequence < other.sequence


def astar(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    heuristic: Callable[[N], Any],
    success: Callable[[N], bool],
) -> tuple[list[N], Any] | None:
    """Return a shortest path to a node satisfying ``success`` and its cost.

    ``successors`` yields ``(node, move_cost)`` pairs and ``heuristic`` must
    never overestimate the remaining cost. The path includes both ends.
    ``None`` is returned if no path exists.
    """
    sequence = itertools.count()
    to_see = [_Entry(0, 0, next(sequence), 0)]
    parents: list[tuple[N, tuple[int | None, Any]]] = [(start, (None, 0))]
    index: dict[N, int] = {start: 0}
    while to_see:
        entry = heapq.heappop(to_see)
        cost, i = entry.cost, entry.index
        node, (_, best) = parents[i]
        if success(node):
            return reverse_path(parents, lambda value: value[0], i), cost
        # A node may be queued several times; only the best entry counts.
        if cost > best:
            continue
        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            n = index.get(successor)
            if n is None:
                n = len(parents)
                index[successor] = n
                parents.append((successor, (i, new_cost)))
            elif parents[n][1][1] > new_cost:
                parents[n] = (parents[n][0], (i, new_cost))
            else:
                continue
            h = heuristic(successor)
            heapq.heappush(to_see, _Entry(new_cost + h, new_cost, next(sequence), n))
    return None


def astar_bag(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    heuristic: Callable[[N], Any],
    success: Callable[[N], bool],
) -> tuple[AstarSolution[N], Any] | None:
    """Find all shortest paths to nodes satisfying ``success``.

    Return an iterator over the paths together with their common cost, or
    ``None`` if no path exists. Paths share the start node but may end at
    different nodes.
    """
    sequence = itertools.count()
    to_see = [_Entry(0, 0, next(sequence), 0)]
    min_cost = None
    sinks: dict[int, None] = {}
    # Each entry is [node, ordered parent indices, cost].
    parents: list[list[Any]] = [[start, {}, 0]]
    index: dict[N, int] = {start: 0}
    while to_see:
        entry = heapq.heappop(to_see)
        if min_cost is not None and entry.estimated_cost > min_cost:
            break
        cost, i = entry.cost, entry.index
        node, _, best = parents[i]
        if success(node):
            min_cost = cost
            sinks[i] = None
        if cost > best:
            continue
        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            n = index.get(successor)
            if n is None:
                n = len(parents)
                index[successor] = n
                parents.append([successor, {i: None}, new_cost])
            else:
                record = parents[n]
                if record[2] > new_cost:
                    record[1] = {i: None}
                    record[2] = new_cost
                else:
                    if record[2] == new_cost:
                        # Another parent with the same cost: not a new insertion.
                        record[1][i] = None
                    continue
            h = heuristic(successor)
            heapq.heappush(to_see, _Entry(new_cost + h, new_cost, next(sequence), n))
    if min_cost is None:
        return None
    table = [(node, list(ps)) for node, ps, _ in parents]
    return AstarSolution(list(sinks), table), min_cost


def astar_bag_collect(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    heuristic: Callable[[N], Any],
    success: Callable[[N], bool],
) -> tuple[list[list[N]], Any] | None:
    """Like :func:`astar_bag`, with all the paths collected into a list."""
    result = astar_bag(start, successors, heuristic, success)
    if result is None:
        return None
    solutions, cost = result
    return list(solutions), cost


class AstarSolution(Generic[N]):
    """Iterator over the shortest paths found by :func:`astar_bag`."""

    def __init__(self, sinks: Sequence[int], parents: Sequence[tuple[N, Sequence[int]]]) -> None:
        self._sinks = list(sinks)
        self._parents = [(node, list(ps)) for node, ps in parents]
        self._current: list[list[int]] = []
        self._terminated = False

    def __iter__(self) -> Iterator[list[N]]:
        return self

    def __next__(self) -> list[N]:
        if self._terminated:
            raise StopIteration
        self._complete()
        path = [self._parents[choices[-1]][0] for choices in reversed(self._current)]
        self._next_choice()
        self._terminated = not self._current
        return path

    def _complete(self) -> None:
        while True:
            if self._current:
                choices = list(self._parents[self._current[-1][-1]][1])
            else:
                choices = list(self._sinks)
            if not choices:
                break
            self._current.append(choices)

    def _next_choice(self) -> None:
        while self._current and len(self._current[-1]) == 1:
            self._current.pop()
        if self._current:
            self._current[-1].pop()