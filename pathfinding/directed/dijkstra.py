"""Shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from pathfinding.directed.common import reverse_path

N = TypeVar("N", bound=Hashable)

# Each entry is (node, (parent index or None, cost from the start)).
_Parents = list[tuple[Any, tuple[Any, Any]]]


def dijkstra(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    success: Callable[[N], bool],
) -> tuple[list[N], Any] | None:
    """Return a shortest path to a node satisfying ``success`` and its cost.

    ``successors`` yields ``(node, move_cost)`` pairs. The path includes both
    ends. ``None`` is returned if no path exists.
    """
    parents, reached = _run_dijkstra(start, successors, success)
    if reached is None:
        return None
    path = reverse_path(parents, lambda value: value[0], reached)
    return path, parents[reached][1][1]


def dijkstra_all(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
) -> dict[N, tuple[N, Any]]:
    """Map every node reachable from ``start`` (except ``start``) to an
    optimal parent and the cost from ``start``."""
    return dijkstra_partial(start, successors, lambda _: False)[0]


def dijkstra_partial(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    stop: Callable[[N], bool],
) -> tuple[dict[N, tuple[N, Any]], N | None]:
    """Explore from ``start`` until ``stop`` returns true for an examined node.

    Return a map from every node seen (except ``start``) to a parent and a
    cost, together with the node that stopped the search, or ``None``.
    """
    parents, reached = _run_dijkstra(start, successors, stop)
    table = {
        node: (parents[parent][0], cost) for node, (parent, cost) in parents[1:]
    }
    return table, None if reached is None else parents[reached][0]


def build_path(target: N, parents: dict[N, tuple[N, Any]]) -> list[N]:
    """Build the path leading to ``target`` from a parents map.

    The map must contain no loop. The path starts at the farthest ancestor
    and ends with ``target`` itself.
    """
    path = [target]
    node = target
    while node in parents:
        node = parents[node][0]
        path.append(node)
    path.reverse()
    return path


def _run_dijkstra(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    stop: Callable[[N], bool],
) -> tuple[_Parents, int | None]:
    parents: _Parents = [(start, (None, 0))]
    index: dict[N, int] = {start: 0}
    sequence = itertools.count(1)
    to_see: list[tuple[Any, int, int]] = [(0, 0, 0)]
    while to_see:
        cost, _, i = heapq.heappop(to_see)
        node, (_, best) = parents[i]
        if stop(node):
            return parents, i
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
            heapq.heappush(to_see, (new_cost, next(sequence), n))
    return parents, None