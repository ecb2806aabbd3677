"""Count the paths that lead to a destination."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

N = TypeVar("N", bound=Hashable)


def count_paths(
    start: N,
    successors: Callable[[N], Iterable[N]],
    success: Callable[[N], bool],
) -> int:
    """Count all paths from ``start`` to nodes satisfying ``success``.

    The graph must have no loops, or the recursion never ends.
    """
    cache: dict[N, int] = {}

    def count(node: N) -> int:
        if node in cache:
            return cache[node]
        if success(node):
            total = 1
        else:
            total = sum(count(successor) for successor in successors(node))
        cache[node] = total
        return total

    return count(start)