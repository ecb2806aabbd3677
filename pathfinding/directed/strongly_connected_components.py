"""Separate the nodes of a directed graph into strongly connected components.

A path-based strong component algorithm is used.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import TypeVar

N = TypeVar("N", bound=Hashable)


class _Partition:
    """State shared while exploring a graph for strong components."""

    def __init__(self, successors: Callable[[N], Iterable[N]]) -> None:
        self.successors = successors
        self.preorders: dict = {}
        self.counter = 0
        self.path_stack: list = []
        self.stack: list = []
        self.components: list[list] = []
        self.assigned: set = set()

    def visit(self, start: N) -> None:
        frames: list[tuple[N, Iterator[N]]] = []

        def enter(node: N) -> None:
            self.preorders[node] = self.counter
            self.counter += 1
            self.stack.append(node)
            self.path_stack.append(node)
            frames.append((node, iter(self.successors(node))))

        enter(start)
        while frames:
            v, successors = frames[-1]
            for w in successors:
                if w in self.assigned:
                    continue
                pw = self.preorders.get(w)
                if pw is None:
                    enter(w)
                    break
                while self.preorders[self.path_stack[-1]] > pw:
                    self.path_stack.pop()
            else:
                frames.pop()
                self._close(v)

    def _close(self, v: N) -> None:
        if self.path_stack[-1] != v:
            return
        self.path_stack.pop()
        component = []
        while self.stack:
            node = self.stack.pop()
            component.append(node)
            self.assigned.add(node)
            self.preorders.pop(node, None)
            if node == v:
                break
        self.components.append(component)


def strongly_connected_components_from(
    start: N, successors: Callable[[N], Iterable[N]]
) -> list[list[N]]:
    """Partition the nodes reachable from ``start`` into strong components.

    The result holds at least the component containing ``start``.
    """
    partition = _Partition(successors)
    partition.visit(start)
    return partition.components


def strongly_connected_component(node: N, successors: Callable[[N], Iterable[N]]) -> list[N]:
    """Return the strongly connected component containing ``node``."""
    return strongly_connected_components_from(node, successors)[-1]


def strongly_connected_components(
    nodes: Sequence[N], successors: Callable[[N], Iterable[N]]
) -> list[list[N]]:
    """Partition all the strongly connected components of a graph."""
    partition = _Partition(successors)
    for node in nodes:
        if node not in partition.assigned:
            partition.visit(node)
    return partition.components