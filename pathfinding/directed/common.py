"""Helpers shared by the directed graph algorithms."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

N = TypeVar("N")
V = TypeVar("V")


def reverse_path(
    parents: Sequence[tuple[N, V]],
    parent: Callable[[V], Any],
    start: int,
) -> list[N]:
    """Rebuild the path ending at index ``start`` of an indexed parents table.

    ``parents`` holds ``(node, value)`` pairs in discovery order, and
    ``parent`` extracts from a value the index of the node's parent. The walk
    stops at an index that is ``None`` or outside the table. The returned
    path runs from the root to the node at ``start``.
    """
    path: list[N] = []
    i = start
    while i is not None and 0 <= i < len(parents):
        node, value = parents[i]
        path.append(node)
        i = parent(value)
    path.reverse()
    return path