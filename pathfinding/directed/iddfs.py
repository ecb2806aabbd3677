"""Shortest paths by iterative deepening depth-first search."""

import enum
import itertools


class _Outcome(enum.Enum):
    FOUND = enum.auto()
    EXHAUSTED = enum.auto()
    CUT_OFF = enum.auto()


def iddfs(start, successors, success):
    """Return a shortest path from ``start`` to a node satisfying ``success``.

    No node appears twice in the path. ``None`` is returned if no path exists.
    """
    trail = [start]
    for depth in itertools.count(1):
        outcome = _probe(trail, successors, success, depth)
        if outcome is _Outcome.FOUND:
            return trail
        if outcome is _Outcome.EXHAUSTED:
            return None
    return None


def _probe(trail, successors, success, depth):
    if depth == 0:
        return _Outcome.CUT_OFF
    if success(trail[-1]):
        return _Outcome.FOUND
    result = _Outcome.EXHAUSTED
    for candidate in successors(trail[-1]):
        if candidate in trail:
            continue
        trail.append(candidate)
        outcome = _probe(trail, successors, success, depth - 1)
        if outcome is _Outcome.FOUND:
            return outcome
        if outcome is _Outcome.CUT_OFF:
            result = outcome
        trail.pop()
    return result