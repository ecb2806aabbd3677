"""Shortest paths with the IDA* search algorithm."""

from dataclasses import dataclass


@dataclass
class _Found:
    path: list
    cost: object


def idastar(start, successors, heuristic, success):
    """Return a shortest path to a node satisfying ``success`` and its cost.

    Optimality requires ``heuristic`` to be a lower bound of the real cost.
    No node appears twice in the path; ``None`` means no path exists.
    """
    bound = heuristic(start)
    trail = [start]
    while True:
        outcome = _deepen(trail, 0, bound, successors, heuristic, success)
        if isinstance(outcome, _Found):
            return outcome.path, outcome.cost
        if outcome is None or outcome == bound:
            return None
        bound = outcome


def _deepen(trail, cost, bound, successors, heuristic, success):
    """Return a found path, the smallest exceeding f value, or ``None``."""
    tip = trail[-1]
    f = cost + heuristic(tip)
    if f > bound:
        return f
    if success(tip):
        return _Found(list(trail), f)
    ranked = sorted(
        ((child, step, step + heuristic(child))
         for child, step in successors(tip) if child not in trail),
        key=lambda entry: entry[2],
    )
    smallest = None
    for child, step, _ in ranked:
        trail.append(child)
        outcome = _deepen(trail, cost + step, bound, successors, heuristic, success)
        if isinstance(outcome, _Found):
            return outcome
        if outcome is not None and (smallest is None or outcome < smallest):
            smallest = outcome
        trail.pop()
    return smallest