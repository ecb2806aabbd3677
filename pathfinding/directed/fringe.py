"""Shortest paths with the Fringe search algorithm."""

from collections import deque

from pathfinding.directed.common import reverse_path


def fringe(start, successors, heuristic, success):
    """Return a shortest path to a node satisfying ``success`` and its cost.

    The estimate given by ``heuristic`` has to be admissible for the result
    to be optimal. The path includes both ends; ``None`` means no path.
    """
    now = deque([0])
    later = deque()
    entries = [(start, (None, 0))]
    position = {start: 0}
    flimit = heuristic(start)

    while now:
        fmin = None
        while now:
            i = now.popleft()
            node, (_, g) = entries[i]
            f = g + heuristic(node)
            if f > flimit:
                if fmin is None or f < fmin:
                    fmin = f
                later.append(i)
                continue
            if success(node):
                return reverse_path(entries, lambda value: value[0], i), g
            for child, step in list(successors(node)):
                g_child = g + step
                n = position.get(child)
                if n is None:
                    n = position[child] = len(entries)
                    entries.append((child, (i, g_child)))
                elif entries[n][1][1] > g_child:
                    entries[n] = (child, (i, g_child))
                else:
                    continue
                if not _discard(later, n):
                    _discard(now, n)
                now.appendleft(n)
        now, later = later, now
        flimit = fmin
    return None


def _discard(queue, item):
    try:
        queue.remove(item)
    except ValueError:
        return False
    return True