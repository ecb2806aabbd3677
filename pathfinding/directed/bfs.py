"""Shortest paths and reachability by breadth-first search."""

from pathfinding.directed.common import reverse_path


def bfs(start, successors, success):
    """Return a shortest path from ``start`` to a node satisfying ``success``.

    The path includes both ends. ``None`` is returned if no path exists.
    """
    if success(start):
        return [start]
    return _search(start, successors, success)


def bfs_loop(start, successors):
    """Return one of the shortest loops from ``start`` back to itself, or ``None``."""
    return _search(start, successors, lambda node: node == start)


def _search(start, successors, success):
    table = [(start, None)]
    known = {start}
    # The table grows while it is being walked, which makes it the queue.
    for i, (node, _) in enumerate(table):
        for child in successors(node):
            if success(child):
                return reverse_path(table, lambda p: p, i) + [child]
            if child not in known:
                known.add(child)
                table.append((child, i))
    return None


def bfs_reach(start, successors):
    """Yield every node reachable from ``start`` in breadth-first order."""
    visited = {start}
    queue = [start]
    for current in queue:
        fresh = [n for n in successors(current) if n not in visited]
        for n in fresh:
            if n not in visited:
                visited.add(n)
                queue.append(n)
        yield current