"""Paths and reachability by depth-first search."""


def dfs(start, successors, success):
    """Return a path from ``start`` to a node satisfying ``success``.

    Successors are tried in the order given; no node appears twice in the
    path. ``None`` is returned if no path exists.
    """
    trail = [start]
    if success(start):
        return trail
    pending = [iter(successors(start))]
    while pending:
        for candidate in pending[-1]:
            if candidate not in trail:
                trail.append(candidate)
                if success(candidate):
                    return trail
                pending.append(iter(successors(candidate)))
                break
        else:
            pending.pop()
            trail.pop()
    return None


def dfs_reach(start, successors):
    """Yield every node reachable from ``start`` in depth-first order."""
    stack = [start]
    visited = {start}
    while stack:
        current = stack.pop()
        discovered = []
        for candidate in successors(current):
            if candidate not in visited:
                visited.add(candidate)
                discovered.append(candidate)
        stack.extend(reversed(discovered))
        yield current