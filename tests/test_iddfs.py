import pytest

from pathfinding.directed.iddfs import iddfs

PLAN = "#########\n#.#.....#\n###.##..#\n" + "#...#...#\n" * 4 + "#########"
CELLS = {(x, y) for y, line in enumerate(PLAN.split("\n")) for x, ch in enumerate(line) if ch == "."}


def around(cell):
    x, y = cell
    return [c for c in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)) if c in CELLS]


def leaps(cell):
    x, y = cell
    return [(x + a, y + b) for a in (1, -1, 2, -2) for b in (1, -1, 2, -2) if abs(a) != abs(b)]


def test_knight_moves():
    result = iddfs((1, 1), leaps, lambda p: p == (4, 6))
    assert len(result) == 5
    assert (result[0], result[-1]) == ((1, 1), (4, 6))


def test_iddfs_path_ok():
    path = iddfs((2, 3), around, lambda n: n == (6, 3))
    assert len(path) == 9
    assert set(path) <= CELLS


@pytest.mark.parametrize(
    "start, successors, goal",
    [((2, 3), around, (1, 1)), (1, lambda _: [1], 2)],
)
def test_no_path(start, successors, goal):
    assert iddfs(start, successors, lambda n: n == goal) is None


def test_start_is_goal():
    assert iddfs(5, lambda n: [n + 1], lambda n: n == 5) == [5]