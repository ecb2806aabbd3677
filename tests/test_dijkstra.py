import math
import random

import pytest

from pathfinding.directed.dijkstra import (
    build_path,
    dijkstra,
    dijkstra_all,
    dijkstra_partial,
)

WEIGHTED = [
    [(1, 7), (2, 7), (3, 6)], [(0, 8), (6, 7)], [(5, 7)], [(7, 7)], [(4, 2)],
    [(1, 1)], [(2, 5), (4, 5), (5, 2)], [(5, 8)], [],
]

EXPECTED = [
    ([1, 0], 8), ([1], 0), ([1, 6, 2], 12), ([1, 0, 3], 14), ([1, 6, 4], 12),
    ([1, 6, 5], 9), ([1, 6], 7), ([1, 0, 3, 7], 21), None,
]

GRID = "#########/#.#.....#/###.##..#/#...#...#/#...#...#/#...#...#/#...#...#/#########"
PASSABLE = {
    (x, y) for y, row in enumerate(GRID.split("/")) for x, c in enumerate(row) if c == "."
}


def unit_steps(pos):
    x, y = pos
    candidates = ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
    return [(p, 1) for p in candidates if p in PASSABLE]


@pytest.mark.parametrize("target, expected", enumerate(EXPECTED))
def test_ex1_dijkstra(target, expected):
    assert dijkstra(1, WEIGHTED.__getitem__, lambda n: n == target) == expected


def test_loop_without_goal():
    assert dijkstra(1, lambda _: [(1, 1)], lambda n: n == 2) is None


def test_maze_path():
    goal = (6, 3)
    calls = []

    def successors(n):
        calls.append(n)
        return unit_steps(n)

    path, cost = dijkstra((2, 3), successors, lambda n: n == goal)
    assert cost == 8
    assert set(path) <= PASSABLE
    assert (path[0], path[-1]) == ((2, 3), goal)
    assert len(calls) == 20


def test_maze_no_path():
    assert dijkstra((2, 3), unit_steps, lambda n: n == (1, 1)) is None


def test_knight_moves():
    def successors(pos):
        x, y = pos
        return [((x + a, y + b), 1) for a in (1, -1, 2, -2) for b in (2, -2, 1, -1) if abs(a) != abs(b)]

    path, cost = dijkstra((1, 1), successors, lambda p: p == (4, 6))
    assert (cost, len(path)) == (4, 5)


def test_dijkstra_all_example():
    reachables = dijkstra_all(1, lambda n: [(n * 2, 10), (n * 2 + 1, 10)] if n <= 4 else [])
    assert reachables == {
        2: (1, 10), 3: (1, 10), 4: (2, 20), 5: (2, 20),
        6: (3, 20), 7: (3, 20), 8: (4, 30), 9: (4, 30),
    }


def test_build_path_example():
    parents = {n: (n // 2, 1) for n in range(2, 101)}
    assert build_path(18, parents) == [1, 2, 4, 9, 18]
    assert build_path(1, parents) == [1]
    assert build_path(101, parents) == [101]


def random_network(size, seed):
    rng = random.Random(seed)
    return [
        [rng.randrange(65536) if rng.randrange(3) < 2 else 0 for _ in range(size)]
        for _ in range(size)
    ]


def edges_of(network):
    return lambda a: [(b, p) for b, p in enumerate(network[a]) if p != 0]


def test_all_paths():
    size = 30
    network = random_network(size, 12345)
    for start in range(size):
        paths = dijkstra_all(start, edges_of(network))
        for target in range(size):
            result = dijkstra(start, edges_of(network), lambda n: n == target)
            if result is None or start == target:
                assert target not in paths
            else:
                path, cost = result
                assert cost == paths[target][1]
                assert path == build_path(target, paths)


def test_partial_paths():
    size = 100
    network = random_network(size, 54321)
    for start in range(size):
        paths, reached = dijkstra_partial(
            start,
            edges_of(network),
            lambda n: start != 0 and n != 0 and n != start and n % start == 0,
        )
        if reached is not None:
            assert reached % start == 0
            path, dcost = dijkstra(start, edges_of(network), lambda n: n == reached)
            assert paths[reached][1] == dcost
            assert path == build_path(reached, paths)
        elif start != 0 and start <= (size - 1) // 2:
            for target in range(1, size // start):
                assert dijkstra(start, edges_of(network), lambda n: n == target) is None


CITIES = {
    "Paris": (48.8567, 2.3508), "Lyon": (45.76, 4.84), "Marseille": (43.2964, 5.37),
    "Bordeaux": (44.84, -0.58), "Cannes": (43.5513, 7.0128),
    "Toulouse": (43.6045, 1.444), "Reims": (49.2628, 4.0347),
}

ROADS = {
    "Paris": "Lyon,Bordeaux,Reims", "Lyon": "Paris,Marseille",
    "Marseille": "Lyon,Cannes,Toulouse", "Bordeaux": "Toulouse,Paris",
    "Cannes": "Marseille", "Toulouse": "Marseille,Bordeaux", "Reims": "Paris",
}


def meters(a, b):
    (lat_a, lon_a), (lat_b, lon_b) = (map(math.radians, CITIES[c]) for c in (a, b))
    dx = (lon_b - lon_a) * math.cos((lat_a + lat_b) / 2.0)
    return int(math.hypot(dx, lat_b - lat_a) * 6_371_000.0 + 0.5)


def test_gps():
    roads = {c: [(o, meters(c, o)) for o in r.split(",")] for c, r in ROADS.items()}
    path, cost = dijkstra("Paris", roads.__getitem__, lambda c: c == "Cannes")
    assert path == ["Paris", "Lyon", "Marseille", "Cannes"]
    assert cost == sum(meters(a, b) for a, b in zip(path, path[1:]))