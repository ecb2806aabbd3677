import math

from pathfinding.cycle_detection import brent, floyd


def _truncating_step(x):
    # Remainder truncated toward zero, as in the reference sequence.
    return int(math.fmod(x + 5, 6)) + 3


def test_floyd():
    assert floyd(-10, _truncating_step) == (3, 6, 2)


def test_brent():
    assert brent(-10, _truncating_step) == (3, 6, 2)


def test_pure_cycle_from_start():
    step = lambda x: (x + 1) % 5
    assert floyd(0, step) == (5, 0, 0)
    assert brent(0, step) == (5, 0, 0)


def test_algorithms_agree():
    step = lambda x: (x * x + 1) % 255
    for start in range(0, 50, 7):
        assert floyd(start, step) == brent(start, step)