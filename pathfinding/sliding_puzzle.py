"""Solve a randomly shuffled sliding puzzle with A* and IDA*."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import lru_cache

from pathfinding.directed.astar import astar
from pathfinding.directed.idastar import idastar

DEFAULT_SIDE = 4


@lru_cache(maxsize=None)
def _neighbour_table(side: int) -> tuple[tuple[int, ...], ...]:
    """For every board index, the indices the hole can move to."""
    table = []
    for idx in range(side * side):
        moves = []
        if idx % side > 0:
            moves.append(idx - 1)
        if idx >= side:
            moves.append(idx - side)
        if idx % side < side - 1:
            moves.append(idx + 1)
        if idx < side * side - side:
            moves.append(idx + side)
        table.append(tuple(moves))
    return tuple(table)


@dataclass(frozen=True)
class Game:
    """A sliding puzzle board.

    ``positions[i]`` is the correct position of the piece found at index
    ``i``; the hole is the piece ``0``. ``weight`` is the sum of the
    Manhattan distances of all the pieces to their correct positions.
    """

    positions: tuple[int, ...]
    hole_idx: int
    weight: int

    @property
    def side(self) -> int:
        return math.isqrt(len(self.positions))

    @classmethod
    def goal(cls, side: int) -> Game:
        """Return the solved board of the given side."""
        if side < 1:
            raise ValueError("side must be positive")
        return cls(tuple(range(side * side)), 0, 0)

    @classmethod
    def from_array(cls, positions: Sequence[int]) -> Game:
        """Build a board from the correct positions of the pieces at each index."""
        values = tuple(positions)
        side = math.isqrt(len(values))
        if side < 1 or side * side != len(values):
            raise ValueError("positions do not form a square board")
        if sorted(values) != list(range(len(values))):
            raise ValueError("positions must be a permutation of the board indices")
        hole_idx = values.index(0)
        partial = cls(values, hole_idx, 0)
        weight = sum(partial.distance(n) for n in range(len(values)) if n != hole_idx)
        return cls(values, hole_idx, weight)

    @classmethod
    def shuffled(cls, side: int = DEFAULT_SIDE, rng: random.Random | None = None) -> Game:
        """Return a random solvable board."""
        rng = rng if rng is not None else random.SystemRandom()
        positions = list(cls.goal(side).positions)
        while True:
            rng.shuffle(positions)
            game = cls.from_array(positions)
            if game.is_solvable():
                return game

    def _x(self, pos: int) -> int:
        return pos % self.side

    def _y(self, pos: int) -> int:
        return pos // self.side

    def switch(self, idx: int) -> Game:
        """Return the board obtained by moving the hole to ``idx``."""
        positions = list(self.positions)
        positions[self.hole_idx], positions[idx] = positions[idx], positions[self.hole_idx]
        moved = Game(tuple(positions), idx, self.weight)
        weight = self.weight + moved.distance(self.hole_idx) - self.distance(idx)
        return Game(moved.positions, idx, weight)

    def distance(self, idx: int) -> int:
        """Manhattan distance between the piece at ``idx`` and its correct position."""
        correct = self.positions[idx]
        return abs(self._x(idx) - self._x(correct)) + abs(self._y(idx) - self._y(correct))

    def solved(self) -> bool:
        return self.positions == tuple(range(len(self.positions)))

    def successors(self) -> Iterator[tuple[Game, int]]:
        """Yield every board one move away, each with a cost of 1."""
        for n in _neighbour_table(self.side)[self.hole_idx]:
            yield self.switch(n), 1

    def is_solvable(self) -> bool:
        inversions = 0
        pieces = self.positions
        for i, c in enumerate(pieces):
            if c == 0:
                continue
            for d in pieces[i + 1 :]:
                if d != 0 and d < c:
                    inversions ^= 1
        if self.side % 2 == 1:
            return inversions == 0
        return self._y(self.hole_idx) % 2 == inversions


def _solve(name: str, search, game: Game, started: float) -> int:
    result = search(game, Game.successors, lambda b: b.weight, Game.solved)
    if result is None:
        raise RuntimeError(f"{name} found no solution")
    path, cost = result
    print(f"{name}: {cost} moves in {time.perf_counter() - started:.3f}s")
    if path[-1].weight != 0:
        raise RuntimeError(f"{name} returned an unsolved board")
    return cost


def main(argv: Sequence[str] | None = None) -> int:
    """Shuffle a board, solve it with A* and IDA* concurrently, and compare."""
    parser = argparse.ArgumentParser(prog="sliding-puzzle", description=__doc__)
    parser.add_argument("--side", type=int, default=DEFAULT_SIDE, help="board side")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()
    board = Game.shuffled(args.side, rng)
    print(board)
    if not board.is_solvable():
        raise RuntimeError("shuffled board is not solvable")

    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=1) as pool:
        idastar_future = pool.submit(_solve, "idastar", idastar, board, started)
        astar_result = _solve("astar", astar, board, started)
        idastar_result = idastar_future.result()
    print(f"Total execution time: {time.perf_counter() - started:.3f}s")

    if idastar_result != astar_result:
        raise RuntimeError("astar and idastar disagree on the number of moves")
    if idastar_result < board.weight:
        raise RuntimeError("solution is shorter than the heuristic allows")
    return 0