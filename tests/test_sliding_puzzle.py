import random

import pytest

from pathfinding.directed.astar import astar
from pathfinding.directed.idastar import idastar
from pathfinding.sliding_puzzle import Game, main


def test_goal_is_solved_and_weightless():
    goal = Game.goal(3)
    assert goal.solved()
    assert goal.weight == 0
    assert goal.hole_idx == 0
    assert goal.is_solvable()


def test_from_array_of_goal_matches_goal():
    assert Game.from_array(range(16)) == Game.goal(4)


def test_from_array_weight_single_displacement():
    game = Game.from_array([1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert game.hole_idx == 1
    assert game.weight == 1
    assert not game.solved()


@pytest.mark.parametrize("positions", [[0, 1, 2], [1, 2, 3, 4], [0, 0, 1, 2]])
def test_from_array_rejects_invalid_boards(positions):
    with pytest.raises(ValueError):
        Game.from_array(positions)


def test_goal_rejects_non_positive_side():
    with pytest.raises(ValueError):
        Game.goal(0)


def test_switch_keeps_weight_consistent():
    rng = random.Random(7)
    game = Game.shuffled(3, rng)
    for _ in range(50):
        successors = [g for g, _ in game.successors()]
        game = rng.choice(successors)
        assert game.weight == Game.from_array(game.positions).weight


def test_switch_round_trip():
    game = Game.shuffled(4, random.Random(3))
    for moved, cost in game.successors():
        assert cost == 1
        assert moved.switch(game.hole_idx) == game


def test_successor_counts_depend_on_hole_position():
    corner = Game.goal(3)
    center = Game.from_array([4, 1, 2, 3, 0, 5, 6, 7, 8])
    corner_moves = [g.hole_idx for g, _ in corner.successors()]
    center_moves = [g.hole_idx for g, _ in center.successors()]
    assert sorted(corner_moves) == [1, 3]
    assert sorted(center_moves) == [1, 3, 5, 7]


def test_swapping_two_tiles_is_unsolvable():
    assert not Game.from_array([0, 2, 1, 3, 4, 5, 6, 7, 8]).is_solvable()
    assert not Game.from_array([0, 2, 1] + list(range(3, 16))).is_solvable()


def test_successors_preserve_solvability():
    game = Game.shuffled(4, random.Random(11))
    assert all(g.is_solvable() for g, _ in game.successors())


def test_shuffled_is_solvable_and_permutation():
    for seed in range(5):
        game = Game.shuffled(3, random.Random(seed))
        assert game.is_solvable()
        assert sorted(game.positions) == list(range(9))


def test_astar_and_idastar_agree():
    game = Game.shuffled(3, random.Random(42))
    a = astar(game, Game.successors, lambda b: b.weight, Game.solved)
    i = idastar(game, Game.successors, lambda b: b.weight, Game.solved)
    assert a[1] == i[1]
    assert a[1] >= game.weight
    assert a[0][-1].solved()
    assert a[0][0] == game


def test_one_move_from_goal():
    game = Game.goal(3).switch(1)
    path, cost = astar(game, Game.successors, lambda b: b.weight, Game.solved)
    assert cost == 1
    assert path == [game, Game.goal(3)]


def test_main_runs_and_reports(capsys):
    assert main(["--side", "3", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert "astar:" in out
    assert "idastar:" in out
    assert "Total execution time" in out