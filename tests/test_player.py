from game_types import Direction
from grid import Grid
from player import Player

CORRIDOR = ["#####", "#...#", "#####"]


def test_player_moves_along_open_cells():
    grid = Grid.from_lines(CORRIDOR)
    player = Player((1, 1))

    assert player.try_move(Direction.RIGHT, grid)
    assert player.try_move(Direction.RIGHT, grid)
    assert player.pos == (3, 1)


def test_player_bumps_into_walls():
    grid = Grid.from_lines(CORRIDOR)
    player = Player((1, 1))

    for direction in (Direction.UP, Direction.DOWN, Direction.LEFT):
        assert not player.try_move(direction, grid)
    assert player.pos == (1, 1)


def test_facing_follows_last_attempt():
    grid = Grid.from_lines(CORRIDOR)
    player = Player((1, 1))

    player.try_move(Direction.UP, grid)
    assert player.facing is Direction.UP

    player.reset((2, 1))
    assert player.pos == (2, 1)
    assert player.facing is Direction.RIGHT
