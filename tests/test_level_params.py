import random

import pytest

from config_io import ConfigError
from conftest import make_maze_cfg
from level_params import (
    START,
    door_offset,
    extent_for_level,
    last_room,
    params_for_level,
    snap_to_room,
)


def test_extent_grows_and_is_capped():
    cfg = make_maze_cfg(grid_size=60, base_size=5, size_increment=3)
    extents = [extent_for_level(level, cfg) for level in range(1, 101)]

    assert extents[0] == 8
    assert all(a <= b for a, b in zip(extents, extents[1:]))
    assert max(extents) == 60
    assert all(e <= cfg.grid_size for e in extents)


def test_default_sizes_hit_grid_cap_at_level_one(maze_cfg):
    assert extent_for_level(1, maze_cfg) == 25


def test_start_is_fixed(maze_cfg, rng):
    for level in range(1, 25):
        assert params_for_level(level, maze_cfg, rng).start == START == (1, 1)


def test_door_offset_uses_tenths_of_a_tile(maze_cfg):
    # 32px tiles: 3.2 cells per level, floored after multiplying.
    assert [door_offset(level, maze_cfg) for level in (1, 2, 3, 4)] == [3, 6, 9, 12]


def test_level_three_on_extent_twenty(rng):
    cfg = make_maze_cfg(grid_size=20)
    step_total = 3 * cfg.tile_size // 10

    params = params_for_level(3, cfg, rng)

    assert params.extent == 20
    assert params.goal == (min(1 + step_total, 18), min(1 + step_total, 18))
    assert params.goal == (10, 10)


def test_fixed_goal_is_capped_at_extent_minus_two(maze_cfg, rng):
    assert params_for_level(9, maze_cfg, rng).goal == (23, 23)


def test_fixed_goal_is_deterministic(maze_cfg):
    a = params_for_level(4, maze_cfg, random.Random(1))
    b = params_for_level(4, maze_cfg, random.Random(2))
    assert a == b


def test_random_goal_stays_inside_margin(maze_cfg):
    rng = random.Random(2024)
    goals = set()
    for _ in range(1000):
        params = params_for_level(10, maze_cfg, rng)
        x, y = params.goal
        assert 2 <= x <= params.extent - 2
        assert 2 <= y <= params.extent - 2
        goals.add(params.goal)
    assert len(goals) > 1


def test_random_goal_every_is_configurable():
    cfg = make_maze_cfg(random_goal_every=3)
    rng = random.Random(0)
    goals = {params_for_level(6, cfg, rng).goal for _ in range(50)}
    assert len(goals) > 1


def test_goal_is_pushed_past_start():
    cfg = make_maze_cfg(door_distance_factor=0)
    assert params_for_level(1, cfg, random.Random(0)).goal == (3, 3)


def test_level_below_one_is_rejected(maze_cfg, rng):
    with pytest.raises(ValueError):
        params_for_level(0, maze_cfg, rng)


def test_extent_below_minimum_fails_fast(rng):
    cfg = make_maze_cfg(base_size=0, size_increment=2)
    with pytest.raises(ConfigError):
        params_for_level(2, cfg, rng)
    assert params_for_level(3, cfg, rng).extent == 6


def test_last_room_matches_carver_reach():
    assert last_room(1, 25) == 23
    assert last_room(1, 20) == 17
    assert last_room(1, 5) == 3


@pytest.mark.parametrize(
    "goal, extent, expected",
    [
        ((10, 10), 25, (9, 9)),
        ((9, 13), 25, (9, 13)),
        ((2, 2), 25, (3, 3)),
        ((23, 24), 25, (23, 23)),
        ((18, 18), 20, (17, 17)),
        ((3, 3), 5, (3, 3)),
    ],
)
def test_snap_to_room(goal, extent, expected):
    assert snap_to_room(goal, START, extent) == expected
