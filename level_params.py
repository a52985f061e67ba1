from __future__ import annotations

import random
from dataclasses import dataclass

from config_io import ConfigError
from game_types import Coord
from maze_carver import MIN_VIABLE_EXTENT
from models import MazeConfig

START: Coord = (1, 1)


@dataclass(frozen=True)
class LevelParams:
    extent: int
    start: Coord
    goal: Coord


def extent_for_level(level: int, cfg: MazeConfig) -> int:
    """Active maze side length: grows linearly with level, capped at the grid size."""
    return min(cfg.base_size + level * cfg.size_increment, cfg.grid_size)


def door_offset(level: int, cfg: MazeConfig) -> int:
    """Fixed-door distance from the start, a tenth of a tile per level."""
    return level * cfg.tile_size * cfg.door_distance_factor // 10


def params_for_level(level: int, cfg: MazeConfig, rng: random.Random) -> LevelParams:
    """Compute extent, start and goal for ``level``.

    Every ``cfg.random_goal_every``-th level draws the goal uniformly from
    [2, extent - 2] on each axis; all other levels place it diagonally from
    the start at ``door_offset``. The goal is then pushed at least two cells
    past the start on each axis, which for tiny extents can leave it
    outside the carved square.

    Raises:
        ValueError: If level < 1.
        ConfigError: If the extent is too small to hold a maze.
    """
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    extent = extent_for_level(level, cfg)
    if extent < MIN_VIABLE_EXTENT:
        raise ConfigError(
            f"level {level} extent {extent} is below the minimum of {MIN_VIABLE_EXTENT}"
        )

    sx, sy = START
    if level % cfg.random_goal_every == 0:
        gx = rng.randint(2, extent - 2)
        gy = rng.randint(2, extent - 2)
    else:
        offset = door_offset(level, cfg)
        gx = min(sx + offset, extent - 2)
        gy = min(sy + offset, extent - 2)

    if gx <= sx:
        gx = sx + 2
    if gy <= sy:
        gy = sy + 2

    return LevelParams(extent=extent, start=START, goal=(gx, gy))


def last_room(origin: int, extent: int) -> int:
    """Largest room coordinate the carver can reach on one axis."""
    top = extent - 2
    return top if (top - origin) % 2 == 0 else top - 1


def snap_to_room(goal: Coord, start: Coord, extent: int) -> Coord:
    """Move ``goal`` onto the nearest lattice room, keeping it past the start.

    Rooms are the cells at an even offset from the start; only those are
    guaranteed to be connected to the carved spanning tree.
    """
    snapped = []
    for value, origin in zip(goal, start):
        if (value - origin) % 2:
            value -= 1
            if value <= origin:
                value += 2
        snapped.append(min(value, last_room(origin, extent)))
    return (snapped[0], snapped[1])
