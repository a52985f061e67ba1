from __future__ import annotations

import logging
import random

from grid import Grid
from level_params import params_for_level, snap_to_room
from maze_carver import carve_maze
from models import LevelContext, MazeConfig

logger = logging.getLogger(__name__)


def build_level(level: int, cfg: MazeConfig, rng: random.Random) -> LevelContext:
    """Generate a fresh LevelContext for ``level``.

    A new grid is allocated at full size every time, so nothing from the
    previous level's maze survives.

    Args:
        level: Level number (>= 1).
        cfg: Maze settings.
        rng: Random source for goal placement and carving.

    Returns:
        A populated LevelContext whose start and goal are both open.
    """
    params = params_for_level(level, cfg, rng)
    goal = params.goal
    if cfg.snap_goal_to_room:
        goal = snap_to_room(goal, params.start, params.extent)

    grid = Grid(cfg.grid_size)
    carve_maze(grid, params.extent, params.start, rng, goal=goal)

    logger.debug(
        "built level %s: extent=%s start=%s goal=%s", level, params.extent, params.start, goal
    )
    return LevelContext(
        level=level,
        extent=params.extent,
        start=params.start,
        goal=goal,
        grid=grid,
    )
