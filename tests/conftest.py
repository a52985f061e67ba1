import os
import random
from collections import deque
from typing import Set

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from game_types import Coord  # noqa: E402
from grid import Grid  # noqa: E402
from models import MazeConfig, SessionConfig  # noqa: E402


def make_maze_cfg(**overrides) -> MazeConfig:
    values = dict(
        grid_size=25,
        base_size=20,
        size_increment=5,
        random_goal_every=10,
        door_distance_factor=1,
        tile_size=32,
        snap_goal_to_room=True,
        seed=None,
    )
    values.update(overrides)
    return MazeConfig(**values)


def reachable_from(grid: Grid, start: Coord) -> Set[Coord]:
    """Open cells reachable from ``start`` with 4-directional steps."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = (x + dx, y + dy)
            if nxt not in seen and grid.is_walkable(*nxt):
                seen.add(nxt)
                queue.append(nxt)
    return seen


def adjacency_edges(grid: Grid) -> int:
    """Count pairs of horizontally or vertically adjacent open cells."""
    edges = 0
    for x, y in grid.open_cells():
        if grid.is_open(x + 1, y):
            edges += 1
        if grid.is_open(x, y + 1):
            edges += 1
    return edges


@pytest.fixture
def maze_cfg() -> MazeConfig:
    return make_maze_cfg()


@pytest.fixture
def session_cfg() -> SessionConfig:
    return SessionConfig(time_limit_s=25, start_level=1, fps=8)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
