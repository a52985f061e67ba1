from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from game_types import Cell, Coord
from grid import Grid

logger = logging.getLogger(__name__)

MIN_VIABLE_EXTENT = 5

LATTICE_STEPS: Tuple[Coord, ...] = ((2, 0), (-2, 0), (0, 2), (0, -2))


def _unvisited_steps(grid: Grid, x: int, y: int, extent: int) -> List[Coord]:
    """Lattice steps from (x, y) whose target room is inside the border and still a wall."""
    steps: List[Coord] = []
    for dx, dy in LATTICE_STEPS:
        nx, ny = x + dx, y + dy
        if 0 < nx < extent - 1 and 0 < ny < extent - 1 and grid.cell(nx, ny) == Cell.WALL:
            steps.append((dx, dy))
    return steps


def carve_maze(
    grid: Grid,
    extent: int,
    start: Coord,
    rng: random.Random,
    goal: Optional[Coord] = None,
) -> int:
    """Carve a perfect maze into ``grid`` with randomized depth-first backtracking.

    Rooms sit two cells apart starting at ``start``; the cell between two
    rooms becomes a corridor when the walk steps across it. The walk keeps
    the current room on the stack while it has unvisited neighbours, so
    every reachable room is visited exactly once and the corridors form a
    spanning tree.

    Args:
        grid: Grid to carve into. Cells in the active square are reset to walls first.
        extent: Side length of the active square (clamped to the grid).
        start: First room, usually (1, 1).
        rng: Random source driving every branch choice.
        goal: Optional cell forced open after carving.

    Returns:
        The number of rooms carved, start included.
    """
    extent = min(extent, grid.width, grid.height)
    if extent < MIN_VIABLE_EXTENT:
        logger.debug("extent %s below %s, maze will be degenerate", extent, MIN_VIABLE_EXTENT)
    grid.fill_walls(extent)

    sx, sy = start
    grid.open_cell(sx, sy)
    stack: List[Coord] = [(sx, sy)]
    rooms = 1

    while stack:
        x, y = stack[-1]
        steps = _unvisited_steps(grid, x, y, extent)
        if not steps:
            stack.pop()
            continue

        dx, dy = rng.choice(steps)
        nx, ny = x + dx, y + dy
        grid.open_cell(x + dx // 2, y + dy // 2)
        grid.open_cell(nx, ny)
        stack.append((nx, ny))
        rooms += 1

    if goal is not None:
        grid.open_cell(*goal)

    logger.debug("carved %s rooms in extent %s from %s", rooms, extent, start)
    return rooms
