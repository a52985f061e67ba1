from __future__ import annotations

import logging

from game_types import Coord, Direction
from grid import Grid

logger = logging.getLogger(__name__)


class Player:
    """Grid-stepping player: one cell per accepted move, walls block silently."""

    def __init__(self, start: Coord) -> None:
        self.x, self.y = start
        self.facing = Direction.RIGHT

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)

    def reset(self, start: Coord) -> None:
        """Place the player on a new level's start cell."""
        self.x, self.y = start
        self.facing = Direction.RIGHT

    def try_move(self, direction: Direction, grid: Grid) -> bool:
        """Step one cell toward ``direction`` if that cell is walkable.

        Returns:
            True if the player moved.
        """
        self.facing = direction
        nx, ny = self.x + direction.dx, self.y + direction.dy
        if not grid.is_walkable(nx, ny):
            logger.debug("blocked %s at %s", direction.name, self.pos)
            return False
        self.x, self.y = nx, ny
        return True
