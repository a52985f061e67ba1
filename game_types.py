from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple

Color = Tuple[int, int, int]
Coord = Tuple[int, int]


class Cell(IntEnum):
    OPEN = 0
    WALL = 1


class Direction(Enum):
    """Unit steps on the grid (x grows right, y grows down)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Order in which simultaneously pressed directions are applied.
MOVE_ORDER: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)
