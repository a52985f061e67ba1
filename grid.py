from __future__ import annotations

from typing import Iterator, List, Sequence

from game_types import Cell, Coord

WALL_CHAR = "#"
OPEN_CHAR = "."


class Grid:
    """Fixed-size square cell array; every cell starts as a wall."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.width = size
        self.height = size
        self.cells: List[List[Cell]] = [
            [Cell.WALL for _ in range(size)] for _ in range(size)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell state; anything outside the grid reads as a wall."""
        if self.in_bounds(x, y):
            return self.cells[y][x]
        return Cell.WALL

    def is_open(self, x: int, y: int) -> bool:
        return self.cell(x, y) == Cell.OPEN

    def is_walkable(self, x: int, y: int) -> bool:
        """True iff (x, y) lies on the grid and is OPEN."""
        return self.in_bounds(x, y) and self.cells[y][x] == Cell.OPEN

    def open_cell(self, x: int, y: int) -> None:
        if self.in_bounds(x, y):
            self.cells[y][x] = Cell.OPEN

    def fill_walls(self, extent: int) -> None:
        """Reset the square [0, extent) x [0, extent) to walls."""
        extent = min(extent, self.width, self.height)
        for y in range(extent):
            for x in range(extent):
                self.cells[y][x] = Cell.WALL

    def open_cells(self) -> Iterator[Coord]:
        for y, row in enumerate(self.cells):
            for x, state in enumerate(row):
                if state == Cell.OPEN:
                    yield (x, y)

    def to_lines(self) -> List[str]:
        return [
            "".join(WALL_CHAR if state == Cell.WALL else OPEN_CHAR for state in row)
            for row in self.cells
        ]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from '#'/'.' rows (short rows are padded with walls).

        Raises:
            ValueError: If no lines are provided.
        """
        if not lines:
            raise ValueError("Grid map is empty.")
        size = max(len(lines), max(len(line) for line in lines))
        grid = cls(size)
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                if ch != WALL_CHAR:
                    grid.open_cell(x, y)
        return grid
