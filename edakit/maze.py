"""Random maze generation by depth-first carving on a grid."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class _Frame:
    row: int
    col: int
    next_direction: int = 0


class Maze:
    """A grid of walls (1) and open cells (0) carved from the top-left corner.

    Passages run between cells two steps apart, so odd dimensions give a
    maze with a border of cells on every side.
    """

    WALL = "@"
    EMPTY = "-"
    LIMIT = "="
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    _STEPS = {
        NORTH: (-1, 0),
        SOUTH: (1, 0),
        EAST: (0, 1),
        WEST: (0, -1),
    }

    def __init__(self, height: int, width: int, rng: random.Random | None = None) -> None:
        self._rng = random.Random() if rng is None else rng
        self._directions = [self.NORTH, self.SOUTH, self.EAST, self.WEST]
        self.height = 0
        self.width = 0
        self.grid: list[list[int]] = []
        self.generate(height, width)

    def reset(self, height: int, width: int) -> None:
        """Resize the grid and fill it with walls."""
        self.height = height
        self.width = width
        self.grid = [[1] * width for _ in range(height)]

    def generate(self, height: int, width: int) -> None:
        """Build a fresh maze of the given size."""
        self.reset(height, width)
        if self.in_range(0, 0):
            self._carve_from(0, 0)

    def in_range(self, i: int, j: int) -> bool:
        """Tell whether (i, j) lies inside the grid."""
        return 0 <= i < self.height and 0 <= j < self.width

    def _shuffle_directions(self) -> None:
        directions = self._directions
        for i in range(4):
            r = self._rng.randrange(4)
            directions[r], directions[i] = directions[i], directions[r]

    def _enter(self, row: int, col: int) -> _Frame:
        self.grid[row][col] = 0
        self._shuffle_directions()
        return _Frame(row, col)

    def _carve_from(self, row: int, col: int) -> None:
        # The direction order is shared by every step of the walk and is
        # reshuffled each time a new cell is entered.
        stack = [self._enter(row, col)]
        while stack:
            frame = stack[-1]
            if frame.next_direction == 4:
                stack.pop()
                continue
            d_row, d_col = self._STEPS[self._directions[frame.next_direction]]
            frame.next_direction += 1
            next_row = frame.row + 2 * d_row
            next_col = frame.col + 2 * d_col
            if self.in_range(next_row, next_col) and self.grid[next_row][next_col] == 1:
                self.grid[next_row - d_row][next_col - d_col] = 0
                stack.append(self._enter(next_row, next_col))

    def render(self) -> str:
        """Text picture of the maze framed by a border."""
        border = f" {self.LIMIT * self.width} \n"
        rows = "".join(
            "|" + "".join(self.EMPTY if cell == 0 else self.WALL for cell in row) + "|\n"
            for row in self.grid
        )
        return f" Maze ( {self.height} x {self.width} ) \n{border}{rows}{border}"

    def __str__(self) -> str:
        return self.render()