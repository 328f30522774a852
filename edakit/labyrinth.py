"""Depth-first search for a route through a grid of open and blocked cells."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

Grid = Sequence[Sequence[bool]]

DEFAULT_GRID: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 0, 1, 0, 1, 1),
    (1, 0, 1, 1, 1, 1, 0, 1),
    (0, 0, 1, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 1, 1, 1, 1),
    (1, 1, 0, 1, 1, 0, 0, 0),
    (1, 1, 1, 1, 0, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1, 1),
)


@dataclass(frozen=True)
class Cell:
    """A grid position."""

    row: int = -1
    col: int = -1

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def _in_grid(cell: Cell, grid: Grid) -> bool:
    return 0 <= cell.row < len(grid) and 0 <= cell.col < len(grid[cell.row])


def _check_start(grid: Grid, start: Cell) -> None:
    if not _in_grid(start, grid):
        raise ValueError(f"start cell {start} lies outside the grid")


def _open_neighbours(cell: Cell, grid: Grid) -> Iterator[Cell]:
    """Open cells above, below, left and right of cell, in that order."""
    for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        neighbour = Cell(cell.row + d_row, cell.col + d_col)
        if _in_grid(neighbour, grid) and grid[neighbour.row][neighbour.col]:
            yield neighbour


def path_exists(grid: Grid, start: Cell, end: Cell) -> bool:
    """Tell whether end can be reached from start through open cells.

    Raises ValueError when start lies outside the grid.
    """
    _check_start(grid, start)
    stack = [start]
    visited: set[Cell] = set()
    while stack:
        cell = stack.pop()
        visited.add(cell)
        if cell == end:
            return True
        stack.extend(n for n in _open_neighbours(cell, grid) if n not in visited)
    return False


def find_path(grid: Grid, start: Cell, end: Cell) -> list[Cell] | None:
    """Return the cells of a route from start to end, or None when there is none.

    Raises ValueError when start lies outside the grid.
    """
    _check_start(grid, start)
    # Each entry is (cell, parent entry), so the route can be walked back.
    stack: list[tuple[Cell, tuple | None]] = [(start, None)]
    visited: set[Cell] = set()
    while stack:
        entry = stack[-1]
        cell = entry[0]
        if cell in visited:
            stack.pop()
            continue
        visited.add(cell)
        if cell == end:
            path = []
            link: tuple | None = entry
            while link is not None:
                path.append(link[0])
                link = link[1]
            path.reverse()
            return path
        stack.extend(
            (n, entry) for n in _open_neighbours(cell, grid) if n not in visited
        )
    return None


def format_path(path: Sequence[Cell]) -> str:
    """Each cell followed by a dash."""
    return "".join(f"{cell}-" for cell in path)


def main(argv: list[str] | None = None) -> int:
    """Search the built-in grid; optional arguments: start row, start col, end row, end col."""
    args = sys.argv[1:] if argv is None else argv
    coords = [1, 2, 5, 4]
    if args:
        if len(args) != 4:
            print("expected four coordinates", file=sys.stderr)
            return 2
        try:
            coords = [int(arg) for arg in args]
        except ValueError:
            print("coordinates must be integers", file=sys.stderr)
            return 2
    start, end = Cell(coords[0], coords[1]), Cell(coords[2], coords[3])
    try:
        path = find_path(DEFAULT_GRID, start, end)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 2
    if path is None:
        print("No Existe Ruta")
    else:
        print("Existe Ruta")
        print(format_path(path))
    return 0