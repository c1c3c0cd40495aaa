"""Row, column and box conflict checks.

Each check scans the whole unit including the target cell itself.  Callers
only ask about digits for a cell that is currently empty, so the target
never matches.
"""

from __future__ import annotations

from typing import List, Sequence

from .model import STANDARD, Cell, Geometry

GridLike = Sequence[Sequence[int]]


def row_conflict(grid: GridLike, row: int, value: int, geometry: Geometry = STANDARD) -> bool:
    """True if ``value`` already appears in ``row``."""
    for column in range(geometry.size):
        if grid[row][column] == value:
            return True
    return False


def column_conflict(grid: GridLike, column: int, value: int, geometry: Geometry = STANDARD) -> bool:
    """True if ``value`` already appears in ``column``."""
    for row in range(geometry.size):
        if grid[row][column] == value:
            return True
    return False


def box_conflict(grid: GridLike, row: int, column: int, value: int, geometry: Geometry = STANDARD) -> bool:
    """True if ``value`` already appears in the box holding (row, column)."""
    top, left = geometry.box_corner(row, column)
    for r in range(top, top + geometry.box_size):
        for c in range(left, left + geometry.box_size):
            if grid[r][c] == value:
                return True
    return False


def gives_conflict(grid: GridLike, row: int, column: int, value: int, geometry: Geometry = STANDARD) -> bool:
    return (
        row_conflict(grid, row, value, geometry)
        or column_conflict(grid, column, value, geometry)
        or box_conflict(grid, row, column, value, geometry)
    )


def units(geometry: Geometry = STANDARD) -> List[List[Cell]]:
    """Every row, column and box as a list of cells."""
    size, box = geometry.size, geometry.box_size
    result = [[Cell(r, c) for c in range(size)] for r in range(size)]
    result += [[Cell(r, c) for r in range(size)] for c in range(size)]
    for top in range(0, size, box):
        for left in range(0, size, box):
            result.append(
                [Cell(r, c) for r in range(top, top + box) for c in range(left, left + box)]
            )
    return result


def is_solved(grid: GridLike, geometry: Geometry = STANDARD) -> bool:
    """True if every row, column and box holds each digit exactly once."""
    expected = list(geometry.digits)
    return all(sorted(grid[r][c] for r, c in unit) == expected for unit in units(geometry))
