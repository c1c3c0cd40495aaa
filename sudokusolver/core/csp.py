"""Exhaustive backtracking search over a partially filled grid.

The search always takes the first empty cell in row-major order and tries
digits in ascending order, so the order in which solutions are found is
fixed for a given grid.  Every branch is explored; nothing stops at the
first solution.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .constraints import GridLike, gives_conflict
from .errors import GridFullError
from .model import EMPTY, Cell, Geometry, Grid
from .world import Solution

log = logging.getLogger(__name__)


def find_empty_cell(grid: GridLike, geometry: Geometry) -> Optional[Cell]:
    """Return the first empty cell scanning row by row, or None if the grid is full."""
    for row in range(geometry.size):
        for column in range(geometry.size):
            if grid[row][column] == EMPTY:
                return Cell(row, column)
    return None


def iter_solutions(grid: Grid, geometry: Optional[Geometry] = None) -> Iterator[Solution]:
    """Yield every completion of ``grid`` in discovery order.

    ``grid`` is used as scratch space and is back in its original state once
    the iterator is exhausted or closed.  Raises GridFullError straight
    away if there is no empty cell to start from.
    """
    if geometry is None:
        geometry = Geometry.for_grid(grid)
    if find_empty_cell(grid, geometry) is None:
        raise GridFullError()
    return _search(grid, geometry)


def _search(grid: Grid, geometry: Geometry) -> Iterator[Solution]:
    row, column = find_empty_cell(grid, geometry)
    try:
        for value in geometry.digits:
            if gives_conflict(grid, row, column, value, geometry):
                continue
            grid[row][column] = value
            if find_empty_cell(grid, geometry) is None:
                yield Solution.from_grid(grid)
            else:
                yield from _search(grid, geometry)
    finally:
        # undo, whether the digits ran out or the consumer stopped early
        grid[row][column] = EMPTY


class BacktrackingSolver:
    """Collects every solution of the grids it is asked to solve.

    Results accumulate across calls to :meth:`solve`.
    """

    def __init__(self, geometry: Optional[Geometry] = None) -> None:
        self.geometry = geometry
        self.solutions: List[Solution] = []
        self.solution_counter = 0

    def solve(self, grid: Grid) -> "BacktrackingSolver":
        log.debug("Starting exhaustive search")
        for solution in iter_solutions(grid, self.geometry):
            self.solution_counter += 1
            self.solutions.append(solution)
            log.debug("Found solution #%d", self.solution_counter)
        log.debug("Search exhausted with %d solution(s)", self.solution_counter)
        return self


@dataclass
class SolveResult:
    solutions: List[Solution] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def count(self) -> int:
        return len(self.solutions)


def solve(grid: Grid, geometry: Optional[Geometry] = None) -> SolveResult:
    """Run a fresh solver over ``grid`` and time it."""
    start = time.perf_counter()
    solver = BacktrackingSolver(geometry).solve(grid)
    elapsed = time.perf_counter() - start
    log.info("Found %d solution(s) in %.4fs", solver.solution_counter, elapsed)
    return SolveResult(solver.solutions, elapsed)
