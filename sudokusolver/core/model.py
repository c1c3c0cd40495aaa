from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence

from .errors import GridShapeError


class Cell(NamedTuple):
    """A (row, column) coordinate inside a grid."""
    row: int
    column: int


Grid = List[List[int]]
EMPTY = 0


@dataclass(frozen=True)
class Geometry:
    """Sizes derived from the side length of one box.

    A box size of 3 gives the usual 9x9 grid with digits 1-9; 2 gives the
    4x4 variant with digits 1-4.
    """
    box_size: int = 3

    def __post_init__(self) -> None:
        if self.box_size < 1:
            raise GridShapeError(f"box size must be positive, got {self.box_size}")

    @property
    def size(self) -> int:
        return self.box_size * self.box_size

    @property
    def digits(self) -> range:
        return range(1, self.size + 1)

    def box_corner(self, row: int, column: int) -> Cell:
        return Cell(row - row % self.box_size, column - column % self.box_size)

    @classmethod
    def for_grid(cls, grid: Sequence[Sequence[int]]) -> "Geometry":
        side = len(grid)
        box_size = math.isqrt(side)
        if side == 0 or box_size * box_size != side:
            raise GridShapeError(f"grid side {side} is not a perfect square")
        for index, row in enumerate(grid):
            if len(row) != side:
                raise GridShapeError(
                    f"row {index} has {len(row)} cells, expected {side}"
                )
        return cls(box_size)


STANDARD = Geometry(3)


def empty_grid(geometry: Geometry = STANDARD) -> Grid:
    return [[EMPTY] * geometry.size for _ in range(geometry.size)]
