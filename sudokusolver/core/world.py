from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .model import Grid

Row = Tuple[int, ...]


@dataclass(frozen=True)
class Solution:
    """Immutable snapshot of a completely filled grid."""
    rows: Tuple[Row, ...]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "Solution":
        return cls(tuple(tuple(row) for row in grid))

    def cell(self, row: int, column: int) -> int:
        return self.rows[row][column]

    def to_grid(self) -> Grid:
        return [list(row) for row in self.rows]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)
