"""Exception hierarchy shared by the solver, the puzzle loader and the CLI."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for every error raised by this package."""


class ContractError(SudokuError):
    """A caller broke a precondition of the search."""


class GridFullError(ContractError):
    """The search was entered on a grid with no empty cell left."""

    def __init__(self, message: str = "grid has no empty cell to search from") -> None:
        super().__init__(message)


class GridShapeError(SudokuError, ValueError):
    """The grid is not square or its side is not a perfect square."""


class PuzzleFormatError(SudokuError, ValueError):
    """A puzzle document could not be turned into a grid."""


class UnknownPuzzleError(SudokuError, KeyError):
    """No sample puzzle is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
