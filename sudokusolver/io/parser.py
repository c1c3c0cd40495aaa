from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from ..core.errors import GridShapeError, PuzzleFormatError
from ..core.model import Geometry, Grid
from ..core.world import Solution

EMPTY_MARKS = {"0", "."}
DIGITS = "0123456789"


@dataclass
class Puzzle:
    name: str
    grid: Grid
    description: str = ""
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def geometry(self) -> Geometry:
        box_size = self.options.get("box_size")
        if box_size is None:
            return Geometry.for_grid(self.grid)
        return Geometry(int(box_size))


def _parse_row(raw: Any, index: int) -> List[int]:
    if isinstance(raw, str):
        cells = []
        for ch in raw.replace(" ", ""):
            if ch in EMPTY_MARKS:
                cells.append(0)
            elif ch in DIGITS:
                cells.append(int(ch))
            else:
                raise PuzzleFormatError(f"row {index}: unexpected character {ch!r}")
        return cells
    if isinstance(raw, list):
        try:
            return [int(v) for v in raw]
        except (TypeError, ValueError) as exc:
            raise PuzzleFormatError(f"row {index}: {exc}") from exc
    raise PuzzleFormatError(f"row {index}: expected a string or a list, got {type(raw).__name__}")


def parse_puzzle(data: Any, default_name: str = "puzzle") -> Puzzle:
    """Build a Puzzle from an already-loaded YAML mapping."""
    if not isinstance(data, dict):
        raise PuzzleFormatError("puzzle document must be a mapping")
    if "grid" not in data:
        raise PuzzleFormatError("puzzle document has no 'grid'")
    raw_rows = data["grid"]
    if not isinstance(raw_rows, list):
        raise PuzzleFormatError("'grid' must be a list of rows")

    grid = [_parse_row(raw, i) for i, raw in enumerate(raw_rows)]
    options = dict(data.get("options") or {})
    puzzle = Puzzle(
        name=str(data.get("name", default_name)),
        grid=grid,
        description=str(data.get("description", "")),
        options=options,
    )

    try:
        geometry = puzzle.geometry
        inferred = Geometry.for_grid(grid)
    except (GridShapeError, TypeError, ValueError) as exc:
        raise PuzzleFormatError(str(exc)) from exc
    if inferred != geometry:
        raise PuzzleFormatError(
            f"box_size {geometry.box_size} does not match a {len(grid)}x{len(grid)} grid"
        )
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if not 0 <= value <= geometry.size:
                raise PuzzleFormatError(
                    f"cell ({r}, {c}) holds {value}, expected 0..{geometry.size}"
                )
    return puzzle


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise PuzzleFormatError(f"{path}: {exc}") from exc
    return parse_puzzle(data, default_name=path.stem)


def dump_solutions(solutions: Iterable[Solution], path: str | Path, name: str = "puzzle") -> None:
    """Write solutions as YAML, one list of row strings per solution."""
    solutions = list(solutions)
    document = {
        "name": name,
        "count": len(solutions),
        "solutions": [
            ["".join(str(v) for v in row) for row in solution] for solution in solutions
        ],
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(document, f, sort_keys=False)
