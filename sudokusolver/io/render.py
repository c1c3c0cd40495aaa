"""Plain-text drawing of grids and elapsed times."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.model import Geometry


def render_grid(grid: Sequence[Sequence[int]], geometry: Optional[Geometry] = None) -> str:
    """Draw ``grid`` inside a box frame, leaving empty cells blank.

    For a 9x9 grid::

        +-----------------+
        |8    |     |     |
        |    3|6    |     |
        |  7  |  9  |2    |
        |-----------------|
        ...
        +-----------------+
    """
    if geometry is None:
        geometry = Geometry.for_grid(grid)
    box, size = geometry.box_size, geometry.size
    width = 2 * size - 1
    border = "+" + "-" * width + "+"
    divider = "|" + "-" * width + "|"

    lines = [border]
    for r, row in enumerate(grid):
        boxes = []
        for left in range(0, size, box):
            boxes.append(" ".join(str(v) if v else " " for v in row[left:left + box]))
        lines.append("|" + "|".join(boxes) + "|")
        if (r + 1) % box == 0 and r + 1 != size:
            lines.append(divider)
    lines.append(border)
    return "\n".join(lines)


def format_elapsed(seconds: float) -> str:
    """Format a duration as HH:MM:SS.cc."""
    # truncate to hundredths; epsilon for float error
    centis = int(seconds * 100 + 1e-9)
    hours, centis = divmod(centis, 360000)
    minutes, centis = divmod(centis, 6000)
    secs, centis = divmod(centis, 100)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{centis:02d}"
