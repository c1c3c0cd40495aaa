"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..core.constraints import is_solved
from ..core.csp import solve
from ..core.errors import SudokuError
from ..puzzles import available_puzzles, get_puzzle
from . import parser
from .render import format_elapsed, render_grid

log = logging.getLogger(__name__)

DEFAULT_SAMPLE = "telegraph"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sudoku-solver",
        description="Enumerate every solution of a sudoku by backtracking",
    )
    ap.add_argument("puzzle", nargs="?", help="Path to puzzle YAML")
    ap.add_argument("--sample", help=f"Solve a built-in sample (default: {DEFAULT_SAMPLE})")
    ap.add_argument("--list-samples", action="store_true", help="List built-in samples and exit")
    ap.add_argument("--count-only", action="store_true", help="Do not print the solutions")
    ap.add_argument("--check", action="store_true", help="Verify every solution before printing")
    ap.add_argument("--output", type=Path, help="Also write the solutions to this YAML file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _load(args) -> parser.Puzzle:
    if args.puzzle and args.sample:
        raise SudokuError("give either a puzzle file or --sample, not both")
    if args.puzzle:
        return parser.load_puzzle(Path(args.puzzle))
    name = args.sample or DEFAULT_SAMPLE
    return parser.parse_puzzle({"name": name, "grid": get_puzzle(name)})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_samples:
        for name in available_puzzles():
            print(name)
        return 0

    try:
        puz = _load(args)
        geometry = puz.geometry
        log.info("Solving %s", puz.name)
        result = solve(puz.grid, geometry)
    except (SudokuError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.check:
        bad = [i for i, s in enumerate(result.solutions, 1) if not is_solved(s.rows, geometry)]
        if bad:
            print(f"error: invalid solution(s): {bad}", file=sys.stderr)
            return 1

    print(f"Time elapsed (Run time): {format_elapsed(result.elapsed)}")
    print(f"Number of solutions: {result.count}")
    if not args.count_only:
        for solution in result.solutions:
            print(render_grid(solution.rows, geometry))

    if args.output:
        try:
            parser.dump_solutions(result.solutions, args.output, name=puz.name)
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        log.info("Wrote %d solution(s) to %s", result.count, args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
