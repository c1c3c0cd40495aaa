"""Sample puzzle registry and base class."""

from __future__ import annotations

from typing import Dict, List, Tuple, Type

from ..core.errors import UnknownPuzzleError
from ..core.model import Grid


class SamplePuzzle:
    """Base sample puzzle; rows are digit strings with 0 for empty."""
    name: str = "puzzle"
    description: str = ""
    source: str = ""
    rows: Tuple[str, ...] = ()

    @classmethod
    def grid(cls) -> Grid:
        return [[int(ch) for ch in row] for row in cls.rows]


PUZZLE_REGISTRY: Dict[str, Type[SamplePuzzle]] = {}


def register_puzzle(cls: Type[SamplePuzzle]) -> Type[SamplePuzzle]:
    PUZZLE_REGISTRY[cls.name] = cls
    return cls


def available_puzzles() -> List[str]:
    return sorted(PUZZLE_REGISTRY)


def get_puzzle(name: str) -> Grid:
    """Return a fresh grid for the named sample."""
    try:
        cls = PUZZLE_REGISTRY[name]
    except KeyError:
        known = ", ".join(available_puzzles())
        raise UnknownPuzzleError(f"unknown sample puzzle {name!r} (known: {known})") from None
    return cls.grid()


from . import extreme, telegraph, very_easy  # noqa: E402,F401
