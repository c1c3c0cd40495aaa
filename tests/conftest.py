from pathlib import Path

import pytest

from sudokusolver.core.world import Solution

SAMPLES = Path(__file__).resolve().parent.parent / "samples"

SOLVED = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]

PUZZLE = [
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
]

SMALL_SOLVED = ["1234", "3412", "2143", "4321"]


def to_grid(rows):
    return [[int(ch) for ch in row] for row in rows]


@pytest.fixture
def solved():
    return to_grid(SOLVED)


@pytest.fixture
def puzzle():
    return to_grid(PUZZLE)


@pytest.fixture
def small_solved():
    return to_grid(SMALL_SOLVED)


@pytest.fixture
def samples_dir():
    return SAMPLES


@pytest.fixture
def solved_rows():
    return list(SOLVED)


@pytest.fixture
def solved_solution():
    return Solution.from_grid(to_grid(SOLVED))


@pytest.fixture
def small_solution():
    return Solution.from_grid(to_grid(SMALL_SOLVED))
