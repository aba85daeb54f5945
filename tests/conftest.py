# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "solvers", "utils", "data" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from data.builtin_puzzles import PUZZLES  # noqa: E402
from utils.board_utils import board_from_string  # noqa: E402

HARDEST = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"


@pytest.fixture
def puzzle_1():
    return board_from_string(PUZZLES[0][0])


@pytest.fixture
def solution_1():
    return board_from_string(PUZZLES[0][1])


@pytest.fixture
def puzzle_2():
    return board_from_string(PUZZLES[1][0])


@pytest.fixture
def solution_2():
    return board_from_string(PUZZLES[1][1])


@pytest.fixture
def hardest():
    return board_from_string(HARDEST)
