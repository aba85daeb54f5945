import numpy as np
import pytest

from solvers.candidates import ALL_MASK, values_to_mask
from solvers.errors import InvalidInputError
from solvers.grid import Grid, initialize


def test_initialize_blank_and_given_cells(puzzle_1):
    grid = initialize(puzzle_1)

    assert grid.value(0, 0) == 8
    assert grid.candidates(0, 0) == [8]
    assert grid.value(0, 1) == 0
    assert grid.candidates(0, 1) == list(range(1, 10))
    assert np.array_equal(grid.to_board(), puzzle_1)
    assert not grid.is_complete()


def test_from_string_matches_from_matrix(puzzle_1):
    s = "".join(str(v) for v in puzzle_1.flatten())
    assert np.array_equal(Grid.from_string(s).cells, Grid.from_matrix(puzzle_1).cells)


def test_row_union(puzzle_1):
    assert Grid.from_matrix(puzzle_1).row_union(0) == values_to_mask([8, 5, 4])


def test_column_union(puzzle_1):
    assert Grid.from_matrix(puzzle_1).column_union(0) == values_to_mask([8, 9, 4])


def test_block_union(puzzle_1):
    grid = Grid.from_matrix(puzzle_1)
    assert grid.block_union(0, 0) == values_to_mask([8, 5, 2])
    assert grid.block_union(2, 2) == values_to_mask([8, 5, 2])
    assert grid.block_union(3, 3) == values_to_mask([9, 7, 5])


def test_blank_grid_has_empty_unions():
    grid = Grid.from_matrix(np.zeros((9, 9), dtype=int))
    assert all(grid.row_union(i) == 0 for i in range(9))
    assert all(grid.column_union(i) == 0 for i in range(9))
    assert np.all(grid.cells == ALL_MASK)


@pytest.mark.parametrize("bad", [10, -1])
def test_out_of_range_digit_is_rejected(puzzle_1, bad):
    puzzle_1[4, 4] = bad
    with pytest.raises(InvalidInputError):
        Grid.from_matrix(puzzle_1)


def test_wrong_shape_is_rejected():
    with pytest.raises(InvalidInputError):
        Grid.from_matrix(np.zeros((9, 8), dtype=int))
    with pytest.raises(InvalidInputError):
        Grid.from_matrix([[0] * 9] * 8 + [[0] * 3])


def test_non_integer_digits_are_rejected():
    with pytest.raises(InvalidInputError):
        Grid.from_matrix(np.full((9, 9), 0.5))


def test_bad_puzzle_string_is_rejected():
    with pytest.raises(InvalidInputError):
        Grid.from_string("123")
    with pytest.raises(InvalidInputError):
        Grid.from_string("x" * 81)


def test_duplicate_givens_are_recorded_as_clash(puzzle_1):
    puzzle_1[0, 4] = 8
    grid = Grid.from_matrix(puzzle_1)
    assert grid.clashes == [(0, 4)]
    y, x, _ = grid.find_contradiction()
    assert (y, x) == (0, 4)


def test_copy_is_independent(puzzle_1):
    grid = Grid.from_matrix(puzzle_1)
    other = grid.copy()
    other.cells[0, 1] = values_to_mask([1])
    other.rows[0] = 0
    assert grid.candidates(0, 1) == list(range(1, 10))
    assert grid.row_union(0) == values_to_mask([8, 5, 4])


def test_str_renders_rows(puzzle_1):
    lines = str(Grid.from_matrix(puzzle_1)).splitlines()
    assert len(lines) == 9
    assert lines[0] == "8 0 5 4 0 0 0 0 0"


def test_copy_keeps_subclass(puzzle_1):
    class TracedGrid(Grid):
        pass

    grid = TracedGrid.from_matrix(puzzle_1)
    assert isinstance(grid.copy(), TracedGrid)
