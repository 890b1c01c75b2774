# sqgrid/tests/test_square_grid.py
"""
Tests for sqgrid.grid.square_grid.SquareGrid.

Covers construction, raw access contracts, add / multiply, diagonal sums
and the validated mutations (swap_rows, swap_columns, update_element).
"""

import logging

import numpy as np
import pytest

from sqgrid.common.errors import GridShapeError, GridSizeError
from sqgrid.grid import SquareGrid


def test_new_grid_is_zero_filled_and_square():
    g = SquareGrid(3)
    assert g.size == 3
    assert g.cells.shape == (3, 3)
    assert g.cells.dtype == np.int32
    assert g.to_rows() == [[0, 0, 0]] * 3


def test_empty_grid_is_allowed():
    g = SquareGrid(0)
    assert g.size == 0
    assert g.main_diagonal_sum() == 0
    assert g.secondary_diagonal_sum() == 0
    assert g.format("Empty") == "Empty:\n\n"


def test_negative_size_is_rejected():
    with pytest.raises(GridSizeError):
        SquareGrid(-1)


def test_from_rows_requires_square_input():
    with pytest.raises(GridShapeError):
        SquareGrid.from_rows([[1, 2], [3]])


def test_get_set_round_trip(grid1):
    grid1.set(1, 0, 42)
    assert grid1.get(1, 0) == 42
    assert isinstance(grid1.get(1, 0), int)


@pytest.mark.parametrize("row, col", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_get_set_out_of_range_raise(grid1, row, col):
    """Negative indices must not wrap around to the last row/column."""
    with pytest.raises(IndexError):
        grid1.get(row, col)
    with pytest.raises(IndexError):
        grid1.set(row, col, 7)
    assert grid1.to_rows() == [[1, 2], [3, 4]]


def test_add_is_elementwise_and_commutative(grid1, grid2):
    s = grid1.add(grid2)
    assert s.to_rows() == [[6, 8], [10, 12]]
    assert grid2.add(grid1) == s
    for i in range(2):
        for j in range(2):
            assert s.get(i, j) == grid1.get(i, j) + grid2.get(i, j)


def test_add_and_multiply_leave_operands_alone(grid1, grid2):
    grid1.add(grid2)
    grid1.multiply(grid2)
    assert grid1.to_rows() == [[1, 2], [3, 4]]
    assert grid2.to_rows() == [[5, 6], [7, 8]]


def test_multiply_matches_dot_product(grid1, grid2):
    p = grid1.multiply(grid2)
    assert p.to_rows() == [[19, 22], [43, 50]]


def test_multiply_by_identity_is_neutral():
    rng = np.random.default_rng(0)
    g = SquareGrid.from_rows(rng.integers(-50, 50, size=(5, 5)).tolist())
    eye = SquareGrid.identity(5)
    assert g.multiply(eye) == g
    assert eye.multiply(g) == g


def test_result_does_not_alias_operands(grid1, grid2):
    s = grid1.add(grid2)
    s.set(0, 0, 0)
    assert grid1.get(0, 0) == 1
    assert grid2.get(0, 0) == 5


def test_size_mismatch_raises(grid1):
    other = SquareGrid(3)
    with pytest.raises(GridShapeError):
        grid1.add(other)
    with pytest.raises(GridShapeError):
        grid1.multiply(other)


def test_int32_arithmetic_wraps():
    big = np.iinfo(np.int32).max
    a = SquareGrid.from_rows([[big]])
    b = SquareGrid.from_rows([[1]])
    assert a.add(b).get(0, 0) == np.iinfo(np.int32).min
    c = SquareGrid.from_rows([[65536]])
    assert c.multiply(c).get(0, 0) == 0  # 2**32 wraps to 0


def test_diagonal_sums():
    g = SquareGrid.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert g.main_diagonal_sum() == 15
    assert g.secondary_diagonal_sum() == 15
    g.set(0, 2, 10)
    assert g.secondary_diagonal_sum() == 22


def test_main_diagonal_ignores_off_diagonal_cells(grid1):
    before = grid1.main_diagonal_sum()
    grid1.set(0, 1, 1000)
    grid1.set(1, 0, -1000)
    assert grid1.main_diagonal_sum() == before == 5


def test_swap_rows(grid1):
    assert grid1.swap_rows(0, 1) is True
    assert grid1.to_rows() == [[3, 4], [1, 2]]


def test_swap_rows_twice_restores(grid1):
    original = grid1.copy()
    grid1.swap_rows(0, 1)
    grid1.swap_rows(0, 1)
    assert grid1 == original


def test_swap_row_with_itself_is_noop(grid1):
    assert grid1.swap_rows(1, 1) is True
    assert grid1.to_rows() == [[1, 2], [3, 4]]


@pytest.mark.parametrize("r1, r2", [(-1, 0), (0, 2), (5, 5)])
def test_swap_rows_out_of_range_reports_failure(grid1, caplog, r1, r2):
    before = grid1.cells.tobytes()
    with caplog.at_level(logging.ERROR, logger="sqgrid"):
        assert grid1.swap_rows(r1, r2) is False
    assert "Error: Invalid row indices" in caplog.text
    assert grid1.cells.tobytes() == before
    assert grid1.to_rows() == [[1, 2], [3, 4]]


def test_swap_columns(grid2):
    assert grid2.swap_columns(0, 1) is True
    assert grid2.to_rows() == [[6, 5], [8, 7]]


def test_swap_columns_out_of_range_reports_failure(grid2, caplog):
    with caplog.at_level(logging.ERROR, logger="sqgrid"):
        assert grid2.swap_columns(0, 2) is False
    assert "Error: Invalid column indices" in caplog.text
    assert grid2.to_rows() == [[5, 6], [7, 8]]


def test_update_element(grid1):
    assert grid1.update_element(0, 0, 99) is True
    assert grid1.to_rows() == [[99, 2], [3, 4]]


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_update_element_out_of_range_reports_failure(grid1, caplog, row, col):
    with caplog.at_level(logging.ERROR, logger="sqgrid"):
        assert grid1.update_element(row, col, 99) is False
    assert "Error: Invalid indices" in caplog.text
    assert grid1.to_rows() == [[1, 2], [3, 4]]


def test_mutations_keep_shape():
    g = SquareGrid.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    g.swap_rows(0, 2)
    g.swap_columns(1, 2)
    g.update_element(1, 1, -4)
    assert g.cells.shape == (3, 3)
    assert g.to_rows() == [[7, 9, 8], [4, -4, 5], [1, 3, 2]]


def test_copy_is_independent(grid1):
    dup = grid1.copy()
    dup.update_element(0, 0, 99)
    assert grid1.get(0, 0) == 1
    assert dup.dtype == grid1.dtype


def test_format_right_justifies_columns():
    g = SquareGrid.from_rows([[1, -20], [300, 4]])
    assert g.format("Matrix 1") == "Matrix 1:\n  1 -20 \n300   4 \n\n"
    assert g.format("W", width=5).splitlines()[1] == "    1   -20 "


def test_display_writes_to_stream(grid1, capsys):
    grid1.display()
    assert capsys.readouterr().out == "Matrix:\n  1   2 \n  3   4 \n\n"


def test_update_element_value_outside_dtype_reports_failure(grid1, caplog):
    with caplog.at_level(logging.ERROR, logger="sqgrid"):
        assert grid1.update_element(0, 0, 2**40) is False
        assert grid1.update_element(1, 1, np.iinfo(np.int32).min - 1) is False
    assert "Error: Value 1099511627776 out of range for int32" in caplog.text
    assert grid1.to_rows() == [[1, 2], [3, 4]]


def test_update_element_accepts_dtype_limits(grid1):
    assert grid1.update_element(0, 1, np.iinfo(np.int32).max) is True
    assert grid1.update_element(1, 0, np.iinfo(np.int32).min) is True
    assert grid1.get(0, 1) == 2**31 - 1
    assert grid1.get(1, 0) == -(2**31)


def test_set_value_outside_dtype_raises(grid1):
    with pytest.raises(OverflowError):
        grid1.set(0, 0, 2**40)
    small = SquareGrid(1, dtype=np.int8)
    with pytest.raises(OverflowError):
        small.set(0, 0, 128)
    assert grid1.get(0, 0) == 1
    assert small.get(0, 0) == 0
