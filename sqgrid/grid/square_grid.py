# sqgrid/grid/square_grid.py
"""
SquareGrid: a mutable N×N grid of fixed-width integers (int32 by default).

- cells: (N, N) numpy array, row-major, zero-filled on construction
- add / multiply return new grids; operands are never touched
- swap_rows / swap_columns / update_element validate indices and report
  failure as False + an error message, leaving the grid unchanged
- get / set and mismatched add / multiply are caller contracts: they raise
  (IndexError, OverflowError, GridShapeError) instead of returning False

Arithmetic stays in the storage dtype, so overflow wraps like the native
fixed-width integer does.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, TextIO

import numpy as np

from sqgrid.common.errors import GridFormatError, GridShapeError, GridSourceError
from sqgrid.grid.reader import GridReader
from sqgrid.grid.validator import check_cell, check_same_size, check_size, fits, in_bounds

logger = logging.getLogger(__name__)


class SquareGrid:
    """N×N integer grid with the load / arithmetic / diagonal / swap / update operations."""

    def __init__(self, n: int = 0, dtype=np.int32):
        check_size(n)
        self.cells = np.zeros((n, n), dtype=dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], dtype=np.int32) -> "SquareGrid":
        n = len(rows)
        if any(len(r) != n for r in rows):
            raise GridShapeError(f"rows do not form a square grid ({n} rows)")
        grid = cls(n, dtype=dtype)
        if n:
            grid.cells[...] = np.asarray(rows, dtype=dtype)
        return grid

    @classmethod
    def identity(cls, n: int, dtype=np.int32) -> "SquareGrid":
        grid = cls(n, dtype=dtype)
        np.fill_diagonal(grid.cells, 1)
        return grid

    @property
    def size(self) -> int:
        return self.cells.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self.cells.dtype

    # ---- loading ----

    def load_from(self, source) -> bool:
        """
        Replace this grid with one read from `source`.

        source: a path (reads the size header, then one grid) or an open
        GridReader (reuses its size header and reads the next grid, so
        successive calls walk through one file).

        Returns False with an error message when the source cannot be
        opened or does not hold a complete grid; the grid is then unchanged.
        """
        try:
            if isinstance(source, GridReader):
                cells = source.read_cells(self.dtype)
            else:
                with GridReader(source) as reader:
                    cells = reader.read_cells(self.dtype)
        except GridSourceError as e:
            logger.error("Error: Could not open file %s", e.source)
            return False
        except GridFormatError as e:
            logger.error("Error: Invalid matrix data: %s", e)
            return False

        self.cells = cells
        logger.debug("loaded %dx%d grid", self.size, self.size)
        return True

    # ---- raw access ----

    def get(self, row: int, col: int) -> int:
        check_cell(self.size, row, col)
        return int(self.cells[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        check_cell(self.size, row, col)
        if not fits(self.dtype, value):
            raise OverflowError(f"value {value} does not fit {self.dtype.name}")
        self.cells[row, col] = value

    # ---- arithmetic ----

    def add(self, other: "SquareGrid") -> "SquareGrid":
        """Elementwise sum as a new grid."""
        check_same_size(self, other)
        result = SquareGrid(self.size, dtype=self.dtype)
        result.cells[...] = (self.cells + other.cells).astype(self.dtype)
        return result

    def multiply(self, other: "SquareGrid") -> "SquareGrid":
        """
        Standard product as a new grid:
            result[i][j] = sum_k self[i][k] * other[k][j]
        """
        check_same_size(self, other)
        result = SquareGrid(self.size, dtype=self.dtype)
        result.cells[...] = np.matmul(self.cells, other.cells.astype(self.dtype))
        return result

    def main_diagonal_sum(self) -> int:
        return int(np.trace(self.cells, dtype=self.dtype))

    def secondary_diagonal_sum(self) -> int:
        # cells[i][size-1-i]: the main diagonal of the left-right mirror
        return int(np.trace(np.fliplr(self.cells), dtype=self.dtype))

    # ---- validated mutation ----

    def swap_rows(self, row1: int, row2: int) -> bool:
        if not in_bounds(self.size, row1, row2):
            logger.error("Error: Invalid row indices")
            return False
        self.cells[[row1, row2], :] = self.cells[[row2, row1], :]
        return True

    def swap_columns(self, col1: int, col2: int) -> bool:
        if not in_bounds(self.size, col1, col2):
            logger.error("Error: Invalid column indices")
            return False
        self.cells[:, [col1, col2]] = self.cells[:, [col2, col1]]
        return True

    def update_element(self, row: int, col: int, value: int) -> bool:
        if not in_bounds(self.size, row, col):
            logger.error("Error: Invalid indices")
            return False
        if not fits(self.dtype, value):
            logger.error("Error: Value %s out of range for %s", value, self.dtype.name)
            return False
        self.cells[row, col] = value
        return True

    # ---- copies & output ----

    def copy(self) -> "SquareGrid":
        dup = SquareGrid(0, dtype=self.dtype)
        dup.cells = self.cells.copy()
        return dup

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.cells]

    def format(self, name: str = "Matrix", width: int = 3) -> str:
        """
        "<name>:" then one line per row, each value right-justified to
        `width` and followed by a space, then a blank line.
        """
        lines = [f"{name}:"]
        for row in self.cells:
            lines.append("".join(f"{int(v):>{width}} " for v in row))
        lines.append("")
        return "\n".join(lines) + "\n"

    def display(self, name: str = "Matrix", width: int = 3, out: Optional[TextIO] = None) -> None:
        print(self.format(name, width), end="", file=out or sys.stdout)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SquareGrid):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"SquareGrid(size={self.size}, dtype={self.dtype.name}, rows={self.to_rows()})"
