# sqgrid/demo/runner.py
"""
Driver: load two grids from one file, run every operation, print results.

Sequence (each step prints a section header, then its grid or values):
  1) Matrix 1, Matrix 2 as loaded
  2) Sum                         (add)
  3) Product                     (multiply)
  4) four diagonal sums          (main / secondary for each grid)
  5) copy of grid 1, rows 0 and 1 swapped
  6) copy of grid 2, columns 0 and 1 swapped
  7) copy of grid 1, (0,0) set to 99

Steps 5-7 work on copies, so grid 1 and grid 2 stay as loaded.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from sqgrid.common.config import Settings
from sqgrid.grid.reader import GridReader
from sqgrid.grid.square_grid import SquareGrid

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1


def _header(out: TextIO, title: str) -> None:
    print(f"=== {title} ===", file=out)


def run_demo(path, out: Optional[TextIO] = None, settings: Optional[Settings] = None) -> int:
    out = out or sys.stdout
    settings = settings or Settings()
    width = settings.cell_width

    grid1 = SquareGrid(0, dtype=settings.np_dtype)
    grid2 = SquareGrid(0, dtype=settings.np_dtype)

    # one cursor: the size header is read once, then grid 1, then grid 2
    reader = GridReader(path)
    try:
        if not (grid1.load_from(reader) and grid2.load_from(reader)):
            return EXIT_LOAD_FAILED
    finally:
        reader.close()
    logger.info("loaded two %dx%d grids from %s", grid1.size, grid1.size, path)

    grid1.display("Matrix 1", width, out)
    grid2.display("Matrix 2", width, out)

    _header(out, "Matrix Addition")
    grid1.add(grid2).display("Sum", width, out)

    _header(out, "Matrix Multiplication")
    grid1.multiply(grid2).display("Product", width, out)

    _header(out, "Diagonal Sums")
    for label, g in (("Matrix 1", grid1), ("Matrix 2", grid2)):
        print(f"Main diagonal sum of {label}: {g.main_diagonal_sum()}", file=out)
        print(f"Secondary diagonal sum of {label}: {g.secondary_diagonal_sum()}", file=out)
    print(file=out)

    _header(out, "Row Swapping")
    swapped_rows = grid1.copy()
    if swapped_rows.swap_rows(0, 1):
        swapped_rows.display("Matrix 1 after swapping rows 0 and 1", width, out)

    _header(out, "Column Swapping")
    swapped_cols = grid2.copy()
    if swapped_cols.swap_columns(0, 1):
        swapped_cols.display("Matrix 2 after swapping columns 0 and 1", width, out)

    _header(out, "Element Update")
    updated = grid1.copy()
    if updated.update_element(0, 0, 99):
        updated.display("Matrix 1 after updating element (0,0) to 99", width, out)

    return EXIT_OK
