# sqgrid/grid/validator.py
"""
Precondition checks shared by SquareGrid, GridReader and the saver.

The raising checks cover caller-contract violations (programming errors).
`in_bounds` is the non-raising test used by the named operations that
report failure with a boolean instead.
"""

from __future__ import annotations

from typing import List

import numpy as np

from sqgrid.common.errors import GridShapeError, GridSizeError


def check_size(n: int) -> None:
    if n < 0:
        raise GridSizeError(f"grid size must be >= 0 (got {n})")


def in_bounds(size: int, *indices: int) -> bool:
    """True if every index lies in [0, size)."""
    return all(0 <= i < size for i in indices)


def check_cell(size: int, row: int, col: int) -> None:
    """
    Raise IndexError for any coordinate outside [0, size).
    Negative indices are rejected, not wrapped.
    """
    errs: List[str] = []
    if not in_bounds(size, row):
        errs.append(f"row {row} out of range for size {size}")
    if not in_bounds(size, col):
        errs.append(f"col {col} out of range for size {size}")
    if errs:
        raise IndexError("; ".join(errs))


def check_same_size(*grids) -> int:
    """
    Raise GridShapeError unless all grids share one size; return that size.
    """
    sizes = [g.size for g in grids]
    if len(set(sizes)) > 1:
        raise GridShapeError(
            "grid sizes differ: " + " vs ".join(f"{n}x{n}" for n in sizes)
        )
    return sizes[0] if sizes else 0


def fits(dtype, value: int) -> bool:
    """True if `value` is representable in the integer dtype without wrapping."""
    info = np.iinfo(dtype)
    return info.min <= value <= info.max
