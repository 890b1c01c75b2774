# sqgrid/grid/reader.py
"""
GridReader: a single open cursor over a whitespace-delimited grid file.

File layout (tokens, not lines):
    N
    <N*N integers: grid 1, row-major>
    <N*N integers: grid 2, row-major>
    ...

The size header is read once, on first use, and shared by every grid
read afterwards. Each read_cells() call consumes the next N*N tokens.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator, Optional, Union

import numpy as np

from sqgrid.common.errors import GridFormatError, GridSourceError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# plain ASCII decimal, optional sign; no "1_000", no non-ASCII digits
INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class GridReader:
    """
    Token cursor shared by successive loads.

    A grid that fails to read leaves the cursor part-way through it, so the
    reader refuses every later read_cells() call with GridFormatError.
    """

    def __init__(self, path: PathLike):
        self.name = os.fspath(path)
        self.path = Path(path)
        self.grids_read = 0
        self._fh = None
        self._tokens: Optional[Iterator[str]] = None
        self._size: Optional[int] = None
        self._failed: Optional[str] = None

    # ---- resource handling ----

    def open(self) -> "GridReader":
        if self._fh is None:
            try:
                self._fh = self.path.open("r", encoding="utf-8")
            except OSError as e:
                raise GridSourceError(self.name, str(e)) from e
            self._tokens = self._iter_tokens()
            logger.debug("opened %s", self.path)
        return self

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "GridReader":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- token cursor ----

    def _iter_tokens(self) -> Iterator[str]:
        for line in self._fh:
            yield from line.split()

    def _next_int(self, what: str) -> int:
        if self._tokens is None:
            self.open()
        try:
            tok = next(self._tokens)
        except StopIteration:
            raise GridFormatError(f"{self.path}: unexpected end of data while reading {what}") from None
        except UnicodeDecodeError as e:
            raise GridFormatError(f"{self.path}: not UTF-8 text while reading {what} ({e.reason})") from e
        except OSError as e:
            raise GridSourceError(self.name, str(e)) from e
        if not INT_TOKEN.fullmatch(tok):
            raise GridFormatError(f"{self.path}: expected an integer for {what}, got {tok!r}")
        return int(tok)

    @property
    def size(self) -> int:
        if self._size is None:
            n = self._next_int("grid size")
            if n < 0:
                raise GridFormatError(f"{self.path}: grid size must be >= 0 (got {n})")
            self._size = n
        return self._size

    def read_cells(self, dtype=np.int32) -> np.ndarray:
        """
        Consume the next N*N tokens and return them as an (N, N) array.
        Nothing is returned for a partial grid: truncation raises GridFormatError.
        """
        if self._failed is not None:
            raise GridFormatError(f"{self.path}: no further grids after a failed read ({self._failed})")
        try:
            values = self._read_values(dtype)
        except (GridFormatError, GridSourceError) as e:
            self._failed = str(e)
            raise
        n = self.size
        which = self.grids_read + 1

        cells = np.array(values, dtype=dtype).reshape(n, n)
        self.grids_read += 1
        logger.debug("read grid %d (%dx%d) from %s", which, n, n, self.path)
        return cells

    def _read_values(self, dtype):
        n = self.size
        which = self.grids_read + 1
        values = [self._next_int(f"cell ({k // n},{k % n}) of grid {which}") for k in range(n * n)]

        info = np.iinfo(dtype)
        bad = [v for v in values if v < info.min or v > info.max]
        if bad:
            raise GridFormatError(
                f"{self.path}: value {bad[0]} of grid {which} does not fit {np.dtype(dtype).name}"
            )
        return values
