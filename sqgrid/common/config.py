# sqgrid/common/config.py
"""
Environment-driven settings (no config files).

- SQGRID_CELL_WIDTH: display column width (default 3)
- SQGRID_DTYPE:      fixed-width storage type (int8/int16/int32/int64, default int32)
- SQGRID_LOG_LEVEL:  logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

import numpy as np

INT_DTYPES = ("int8", "int16", "int32", "int64")


@dataclass(frozen=True)
class Settings:
    cell_width: int = 3
    dtype: str = "int32"
    log_level: str = "WARNING"

    @property
    def np_dtype(self) -> np.dtype:
        return np.dtype(self.dtype)

    @property
    def log_level_no(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read Settings from the environment (or a given mapping).
    Raise ValueError listing every bad variable at once.
    """
    env = os.environ if env is None else env
    errs: List[str] = []

    raw_width = env.get("SQGRID_CELL_WIDTH", "3")
    try:
        cell_width = int(raw_width)
        if cell_width < 1:
            errs.append(f"SQGRID_CELL_WIDTH must be >= 1 (got {cell_width})")
    except ValueError:
        cell_width = 3
        errs.append(f"SQGRID_CELL_WIDTH must be an integer (got {raw_width!r})")

    dtype = env.get("SQGRID_DTYPE", "int32").strip().lower()
    if dtype not in INT_DTYPES:
        errs.append(f"SQGRID_DTYPE must be one of {', '.join(INT_DTYPES)} (got {dtype!r})")

    log_level = env.get("SQGRID_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        errs.append(f"SQGRID_LOG_LEVEL is not a logging level (got {log_level!r})")

    if errs:
        raise ValueError("; ".join(errs))
    return Settings(cell_width=cell_width, dtype=dtype, log_level=log_level)
