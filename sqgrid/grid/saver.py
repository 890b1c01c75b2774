from pathlib import Path
from typing import Union
import logging
import os

from sqgrid.grid.validator import check_same_size

logger = logging.getLogger(__name__)


def save_grids(path: Union[str, "os.PathLike[str]"], *grids) -> Path:
    """
    Writes the shared size N, then every grid row-major, one row per line.
    The result reads back with GridReader (one size header, grids in order).
    """
    n = check_same_size(*grids)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    with out.open("w") as f:
        f.write(f"{n}\n")
        for g in grids:
            for row in g.to_rows():
                f.write(" ".join(str(v) for v in row) + "\n")

    logger.debug("saved %d grid(s) of size %d to %s", len(grids), n, out)
    return out
