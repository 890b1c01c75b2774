# sqgrid/common/errors.py
"""
Error kinds for grid loading and grid arithmetic.

- GridSourceError: the source cannot be opened/read at all
- GridFormatError: the source opened but its tokens do not describe a grid
- GridShapeError:  two grids of different size were combined
- GridSizeError:   a negative side length was requested

Bad indices passed to the named operations (swap_rows, swap_columns,
update_element) are NOT exceptions; those report False + a message.
"""


class GridError(Exception):
    """Base class for all sqgrid errors."""


class GridSourceError(GridError):
    def __init__(self, source, reason: str = ""):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Could not open file {self.source}")


class GridFormatError(GridError, ValueError):
    pass


class GridShapeError(GridError, ValueError):
    pass


class GridSizeError(GridError, ValueError):
    pass
