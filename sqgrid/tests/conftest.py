import logging

import pytest

from sqgrid.grid import SquareGrid

SAMPLE_TEXT = "2\n1 2\n3 4\n5 6\n7 8\n"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "matrix_input.txt"
    path.write_text(SAMPLE_TEXT)
    return path


@pytest.fixture
def grid1():
    return SquareGrid.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def grid2():
    return SquareGrid.from_rows([[5, 6], [7, 8]])


@pytest.fixture(autouse=True)
def _reset_sqgrid_logger():
    """setup_logging binds a handler to the current stdout; drop it between tests."""
    yield
    logger = logging.getLogger("sqgrid")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
