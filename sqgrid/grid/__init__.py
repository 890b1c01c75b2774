"""
Grid — the SquareGrid container and its file plumbing.

- SquareGrid: N×N fixed-width integer grid with the named operations
- GridReader: one open token cursor; size header once, then successive grids
- save_grids: write grids back to the flat text format
"""
from .reader import GridReader
from .square_grid import SquareGrid
from .saver import save_grids
