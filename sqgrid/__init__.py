"""
SQGRID — square integer grids (load, arithmetic, diagonals, swaps)

Modules
-------
- grid: SquareGrid container, GridReader (token cursor), saver, validator
- demo: Driver that runs the full operation sequence over one grid file
- common: Errors, environment settings, logging setup
- cli: Console entry point (`sqgrid [FILE]`)
"""

__all__ = [
    "grid",
    "demo",
    "common",
    "cli",
]

__version__ = "0.0.1"
