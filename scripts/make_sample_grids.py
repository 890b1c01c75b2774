#!/usr/bin/env python3
import argparse
from pathlib import Path
import numpy as np

from sqgrid.grid import SquareGrid, save_grids


def main():
    ap = argparse.ArgumentParser(description="Write a sample two-grid input file for the sqgrid demo")
    ap.add_argument("--out", default="matrix_input.txt", help="Output file")
    ap.add_argument("--size", type=int, default=4, help="Side length N")
    ap.add_argument("--low", type=int, default=0, help="Smallest cell value")
    ap.add_argument("--high", type=int, default=20, help="Largest cell value")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed")
    args = ap.parse_args()

    if args.size < 2:
        # the demo swaps rows/columns 0 and 1
        raise SystemExit("--size must be >= 2")

    rng = np.random.default_rng(args.seed)
    grids = []
    for _ in range(2):
        rows = rng.integers(args.low, args.high + 1, size=(args.size, args.size)).tolist()
        grids.append(SquareGrid.from_rows(rows))

    path = save_grids(Path(args.out), *grids)
    print(f"Wrote: {path}")


if __name__ == "__main__":
    main()
