#!/usr/bin/env python3
"""
Console entry point:  sqgrid [FILE] [--width W] [--log-level LEVEL] [--log-file PATH]

Without FILE the filename is prompted for on stdin. Settings come from the
SQGRID_* environment variables; flags override them.
"""
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from sqgrid.common.config import load_settings
from sqgrid.common.logging_config import PLAIN_FORMAT, setup_logging
from sqgrid.demo.runner import run_demo

PROMPT = "Enter the filename containing matrix data: "


def _prompt_filename() -> str:
    print(PROMPT, end="", flush=True)
    line = sys.stdin.readline()
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="sqgrid", description="Square grid operations demo")
    ap.add_argument("file", nargs="?", help="Grid file: N, then two N×N integer grids")
    ap.add_argument("--width", type=int, default=None, help="Display column width")
    ap.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")
    ap.add_argument("--log-file", default=None, help="Also write log records to this file")
    args = ap.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        ap.error(str(e))

    if args.width is not None:
        if args.width < 1:
            ap.error(f"--width must be >= 1 (got {args.width})")
        settings = replace(settings, cell_width=args.width)
    if args.log_level is not None:
        level = args.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            ap.error(f"--log-level is not a logging level (got {args.log_level!r})")
        settings = replace(settings, log_level=level)

    # error records ("Error: ...") must print as plain lines on stdout
    setup_logging(level=min(settings.log_level_no, logging.ERROR),
                  log_file=args.log_file,
                  fmt=PLAIN_FORMAT)

    filename = args.file or _prompt_filename()
    return run_demo(filename, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
