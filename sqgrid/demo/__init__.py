"""
Demo — the run-once driver over one grid file.

- run_demo(path, out=stdout) -> exit code (0 ok, 1 unreadable file)
"""
from .runner import run_demo
