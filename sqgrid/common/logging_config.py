"""
Logging Configuration
Sets up the package logger for sqgrid.
"""
import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
# CLI output: error records read like plain printed lines
PLAIN_FORMAT = '%(message)s'


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[str] = None,
                  fmt: str = DEFAULT_FORMAT,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the logger for the 'sqgrid' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        fmt: Format string for every handler.
        stream: Console stream, stdout when omitted.
    """
    logger = logging.getLogger("sqgrid")
    logger.setLevel(level)

    # Avoid duplicate lines when main() runs more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    formatter = logging.Formatter(fmt, datefmt='%H:%M:%S')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
