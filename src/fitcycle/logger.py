"""Loguru setup shared by the CLI and the API server."""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: str | None = None) -> None:
    """Send fitcycle logs to stderr and, if ``log_file`` is set, to a weekly rotated file.

    Console output stays short since it interleaves with CLI output; the
    file keeps timestamps and line numbers. Calling it again replaces the
    previous sinks.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, format=FILE_FORMAT, level=level, rotation="1 week", retention=4)

    logger.debug(f"Logging at {level}" + (f" to {log_file}" if log_file else ""))
