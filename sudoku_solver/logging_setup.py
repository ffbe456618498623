"""Sink configuration for the command line entry point."""

from __future__ import annotations

import sys

from loguru import logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING") -> None:
    """Send log records at level and above to stderr, replacing existing sinks."""
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}")
    logger.remove()
    logger.enable("sudoku_solver")
    logger.add(sys.stderr, level=level)


__all__ = ["LOG_LEVELS", "configure_logging"]
