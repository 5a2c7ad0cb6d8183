"""Logging utilities for the OneMax evolution engine."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics go to stderr; stdout carries the run report.
_console = Console(stderr=True, safe_box=True)


class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    MINIMAL = 1
    NORMAL = 2
    VERBOSE = 3
    DEBUG = 4


# Global verbosity setting
_verbosity = LogLevel.NORMAL
_logger: logging.Logger | None = None


def set_verbosity(level: LogLevel | str | int) -> None:
    """Set the global verbosity level."""
    global _verbosity

    if isinstance(level, str):
        level = LogLevel[level.upper()]
    elif isinstance(level, int):
        level = LogLevel(level)

    _verbosity = level

    # Update logger level
    if _logger:
        if level == LogLevel.SILENT:
            _logger.setLevel(logging.CRITICAL + 1)
        elif level == LogLevel.MINIMAL:
            _logger.setLevel(logging.WARNING)
        elif level == LogLevel.NORMAL:
            _logger.setLevel(logging.INFO)
        else:  # VERBOSE, DEBUG
            _logger.setLevel(logging.DEBUG)


def get_verbosity() -> LogLevel:
    """Get the current verbosity level."""
    return _verbosity


def get_logger(name: str = "onemax") -> logging.Logger:
    """Get a configured logger instance."""
    global _logger

    if _logger is None:
        _logger = logging.getLogger(name)
        _logger.handlers.clear()
        _logger.propagate = False

        handler = RichHandler(
            console=_console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        _logger.addHandler(handler)

        # Set initial level
        set_verbosity(_verbosity)

    return _logger


def log_event(
    event: str,
    level: LogLevel = LogLevel.NORMAL,
    **kwargs: Any,
) -> None:
    """Log an event with optional structured data."""
    if _verbosity < level:
        return

    logger = get_logger()

    if kwargs:
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        message = f"[{event}] {details}"
    else:
        message = f"[{event}]"

    # Map level to logging level
    if level <= LogLevel.MINIMAL:
        logger.warning(message)
    elif level == LogLevel.NORMAL:
        logger.info(message)
    else:
        logger.debug(message)


def log_generation(
    gen: int,
    best_fitness: int,
    mean_fitness: float,
    **extra: Any,
) -> None:
    """Log generation progress (verbose level)."""
    log_event(
        f"GEN {gen:04d}",
        level=LogLevel.VERBOSE,
        best=best_fitness,
        mean=f"{mean_fitness:.2f}",
        **extra,
    )
