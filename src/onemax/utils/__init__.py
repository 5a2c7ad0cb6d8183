"""Utility modules for the OneMax evolution engine."""

from onemax.utils.logging import get_logger, set_verbosity, get_verbosity, LogLevel

__all__ = [
    "get_logger",
    "set_verbosity",
    "get_verbosity",
    "LogLevel",
]
