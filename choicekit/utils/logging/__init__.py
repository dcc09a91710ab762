"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from choicekit.utils.logging.logger_factory import DevOnlyFilter, LoggerFactory, get_cached_logger
from choicekit.utils.logging.logger_setup import ConfigureLogger

__all__ = [
    "ConfigureLogger",
    "DevOnlyFilter",
    "LoggerFactory",
    "get_cached_logger",
]
