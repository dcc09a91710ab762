"""Module: logger_setup.py

Date: 2026-10-19

Provides the ConfigureLogger class for hosts that want choicekit's log
output. Console output uses a short format and hides dev-only records;
an optional rotating file receives everything at or above its level.
The package itself never configures logging on import.
"""

import contextlib
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from choicekit import config
from choicekit.utils.logging.logger_factory import DevOnlyFilter


class ConfigureLogger:
    """Configures root logging for an application embedding choicekit."""

    def __init__(
        self,
        log_name: str = config.APP_NAME,
        log_dir: str = "logs",
        console_enabled: bool | None = None,
        console_level: int | None = None,
        file_enabled: bool | None = None,
        file_level: int | None = None,
        max_bytes: int = config.LOG_FILE_MAX_BYTES,
        backup_count: int = config.LOG_FILE_BACKUP_COUNT,
    ):
        """Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log file.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Attach a console handler. Defaults to config.
            console_level (int): Logging level for the console. Defaults to config.
            file_enabled (bool): Attach a rotating file handler. Defaults to config.
            file_level (int): Logging level for the log file. Defaults to config.
            max_bytes (int): Max size in bytes for rotating file.
            backup_count (int): Number of backup log files to keep.
        """
        if console_enabled is None:
            console_enabled = config.LOG_TO_CONSOLE
        if file_enabled is None:
            file_enabled = config.LOG_TO_FILE
        if console_level is None:
            console_level = getattr(logging, config.LOG_CONSOLE_LEVEL, logging.INFO)
        if file_level is None:
            file_level = getattr(logging, config.LOG_FILE_LEVEL, logging.INFO)

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.handlers: list[logging.Handler] = []
        self.log_file_path: str | None = None

        if console_enabled:
            self._setup_console_handler(console_level)

        if file_enabled:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file_path = os.path.join(log_dir, f"{log_name}.log")
            self._setup_file_handler(self.log_file_path, file_level, max_bytes, backup_count)

    def _setup_console_handler(self, level: int) -> None:
        """Sets up console handler with DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(config.LOG_CONSOLE_FORMAT))
        self._attach(console_handler)

    def _setup_file_handler(self, path: str, level: int, max_bytes: int, backup_count: int) -> None:
        """Sets up file handler with rotating file output."""
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
        )
        self._attach(file_handler)

    def _attach(self, handler: logging.Handler) -> None:
        self.logger.addHandler(handler)
        self.handlers.append(handler)

    def shutdown(self) -> None:
        """Detach and close the handlers this instance added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()
