"""Module: logger_factory.py

Date: 2026-10-19

Cached logger factory.
Keeps one logger instance per module name. Loggers carry no handlers of
their own and propagate to the root logger, which ConfigureLogger sets up.
"""

import logging

from choicekit import config


class DevOnlyFilter(logging.Filter):
    """Hides records logged with extra={"dev_only": True} from a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        if config.SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


class LoggerFactory:
    """Logger factory with caching.

    Maintains a single logger instance per module name so that repeated
    lookups from hot paths (every selection mutation logs) stay cheap.
    """

    _loggers: dict[str, logging.Logger] = {}
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        name = name or "choicekit"
        logger = cls._loggers.get(name)
        if logger is None:
            logger = logging.getLogger(name)
            logger.propagate = True
            if cls._global_level is not None:
                logger.setLevel(cls._global_level)
            cls._loggers[name] = logger
        return logger

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers and those created later."""
        cls._global_level = level
        for logger in cls._loggers.values():
            logger.setLevel(level)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all cached loggers and the global level."""
        cls._loggers.clear()
        cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting cached logger.

    Args:
        name: Logger name

    Returns:
        logging.Logger: Cached logger instance

    """
    return LoggerFactory.get_logger(name)
