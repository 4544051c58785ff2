#!/usr/bin/env python3
"""Structured logging system for gitignore-checker.

Messages carry key=value context, either passed per call or pushed for a
block with add_context(). Context is thread-local.

The global logger is built on first use from ConfigManager settings, so
GITIGNORE_CHECKER_LOGGING_LEVEL=DEBUG is enough to trace every match.

Example:
    >>> logger = Logger(level=LogLevel.DEBUG)
    >>> with logger.add_context(rule="build/", path="/build/"):
    ...     logger.debug("Rule matches path")
"""

import logging
import logging.handlers
import threading
from contextlib import contextmanager
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from gitignore_checker.core.constants import LOGGER_NAME, ErrorCode
from gitignore_checker.infrastructure.config_manager import ConfigError, ConfigManager

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""

    DEBUG = logging.DEBUG  # 10
    INFO = logging.INFO  # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR  # 40
    CRITICAL = logging.CRITICAL  # 50


def parse_level(level: Union[LogLevel, str, int]) -> LogLevel:
    """Convert a level name or number into a LogLevel.

    Raises:
        ConfigError: If the level is unknown
    """
    if isinstance(level, LogLevel):
        return level
    try:
        if isinstance(level, str):
            return LogLevel[level.upper()]
        return LogLevel(level)
    except (KeyError, ValueError):
        raise ConfigError(f"Unknown log level: {level!r}", ErrorCode.INVALID_INPUT) from None


class Logger:
    """Structured logger with thread-local context."""

    _context_stack = threading.local()

    def __init__(
        self,
        name: str = LOGGER_NAME,
        level: Union[LogLevel, str] = LogLevel.INFO,
        handlers: Optional[List[logging.Handler]] = None,
    ):
        """Initialize logger.

        Args:
            name: Name of the underlying stdlib logger
            level: Minimum log level to output
            handlers: Handlers replacing any already attached; console if omitted
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.set_level(level)

        self.logger.handlers.clear()
        for handler in handlers if handlers is not None else [self._create_console_handler()]:
            self.add_handler(handler)

        self.logger.propagate = False

    def _create_console_handler(self) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def create_file_handler(
        self,
        filename: Union[str, Path],
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
    ) -> logging.handlers.RotatingFileHandler:
        """Create rotating file handler.

        Args:
            filename: Path to log file
            max_bytes: Maximum size before rotation
            backup_count: Number of backup files to keep
        """
        handler = logging.handlers.RotatingFileHandler(
            filename, maxBytes=max_bytes, backupCount=backup_count
        )
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def add_handler(self, handler: logging.Handler) -> None:
        self.logger.addHandler(handler)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        self.logger.setLevel(parse_level(level))

    def _get_context(self) -> Dict[str, Any]:
        """Merge every context level pushed by the current thread."""
        context: Dict[str, Any] = {}
        for ctx in getattr(self._context_stack, "stack", []):
            context.update(ctx)
        return context

    @contextmanager
    def add_context(self, **kwargs):
        """Attach key=value pairs to every message logged inside the block."""
        if not hasattr(self._context_stack, "stack"):
            self._context_stack.stack = []

        self._context_stack.stack.append(kwargs)
        try:
            yield
        finally:
            self._context_stack.stack.pop()

    def _log(self, level: LogLevel, msg: str, context: Dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return

        combined = self._get_context()
        combined.update(context)
        if combined:
            msg = f"{msg} | " + " ".join(f"{k}={v}" for k, v in combined.items())
        self.logger.log(level, msg, extra={"context": combined})

    def debug(self, msg: str, **context) -> None:
        self._log(LogLevel.DEBUG, msg, context)

    def warning(self, msg: str, **context) -> None:
        self._log(LogLevel.WARNING, msg, context)


_global_logger: Optional[Logger] = None
_global_lock = threading.Lock()


def _build_logger(config: ConfigManager) -> Logger:
    logger = Logger(name=LOGGER_NAME, level=config.get("logging.level", "INFO"))
    log_file = config.get("logging.file")
    if log_file:
        logger.add_handler(logger.create_file_handler(log_file))
    return logger


def get_logger() -> Logger:
    """Return the global logger, building it from configuration on first use."""
    global _global_logger
    with _global_lock:
        if _global_logger is None:
            _global_logger = _build_logger(ConfigManager())
        return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install logger as the global logger."""
    global _global_logger
    with _global_lock:
        _global_logger = logger


def configure_logging(config: Optional[ConfigManager] = None) -> Logger:
    """Rebuild the global logger from configuration.

    Args:
        config: Settings to use; resolved from file and environment if omitted

    Returns:
        The newly installed global logger

    Raises:
        ConfigError: If the configured level is unknown or the file is invalid
    """
    logger = _build_logger(config if config is not None else ConfigManager())
    set_global_logger(logger)
    return logger
