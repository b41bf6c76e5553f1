"""Logging setup for the cinema catalog service."""

import logging
import sys
from typing import Literal

from cinema.config import get_settings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Libraries that are chatty at DEBUG
_QUIET_LOGGERS = ("uvicorn.access", "aiosqlite", "asyncpg", "multipart")


def setup_logging(level: LogLevel | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Override log level (default: settings.log_level, else INFO for
            production and DEBUG otherwise)
    """
    settings = get_settings()
    level = level or settings.log_level or ("INFO" if settings.is_production else "DEBUG")

    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # Engine echo is controlled by SQL_ECHO
    if not settings.sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogContext:
    """Logger wrapper that prefixes each message with ``[key=value]`` tags.

    Used by write operations so every line names the operation and acting user:

        log = LogContext(logger, op="update_movie", user=7)
        log.info("Updated")  # [op=update_movie] [user=7] Updated
    """

    def __init__(self, logger: logging.Logger, **context: object) -> None:
        self.logger = logger
        self.context = context
        self.prefix = " ".join(f"[{key}={value}]" for key, value in context.items())

    def bind(self, **extra: object) -> "LogContext":
        """Return a new context with more tags appended."""
        return LogContext(self.logger, **{**self.context, **extra})

    def _log(self, level: int, msg: str, *args, **kwargs) -> None:
        self.logger.log(level, f"{self.prefix} {msg}", *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)
