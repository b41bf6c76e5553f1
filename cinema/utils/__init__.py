"""Utility modules for the cinema catalog service."""

from cinema.utils.logging import LogContext, get_logger, setup_logging

__all__ = [
    "get_logger",
    "LogContext",
    "setup_logging",
]
