"""Structured logging for storage operations."""
import logging
from typing import Any

import structlog

from shardstore.core.exceptions import StorageConfigError

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def normalize_level(level: str) -> str:
    """Map a user-supplied verbosity to one of debug/info/warn/error."""
    if not isinstance(level, str) or level.lower() not in LOG_LEVELS:
        raise StorageConfigError(
            f"Invalid log level: {level!r}",
            details={"allowed": ["debug", "info", "warn", "error"]},
        )
    normalized = level.lower()
    return "warn" if normalized == "warning" else normalized


def create_logger(level: str = "info", component: str = "storage") -> Any:
    """Create a level-filtered logger for a storage adapter.

    Each line carries a timestamp, the level, the component name and
    any key/value context passed by the caller.

    Args:
        level: One of debug, info, warn, error
        component: Name bound to every event

    Returns:
        structlog bound logger
    """
    min_level = LOG_LEVELS[normalize_level(level)]

    return structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        component=component,
    )
