"""
Centralized logging configuration for the housing core.

Format: 2026-01-06T14:05:52Z [source] LEVEL message

The level comes from HousingSettings.log_level (HOUSING_LOG_LEVEL or
LOG_LEVEL): TRACE, DEBUG, INFO (default), WARNING, or ERROR.

Usage:
    from housing.logging_config import configure_logging, get_logger

    configure_logging(source="housing")
    logger = get_logger(__name__)
    logger.info("Inventory loaded")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime

from housing.settings import get_settings

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 UTC timestamps.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "housing"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def resolve_level(level_name: str) -> int:
    """Map a configured level name to a logging level number."""
    name = level_name.upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    source: str = "housing",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure the root logger for a housing process.

    Args:
        source: Source identifier shown in brackets
        level: Explicit logging level (defaults to the configured log_level)
        debug: Force DEBUG regardless of configuration

    Returns:
        Configured root logger
    """
    if debug:
        level = logging.DEBUG
    elif level is None:
        level = resolve_level(get_settings().log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers so repeated calls don't double-log
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
