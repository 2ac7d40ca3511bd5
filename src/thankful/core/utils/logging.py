"""
Logging configuration using loguru.

The library itself only ever calls ``loguru.logger``; sinks are wired up
once by the front end, either explicitly with :func:`setup_logging` or from
the ``logging`` section of the config with :func:`setup_logging_from_config`.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

from thankful.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from thankful.core.config import Config

_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Route loguru output to stderr and, optionally, a rotating log file.

    Args:
        level: Minimum log level, case-insensitive (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the console sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.

    Raises:
        ConfigurationError: If ``level`` isn't a loguru level name.
    """
    level = level.strip().upper()
    if level not in _LEVELS:
        raise ConfigurationError(f"Unknown log level {level!r}; expected one of {', '.join(_LEVELS)}")

    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        log_file = os.path.expanduser(log_file)
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}",
            rotation=rotation,
            retention=retention,
        )


def setup_logging_from_config(config: Config, verbose: bool = False) -> None:
    """Apply ``logging.level`` and ``logging.file`` from config.

    A relative ``logging.file`` lands in ``paths.log_dir``.

    ``verbose`` forces DEBUG regardless of the configured level.
    """
    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING"))
    setup_logging(level=level, log_file=config.get_log_file())
