"""Routing of media query diagnostics.

The engine only logs through module loggers under the "mediaquery"
namespace. configure_logging() lets a host send those records to a
rotating file and/or stderr without touching the root logger or any
handler the host installed itself.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from mediaquery.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from mediaquery.config.models import LoggingConfig

PACKAGE_LOGGER = "mediaquery"

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach handlers for LoggingConfig to the "mediaquery" logger.

    Handlers from an earlier call are closed and replaced. Records stop
    propagating to the root logger so they are not written twice.

    Args:
        config: Logging configuration.

    Returns:
        The configured package logger.
    """
    level = _LEVEL_MAP.get(config.level.casefold(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_handlers(package_logger)
    package_logger.setLevel(level)
    package_logger.propagate = False

    if config.format.casefold() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = TextFormatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    file_handler_added = False
    if config.file:
        try:
            file_path = Path(config.file).expanduser()
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                file_path,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            file_handler_added = True
        except OSError as e:
            sys.stderr.write(
                f"Warning: Could not open media query log file {config.file}: {e}\n"
            )

    if config.include_stderr or not file_handler_added:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        package_logger.addHandler(stderr_handler)

    return package_logger


def reset_logging() -> None:
    """Undo configure_logging(): drop its handlers and propagate again."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def _remove_handlers(package_logger: logging.Logger) -> None:
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
