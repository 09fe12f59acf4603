"""Diagnostics for the media query engine.

Formatters that render the structured fields the engine attaches to its
records, and opt-in routing of the "mediaquery" logger.
"""

from mediaquery.logging.config import PACKAGE_LOGGER, configure_logging, reset_logging
from mediaquery.logging.handlers import (
    QUERY_FIELDS,
    JSONFormatter,
    TextFormatter,
    query_fields,
)

__all__ = [
    "PACKAGE_LOGGER",
    "QUERY_FIELDS",
    "JSONFormatter",
    "TextFormatter",
    "configure_logging",
    "query_fields",
    "reset_logging",
]
