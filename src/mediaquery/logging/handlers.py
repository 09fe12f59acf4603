"""Formatters for media query diagnostics.

The parser, evaluator and listener registry attach structured fields to
their log records through ``extra=``:

- condition: the query text being parsed or listened to
- feature, operator, value: the feature that did not match
- reason: why a parse or evaluation produced no match
  (unbalanced_parens, syntax, max_depth, range_query, unknown_feature,
  invalid_length, invalid_resolution, unsupported_operator)
- matches: the listener state reported with the record

Both formatters render whichever of these fields a record carries.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

QUERY_FIELDS: tuple[str, ...] = (
    "condition",
    "feature",
    "operator",
    "value",
    "reason",
    "matches",
)


def query_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the media query fields present on a record, in display order."""
    return {
        name: getattr(record, name) for name in QUERY_FIELDS if hasattr(record, name)
    }


class TextFormatter(logging.Formatter):
    """Plain text lines with query fields appended as key=value pairs.

    Example:
        2024-05-01T10:00:00+0000 - mediaquery.evaluator - DEBUG -
        Unknown media feature: hover [feature='hover' operator=':'
        value='none' reason='unknown_feature']
    """

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        fields = query_fields(record)
        if not fields:
            return message
        pairs = " ".join(f"{name}={value!r}" for name, value in fields.items())
        return f"{message} [{pairs}]"


class JSONFormatter(logging.Formatter):
    """Format media query log records as JSON objects.

    Each entry has timestamp (ISO-8601 UTC), level, logger and message,
    followed by the query fields present on the record and the formatted
    traceback under "exception" when there is one.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": record_time.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(query_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
