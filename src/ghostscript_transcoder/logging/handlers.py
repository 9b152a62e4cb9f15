"""JSON log formatting for machine-readable transcoder logs."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else came in through extra=.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the extra= fields attached to a log record.

    The transcoder attaches ``operation``, ``destination`` and
    ``exit_code`` to the records of each request.
    """
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Keys are ``timestamp`` (UTC, ISO-8601, taken from the record),
    ``level`` and ``message``. ``logger`` is added for named loggers,
    ``context`` when the record has extra fields, and ``exception`` or
    ``stack`` when the record carries them. Values that are not JSON
    types, such as paths, are written with str().
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name not in ("", "root"):
            entry["logger"] = record.name

        context = record_context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)
