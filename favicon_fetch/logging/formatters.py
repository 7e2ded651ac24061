"""
JSON log records for favicon_fetch.

Retrieval log calls pass the favicon they concern through ``extra``
(``hostname``, ``key``, ``url``, ``status``); the structured formatter lifts
those into top-level fields so records can be filtered per site.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

# Context fields set by the cache, fetcher and manager log calls
CONTEXT_FIELDS = ("hostname", "key", "url", "status")


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with favicon context fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)
