"""Logging setup for recast.

Modules log through ``logging.getLogger(__name__)`` and attach request
context with ``extra=``; the fields in ``CONTEXT_FIELDS`` end up as keys in
production JSON lines.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from recast.config import get_settings

CONTEXT_FIELDS = ("feed_url", "delay_hours", "items_in", "items_out")

DEV_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Libraries whose per-request INFO lines repeat what recast already logs
QUIET_LOGGERS = ("httpx", "httpcore")


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging() -> None:
    """Send all logs to stdout: JSON in prod, one readable line per record in dev."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter() if settings.env == "prod" else logging.Formatter(DEV_FORMAT)
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
