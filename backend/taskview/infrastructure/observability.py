"""Structured Logging — one line per validation pass and per rejected API request.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Validation passes log `slot` (model name) and `issue_count`;
      the API error responder adds `error_code` and the request `path`
    - setup_logging is idempotent: a second call replaces the handler it installed

Design Decisions:
    - JSON lines in deployment (log_format="json"), plain text locally ("text")
    - Accepted documents log at DEBUG, rejected ones at INFO, so the default
      level shows rejections without echoing every viewer refresh
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("slot", "issue_count", "error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_HANDLER_NAME = "taskview"


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object, extras included when present."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the taskview handler on the root logger and return it."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
