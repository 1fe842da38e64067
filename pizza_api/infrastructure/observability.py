"""Structured Logging — JSON log lines carrying pizza/topping/sauce ids.

Invariants:
    - Every line has timestamp, level, logger and message
    - Entity ids and error metadata passed via extra= appear as top-level keys
    - setup_logging installs one handler; repeated calls are no-ops
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("pizza_id", "topping_id", "sauce_id", "error_code", "path")
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Attach a stream handler to the root logger (json or text)."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_pizza_api", False) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    handler._pizza_api = True
    root.addHandler(handler)
