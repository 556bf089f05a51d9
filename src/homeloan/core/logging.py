from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_EXTRA_KEYS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "event",
    "error_type",
    "error_message",
    "decision",
    "limiting_factor",
    "eligible_loan",
    "violation_count",
)
_CONFIGURED_ATTR = "_homeloan_json_logging_configured"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    if getattr(root_logger, _CONFIGURED_ATTR, False):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    setattr(root_logger, _CONFIGURED_ATTR, True)
