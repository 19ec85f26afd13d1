from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging on stdout."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Fields passed through logger.info(..., extra={"seller_id": ...})
        for key in ("seller_id", "design_id", "section_id", "action"):
            value = getattr(record, key, None)
            if value is not None:
                log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def setup_logging(*, environment: str = "dev") -> None:
    """Configure logging for the application.

    Args:
        environment: Environment name (dev, test, prod)
    """
    log_level = logging.DEBUG if environment == "dev" else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger()
    # Re-running create_app (tests) must not stack handlers
    root.handlers = [h for h in root.handlers if not isinstance(h.formatter, StructuredFormatter)]
    root.addHandler(handler)
    root.setLevel(log_level)

    # Set levels for noisy libraries
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


__all__ = ["setup_logging", "StructuredFormatter"]
