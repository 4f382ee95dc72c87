"""
Logging setup, called once at application startup.

All modules then use:
    import logging
    logger = logging.getLogger(__name__)

Two formats, picked by LOG_FORMAT:
- "text": human-readable with timestamps and logger names
- "json": one JSON object per line for log aggregation
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from core import settings


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_initialized = False


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure the root logger. Safe to call more than once.
    """
    global _initialized
    if _initialized:
        return None
    _initialized = True

    level = level or settings.log_level()
    fmt = fmt or settings.log_format()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("logging_configured level=%s format=%s", level, fmt)
