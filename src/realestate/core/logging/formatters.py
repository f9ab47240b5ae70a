"""
Log formatters.

`JsonFormatter` is the production format: one JSON object per line with the
observability fields (service, env, version, request_id) plus every `extra`
key the caller attached, e.g.

    logger.info("service.deal.created", extra={"entity": "Deal", "id": 42})

`ColorFormatter` is meant for local terminals (`LOG_FORMAT=text`).
"""

import json
import logging
from typing import Any
from logging import LogRecord

from realestate.utils.project_metadata import get_project_version

# LogRecord attributes that are either emitted under another key or are noise.
_RESERVED = {
    "args", "msg", "levelname", "levelno", "name", "created", "msecs",
    "relativeCreated", "exc_text", "thread", "threadName", "processName",
    "process", "taskName", "filename", "module", "funcName",
}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Non-serializable extras are stringified so formatting never raises.
    """

    def __init__(self, *, env: str | None = None, service: str = "realestate-backoffice", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service
        self.version = get_project_version()

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": self.version,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for key, value in record.__dict__.items():
            if key in log_record or key in _RESERVED or key.startswith("_"):
                continue
            if key in ("exc_info", "stack_info"):
                continue
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, ValueError):
                log_record[key] = str(value)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Human-readable, colorized formatter for development consoles.

    Layout: TIMESTAMP | LEVEL | LOGGER | REQUEST_ID | MESSAGE [key=value ...]
    Only the level name is colored.
    """

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;41m",
        "RESET": "\033[0m",
    }

    # structured extras worth showing inline in a terminal
    INLINE_EXTRAS = ("entity", "operation", "id", "rule", "kind", "status_code", "duration_ms")

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        reset = self.COLOR_CODES["RESET"]
        timestamp = self.formatTime(record, self.datefmt)

        base = (
            f"{timestamp} | {color}{record.levelname:<10}{reset} | "
            f"{record.name:<30} | "
            f"{getattr(record, 'request_id', '-'):<10} | "
            f"{record.getMessage()}"
        )

        inline = [
            f"{key}={getattr(record, key)}"
            for key in self.INLINE_EXTRAS
            if getattr(record, key, None) is not None
        ]
        if inline:
            base = f"{base} [{' '.join(inline)}]"

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base
