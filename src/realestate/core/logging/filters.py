"""
Logging filters.

- `RequestIdFilter` guarantees every record carries a `request_id` attribute so
  `%(request_id)s` in format strings never raises. The id lives in a
  `ContextVar`, which follows the request across `await` boundaries.
- `RedactFilter` masks record attributes whose names are sensitive. Client and
  realtor contact data (phone, email) is personal data and is masked too when a
  caller passes it via `extra`.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

REDACTED = "***REDACTED***"


def set_request_id(request_id: str | None) -> contextvars.Token:
    """
    Set the request id for the current context.

    Returns the token to pass to `reset_request_id()` once the request is done.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Stamp `record.request_id`.

    Precedence: an explicit `extra={"request_id": ...}`, then the context var
    (set by RequestIDMiddleware), then the "-" sentinel. Never drops a record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "secret",
        "token",
        "authorization",
        "phone",
        "email",
    }

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
        return True
