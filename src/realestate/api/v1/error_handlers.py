"""
FastAPI exception handlers that turn domain errors into HTTP responses.

Status codes and payloads come from the exception classes themselves
(`http_status()` / `to_payload()`); the handlers only log and render.
Services have already logged the error with its full context, so the
handlers log one short line per failed request.

Register them from the app factory:

    register_exception_handlers(app)
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from realestate.exceptions import DataValidationError, RealEstateError
from realestate.exceptions.handler import GENERAL_FIELD, get_user_friendly_message, is_critical

logger = logging.getLogger(__name__)

# FastAPI prefixes each location with where the value came from
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


async def real_estate_error_handler(request: Request, exc: RealEstateError) -> JSONResponse:
    log = logger.error if is_critical(exc) else logger.info
    log(
        "http.domain_error",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_code": exc.error_code,
            "status_code": exc.http_status(),
        },
    )
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        parts = [str(p) for p in error.get("loc", ()) if p not in _LOCATION_PREFIXES]
        field = ".".join(parts) or GENERAL_FIELD
        errors.setdefault(field, error.get("msg", "invalid"))
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    400 Bad Request for malformed bodies and parameters, in the same shape as
    service-level validation errors.
    """
    domain = DataValidationError(_field_errors(exc))
    logger.info(
        "http.request_invalid",
        extra={"method": request.method, "path": request.url.path, "fields": sorted(domain.field_errors)},
    )
    return JSONResponse(status_code=domain.http_status(), content=domain.to_payload())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: 500 without internals."""
    logger.error(
        "http.unhandled_error",
        extra={"method": request.method, "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"status": 500, "code": "INTERNAL_ERROR", "message": get_user_friendly_message(exc)},
    )


def register_exception_handlers(app):
    app.add_exception_handler(RealEstateError, real_estate_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
