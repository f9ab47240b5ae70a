"""
Exception handler utility.

Central place where data-access failures become domain errors, where domain
errors get logged with their context, and where the end-user wording lives.

Services use `translate_errors(...)` as their boundary:

    async with translate_errors("UPDATE", "Realtor", realtor_id, "обновление риелтора"):
        ...

Domain errors raised inside pass through unchanged; everything else is
classified by `handle_database_exception` and re-raised as a domain error, so
nothing from SQLAlchemy or the driver escapes the service layer.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from .base import (
    GENERIC_USER_MESSAGE,
    BusinessRuleViolationError,
    DatabaseError,
    DataValidationError,
    EntityNotFoundError,
    RealEstateError,
)
from .data_access import DataAccessError, DbFailureKind, FieldCoercionError
from .integrity_classifier import ConstraintKind

logger = logging.getLogger(__name__)

GENERAL_FIELD = "general"


def _integrity_message(exc: DataAccessError) -> str:
    integrity = exc.integrity
    columns = ", ".join(integrity.columns) if integrity and integrity.columns else None
    kind = integrity.kind if integrity else ConstraintKind.UNKNOWN

    if kind is ConstraintKind.UNIQUE:
        return f"Нарушение уникальности: {columns or 'запись уже существует'}"
    if kind is ConstraintKind.FOREIGN_KEY:
        return "Связанная сущность не существует"
    if kind is ConstraintKind.NOT_NULL:
        return f"Не заполнено обязательное поле: {columns or 'неизвестно'}"
    if kind is ConstraintKind.CHECK:
        return "Значение нарушает ограничение базы данных"
    return "Нарушение целостности данных"


def handle_database_exception(
    exc: BaseException,
    operation_type: str,
    entity_type: str,
    entity_id: Any = None,
) -> RealEstateError:
    """
    Classify `exc` into a domain error. Never raises.

    - domain errors are returned unchanged
    - DataAccessError is translated by its failure kind
    - anything else becomes a generic DatabaseError
    """
    if isinstance(exc, RealEstateError):
        return exc

    if not isinstance(exc, DataAccessError):
        return DatabaseError(
            operation_type,
            f"Неизвестная ошибка базы данных: {exc}",
            kind=DbFailureKind.OTHER,
            details={"entity_type": entity_type, "entity_id": entity_id, "exception": type(exc).__name__},
        )

    details = {"entity_type": entity_type, "entity_id": entity_id, "reason": exc.reason}

    match exc.kind:
        case DbFailureKind.NOT_FOUND:
            return EntityNotFoundError(entity_type, entity_id)
        case DbFailureKind.INTEGRITY_VIOLATION:
            return DatabaseError(operation_type, _integrity_message(exc), kind=exc.kind, details=details)
        case DbFailureKind.SYNTAX_ERROR:
            return DatabaseError(operation_type, "Ошибка SQL синтаксиса", kind=exc.kind, details=details)
        case DbFailureKind.CONNECTION_ERROR:
            return DatabaseError(operation_type, "Ошибка соединения с базой данных", kind=exc.kind, details=details)
        case DbFailureKind.OTHER:
            return DatabaseError(operation_type, "Ошибка доступа к данным", kind=exc.kind, details=details)


def handle_validation_exception(exc: BaseException, entity_type: str) -> DataValidationError:
    """Turn coercion/argument errors into a DataValidationError."""
    if isinstance(exc, DataValidationError):
        return exc
    if isinstance(exc, FieldCoercionError):
        return DataValidationError(exc.field_errors)
    logger.info("validation.general_failure", extra={"entity": entity_type, "reason": str(exc)})
    return DataValidationError.for_field(GENERAL_FIELD, str(exc))


def related_entity_not_found(field: str, related_type: str, related_id: Any, entity_type: str) -> DataValidationError:
    message = f"Связанная сущность {related_type} с ID {related_id} не найдена для {entity_type}"
    logger.info(
        "validation.related_entity_missing",
        extra={"entity": entity_type, "related_entity": related_type, "related_id": related_id},
    )
    return DataValidationError({field: message})


def uniqueness_violation(field: str, value: Any, entity_type: str) -> DataValidationError:
    # the value itself is personal data; keep it out of logs
    logger.info("validation.uniqueness_violation", extra={"entity": entity_type, "field": field})
    return DataValidationError({field: f"{entity_type} с таким значением поля {field} уже существует"})


def is_critical(exc: BaseException) -> bool:
    """Database failures need operator attention; everything else is client-driven."""
    return isinstance(exc, DatabaseError)


def log_exception(exc: BaseException, context: str, **extra: Any) -> None:
    """
    Log `exc` once, at a level that matches who has to act on it.

    Not-found, validation and business-rule errors are expected client outcomes
    (INFO / WARNING); database errors are logged at ERROR with the traceback.
    """
    if isinstance(exc, RealEstateError):
        fields = {"error_code": exc.error_code, "context": context, **extra}
        if is_critical(exc):
            logger.error("%s: %s", context, exc.detailed_message(), extra=fields, exc_info=exc)
        elif isinstance(exc, BusinessRuleViolationError):
            logger.warning("%s: %s", context, exc.detailed_message(), extra={**fields, "rule": exc.rule_name})
        else:
            logger.info("%s: %s", context, exc.detailed_message(), extra=fields)
    else:
        logger.error("%s: %s", context, exc, extra={"context": context, **extra}, exc_info=exc)


def get_user_friendly_message(exc: BaseException) -> str:
    if isinstance(exc, RealEstateError):
        return exc.user_friendly_message()
    return GENERIC_USER_MESSAGE


@asynccontextmanager
async def translate_errors(
    operation_type: str,
    entity_type: str,
    entity_id: Any = None,
    description: str | None = None,
) -> AsyncIterator[None]:
    """Service-layer error boundary (see module docstring)."""
    context = description or f"{operation_type} {entity_type}"
    try:
        yield
    except RealEstateError as exc:
        log_exception(exc, context, entity=entity_type, operation=operation_type, id=entity_id)
        raise
    except (FieldCoercionError, ValueError) as exc:
        domain = handle_validation_exception(exc, entity_type)
        log_exception(domain, context, entity=entity_type, operation=operation_type, id=entity_id)
        raise domain from exc
    except Exception as exc:
        domain = handle_database_exception(exc, operation_type, entity_type, entity_id)
        log_exception(domain, context, entity=entity_type, operation=operation_type, id=entity_id)
        raise domain from exc


__all__ = [
    "handle_database_exception",
    "handle_validation_exception",
    "related_entity_not_found",
    "uniqueness_violation",
    "is_critical",
    "log_exception",
    "get_user_friendly_message",
    "translate_errors",
]
