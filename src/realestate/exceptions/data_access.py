"""
Data-access boundary.

Repositories run every statement inside `data_access(...)`. Whatever the driver
or SQLAlchemy raises is caught there, the session is rolled back, and a single
`DataAccessError` comes out, tagged with a `DbFailureKind`. Upper layers
dispatch on that tag and never need to know about SQLAlchemy exception types.
"""

import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncIterator

from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    NoResultFound,
    OperationalError,
    ProgrammingError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from .integrity_classifier import IntegrityViolation, classify_integrity_error

logger = logging.getLogger(__name__)


class DbFailureKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INTEGRITY_VIOLATION = "INTEGRITY_VIOLATION"
    SYNTAX_ERROR = "SYNTAX_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    OTHER = "OTHER"


# first match wins; order matters only where classes overlap
_KIND_BY_EXCEPTION: tuple[tuple[type[BaseException] | tuple[type[BaseException], ...], DbFailureKind], ...] = (
    (NoResultFound, DbFailureKind.NOT_FOUND),
    (IntegrityError, DbFailureKind.INTEGRITY_VIOLATION),
    (ProgrammingError, DbFailureKind.SYNTAX_ERROR),
    ((OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError, OSError), DbFailureKind.CONNECTION_ERROR),
)


class DataAccessError(Exception):
    """
    A classified data-access failure.

    Attributes:
        kind: DbFailureKind tag
        operation: SELECT / INSERT / UPDATE / DELETE
        entity: model name the statement targeted
        entity_id: primary key involved, when known
        integrity: constraint details for INTEGRITY_VIOLATION
    """

    def __init__(
        self,
        kind: DbFailureKind,
        *,
        operation: str,
        entity: str,
        entity_id: Any = None,
        integrity: IntegrityViolation | None = None,
        reason: str | None = None,
    ):
        self.kind = kind
        self.operation = operation
        self.entity = entity
        self.entity_id = entity_id
        self.integrity = integrity
        self.reason = reason
        super().__init__(f"{operation} {entity}: {kind.value}" + (f" ({reason})" if reason else ""))


class FieldCoercionError(ValueError):
    """
    One or more partial-update values could not be converted to their column type.

    `field_errors` maps the logical field name to the reason.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.field_errors.items()))


def classify_db_failure(exc: BaseException) -> tuple[DbFailureKind, IntegrityViolation | None]:
    for exc_types, kind in _KIND_BY_EXCEPTION:
        if isinstance(exc, exc_types):
            if kind is DbFailureKind.INTEGRITY_VIOLATION:
                return kind, classify_integrity_error(exc)
            return kind, None
    return DbFailureKind.OTHER, None


def _describe(integrity: IntegrityViolation | None) -> str | None:
    if integrity is None:
        return None
    parts = [integrity.kind.value]
    if integrity.columns:
        parts.append("columns=" + ",".join(integrity.columns))
    if integrity.constraint:
        parts.append(f"constraint={integrity.constraint}")
    return " ".join(parts)


@asynccontextmanager
async def data_access(
    db: AsyncSession,
    entity: str,
    operation: str,
    entity_id: Any = None,
) -> AsyncIterator[None]:
    """
    Usage:
        async with data_access(self.db, "Realtor", "UPDATE", realtor_id):
            await self.db.execute(stmt)

    Already classified errors and coercion errors pass through untouched.
    """
    try:
        yield
    except (DataAccessError, FieldCoercionError):
        raise
    except Exception as exc:
        kind, integrity = classify_db_failure(exc)

        if kind is not DbFailureKind.NOT_FOUND:
            try:
                await db.rollback()
            except Exception:
                logger.exception(
                    "repo.rollback_failed",
                    extra={"model": entity, "operation": operation},
                )

        log_extra = {
            "model": entity,
            "operation": operation,
            "id": entity_id,
            "kind": kind.value,
        }
        if kind in (DbFailureKind.NOT_FOUND, DbFailureKind.INTEGRITY_VIOLATION):
            # expected, client-driven outcomes
            logger.info("repo.failure", extra={**log_extra, "integrity": _describe(integrity)})
        else:
            logger.error("repo.failure", extra=log_extra, exc_info=exc)

        raise DataAccessError(
            kind,
            operation=operation,
            entity=entity,
            entity_id=entity_id,
            integrity=integrity,
            reason=_describe(integrity),
        ) from exc
