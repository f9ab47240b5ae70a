"""
Integrity error classification.

Turns a SQLAlchemy `IntegrityError` into an `IntegrityViolation`: which kind of
constraint failed, its name when the driver reports one, and the columns
involved when they can be recovered from the message. Postgres diagnostics
(SQLSTATE + constraint name) are preferred; other drivers fall back to message
matching.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ConstraintKind(str, Enum):
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNKNOWN = "unknown"


# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"


PGCODE_CONSTRAINT_MAP = {
    PostgresErrorCodes.UNIQUE_VIOLATION.value: ConstraintKind.UNIQUE,
    PostgresErrorCodes.NOT_NULL_VIOLATION.value: ConstraintKind.NOT_NULL,
    PostgresErrorCodes.FOREIGN_KEY_VIOLATION.value: ConstraintKind.FOREIGN_KEY,
    PostgresErrorCodes.CHECK_VIOLATION.value: ConstraintKind.CHECK,
}


@dataclass(frozen=True)
class IntegrityViolation:
    kind: ConstraintKind
    constraint: str | None = None
    columns: list[str] = field(default_factory=list)


def _match_any(msg: str, keywords: list[str]) -> bool:
    return any(keyword in msg for keyword in keywords)


def _pgcode_of(orig) -> str | None:
    # psycopg exposes `pgcode`; asyncpg (wrapped by SQLAlchemy's adapter) `sqlstate`
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _classify_from_postgres_diag(orig) -> tuple[ConstraintKind | None, str | None]:
    pgcode = _pgcode_of(orig)
    if not pgcode:
        return None, None

    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None) if diag else None
    constraint_name = constraint_name or getattr(orig, "constraint_name", None)

    kind = PGCODE_CONSTRAINT_MAP.get(pgcode)
    if kind is not None:
        logger.debug("integrity.postgres_diag", extra={"pgcode": pgcode, "constraint": constraint_name})
        return kind, constraint_name

    logger.warning("integrity.unknown_pgcode", extra={"pgcode": pgcode, "constraint": constraint_name})
    return ConstraintKind.UNKNOWN, constraint_name


def _classify_from_generic_message(msg: str) -> ConstraintKind:
    """Fallback for SQLite and drivers without SQLSTATE diagnostics."""
    normalized = msg.lower()

    if _match_any(normalized, ["unique constraint", "unique failed", "unique violation", "duplicate"]):
        return ConstraintKind.UNIQUE
    if _match_any(normalized, ["not null constraint", "not null", "null value in column"]):
        return ConstraintKind.NOT_NULL
    if _match_any(normalized, ["foreign key constraint", "foreign key", "is not present in table"]):
        return ConstraintKind.FOREIGN_KEY
    if _match_any(normalized, ["check constraint", "check failed"]):
        return ConstraintKind.CHECK

    logger.warning("integrity.unknown_message", extra={"message_snippet": (msg or "")[:200]})
    return ConstraintKind.UNKNOWN


def extract_columns(msg: str) -> list[str]:
    """
    Best-effort column extraction from driver messages.

    Postgres: 'null value in column "email"', 'Key (email)=(a@b.c) already exists'
    SQLite:   'UNIQUE constraint failed: realtors.email'
    """
    if not msg:
        return []

    m = re.search(r'null value in column "(?P<col>[^"]+)"', msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]

    m = re.search(r'key \((?P<cols>[^)]+)\)=', msg, flags=re.IGNORECASE)
    if m:
        return [c.strip().strip('"') for c in m.group("cols").split(",")]

    m = re.search(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>.+)$', msg, flags=re.IGNORECASE | re.MULTILINE)
    if m:
        return [c.split(".")[-1].strip() for c in re.split(r",\s*", m.group("cols"))]

    return []


def classify_integrity_error(exc: IntegrityError) -> IntegrityViolation:
    orig = exc.orig
    raw = str(orig) if orig is not None else str(exc)

    kind, constraint_name = _classify_from_postgres_diag(orig)
    if kind is None:
        kind = _classify_from_generic_message(raw)

    return IntegrityViolation(kind=kind, constraint=constraint_name, columns=extract_columns(raw))
