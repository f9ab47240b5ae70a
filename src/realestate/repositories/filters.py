"""
Search/filter builder.

Every helper takes a column and an optional criterion and returns either a
SQL predicate or None when the criterion is absent. `apply_filters` ANDs the
present predicates into one WHERE clause and adds no WHERE at all when every
criterion is absent:

    stmt = apply_filters(
        select(Realtor),
        contains(Realtor.last_name, last_name),
        equals(Realtor.email, email),
        at_least(Realtor.experience_years, min_experience),
    )
"""

from typing import Any

from sqlalchemy import Select, and_
from sqlalchemy.sql.elements import ColumnElement

from realestate.validators.text import is_blank

Clause = ColumnElement[bool] | None


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains(column, value: str | None) -> Clause:
    """Case-insensitive partial match; blank criteria are absent."""
    if is_blank(value):
        return None
    return column.ilike(f"%{_escape_like(value.strip())}%", escape="\\")


def equals(column, value: Any) -> Clause:
    """Exact match (identifiers, codes, email, phone); None and blank are absent."""
    if is_blank(value):
        return None
    if isinstance(value, str):
        value = value.strip()
    return column == value


def at_least(column, value: Any) -> Clause:
    """Inclusive lower bound."""
    if value is None:
        return None
    return column >= value


def at_most(column, value: Any) -> Clause:
    """Inclusive upper bound."""
    if value is None:
        return None
    return column <= value


def below(column, value: Any) -> Clause:
    """Exclusive upper bound."""
    if value is None:
        return None
    return column < value


def apply_filters(stmt: Select, *clauses: Clause) -> Select:
    present = [clause for clause in clauses if clause is not None]
    if present:
        stmt = stmt.where(and_(*present))
    return stmt


__all__ = ["contains", "equals", "at_least", "at_most", "below", "apply_filters"]
