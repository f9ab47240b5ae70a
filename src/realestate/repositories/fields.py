"""
Declarative field registry for partial updates.

Each repository declares which logical (wire) field names it accepts and, for
each, the mapped column it writes and the function that converts the wire value
into the column's Python type:

    update_fields = FieldRegistry({
        "firstName": FieldSpec(Realtor.first_name, required_text),
        "experienceYears": FieldSpec(Realtor.experience_years, int_in_range(0, 100)),
    })

`FieldRegistry.prepare(updates)` walks the registry once and keeps only the
keys present in `updates`. Unknown keys are ignored. Conversion failures are
collected and raised together as one `FieldCoercionError`.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterator, Mapping

from sqlalchemy.orm import InstrumentedAttribute

from realestate.exceptions.data_access import FieldCoercionError
from realestate.validators.text import blank_to_none

Coercer = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldSpec:
    column: InstrumentedAttribute
    coerce: Coercer


class FieldRegistry:

    def __init__(self, specs: Mapping[str, FieldSpec]):
        self._specs = dict(specs)

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def column_for(self, name: str) -> InstrumentedAttribute:
        return self._specs[name].column

    def coerce(self, updates: Mapping[str, Any] | None) -> tuple[dict[str, Any], dict[str, str]]:
        """
        Convert every recognized key in `updates`.

        Returns `(values, errors)`, both keyed by logical field name, so a caller
        can run further checks on the values that did convert and report every
        problem in one go.
        """
        values: dict[str, Any] = {}
        errors: dict[str, str] = {}
        if not updates:
            return values, errors

        for name, spec in self._specs.items():
            if name not in updates:
                continue
            try:
                values[name] = spec.coerce(updates[name])
            except (TypeError, ValueError, ArithmeticError) as exc:
                errors[name] = str(exc)
        return values, errors

    def to_columns(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Re-key logical field names to ORM attribute keys."""
        return {self._specs[name].column.key: value for name, value in values.items() if name in self._specs}

    def prepare(self, updates: Mapping[str, Any] | None) -> dict[str, Any]:
        """
        Return `{orm_attribute_key: coerced_value}` for every recognized key in
        `updates`. An empty result means there is nothing to update.
        """
        values, errors = self.coerce(updates)
        if errors:
            raise FieldCoercionError(errors)
        return self.to_columns(values)


# ---------------------------------------------------------------- coercers
# Each takes the raw wire value and returns the column value or raises ValueError
# with a reason suitable for a field error.

def optional_text(value: Any) -> str | None:
    value = blank_to_none(value)
    return None if value is None else str(value)


def required_text(value: Any) -> str:
    value = optional_text(value)
    if value is None:
        raise ValueError("Поле обязательно для заполнения")
    return value


def integer(value: Any) -> int:
    value = blank_to_none(value)
    if value is None:
        raise ValueError("Поле обязательно для заполнения")
    if isinstance(value, bool):
        raise ValueError("Ожидается целое число")
    if isinstance(value, int):
        return value
    try:
        return int(str(value))
    except ValueError:
        raise ValueError("Ожидается целое число") from None


def int_in_range(low: int, high: int) -> Coercer:
    def coerce(value: Any) -> int:
        number = integer(value)
        if not low <= number <= high:
            raise ValueError(f"Значение должно быть от {low} до {high}")
        return number
    return coerce


def decimal(value: Any) -> Decimal:
    value = blank_to_none(value)
    if value is None:
        raise ValueError("Поле обязательно для заполнения")
    if isinstance(value, bool):
        raise ValueError("Ожидается число")
    try:
        number = Decimal(str(value).replace(" ", "").replace(",", "."))
    except InvalidOperation:
        raise ValueError("Ожидается число") from None
    if not number.is_finite():
        raise ValueError("Ожидается число")
    return number


def positive_decimal(value: Any) -> Decimal:
    number = decimal(value)
    if number <= 0:
        raise ValueError("Значение должно быть больше нуля")
    return number


def iso_date(value: Any) -> date:
    value = blank_to_none(value)
    if value is None:
        raise ValueError("Поле обязательно для заполнения")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValueError("Ожидается дата в формате ГГГГ-ММ-ДД") from None


__all__ = [
    "FieldSpec",
    "FieldRegistry",
    "optional_text",
    "required_text",
    "integer",
    "int_in_range",
    "decimal",
    "positive_decimal",
    "iso_date",
]
