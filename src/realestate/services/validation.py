"""
Entity validation rules.

Services validate in two steps and report every problem in one
`DataValidationError`:

1. the repository's field registry converts the wire values (types, required
   fields, numeric ranges, positive amounts);
2. the rule functions below run on the values that converted.

Every rule takes the shared `errors` dict (wire field name -> reason) and
records at most one reason per field.
"""

import re
from datetime import date
from typing import Any, Mapping

from realestate.exceptions import DataValidationError
from realestate.repositories.fields import FieldRegistry
from realestate.validators.text import is_blank

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
PHONE_NOISE = re.compile(r"[^\d+]")
MIN_PHONE_LENGTH = 10

FieldErrors = dict[str, str]


def coerce_fields(
    registry: FieldRegistry,
    data: Mapping[str, Any],
    errors: FieldErrors,
) -> dict[str, Any]:
    """Run the registry conversion, recording failures into `errors`."""
    values, coercion_errors = registry.coerce(data)
    errors.update(coercion_errors)
    return values


def raise_if_errors(errors: FieldErrors) -> None:
    if errors:
        raise DataValidationError(errors)


def check_email(errors: FieldErrors, values: Mapping[str, Any], field: str = "email") -> None:
    email = values.get(field)
    if is_blank(email) or field in errors:
        return
    if not EMAIL_PATTERN.match(email):
        errors[field] = "Некорректный формат email"


def check_phone(errors: FieldErrors, values: Mapping[str, Any], field: str = "phone") -> None:
    phone = values.get(field)
    if is_blank(phone) or field in errors:
        return
    if len(PHONE_NOISE.sub("", phone)) < MIN_PHONE_LENGTH:
        errors[field] = f"Телефон должен содержать не менее {MIN_PHONE_LENGTH} цифр"


def check_not_future(
    errors: FieldErrors,
    values: Mapping[str, Any],
    field: str,
    today: date | None = None,
) -> None:
    value = values.get(field)
    if value is None or field in errors:
        return
    if value > (today or date.today()):
        errors[field] = "Дата не может быть в будущем"


def check_date_range(start: date | None, end: date | None) -> None:
    """Both dates present and start after end is a validation error."""
    if start is not None and end is not None and start > end:
        raise DataValidationError.for_field("startDate", "Начальная дата не может быть позже конечной")


def check_value_range(low: Any, high: Any, low_field: str = "min", high_field: str = "max") -> None:
    if low is not None and high is not None and low > high:
        raise DataValidationError(
            {low_field: f"Минимальное значение не может быть больше максимального ({high_field})"}
        )


def require_updates(updates: Mapping[str, Any] | None) -> None:
    if not updates:
        raise DataValidationError.for_field("updates", "Нет данных для обновления")
