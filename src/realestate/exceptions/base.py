"""
Domain exception taxonomy.

Services raise only these. Each error knows its HTTP status, its API payload
and the message that is safe to show an end user:

| Class                      | code                    | HTTP             |
| -------------------------- | ----------------------- | ---------------- |
| EntityNotFoundError        | ENTITY_NOT_FOUND        | 404              |
| DataValidationError        | VALIDATION_ERROR        | 400              |
| DatabaseError              | DATABASE_ERROR          | 400 / 404 / 500  |
| BusinessRuleViolationError | BUSINESS_RULE_VIOLATION | 409              |
"""

from typing import Any

from .data_access import DbFailureKind

GENERIC_USER_MESSAGE = "Произошла непредвиденная ошибка"


class RealEstateError(Exception):
    """
    Base class for every domain error.

    - message: developer-facing description (logged; returned to API callers
      only for client-actionable errors)
    - error_code: canonical short code used by clients
    - details: optional free-form context for logs
    """

    default_error_code = "REAL_ESTATE_ERROR"
    default_status = 500
    # whether `message` may be returned to API callers
    expose_message = False

    def __init__(self, message: str, *, error_code: str | None = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details

    def __str__(self) -> str:
        return self.message

    def detailed_message(self) -> str:
        text = f"{self.message} [{self.error_code}]"
        if self.details is not None:
            text += f" details: {self.details}"
        return text

    def http_status(self) -> int:
        return self.default_status

    def user_friendly_message(self) -> str:
        return GENERIC_USER_MESSAGE

    def to_payload(self) -> dict[str, Any]:
        """
        JSON body for HTTP responses:

            {"status": 404, "code": "ENTITY_NOT_FOUND",
             "message": "<user-friendly>", "error": "<developer message>"}

        `error` is omitted when the message may carry internals.
        """
        payload: dict[str, Any] = {
            "status": self.http_status(),
            "code": self.error_code,
            "message": self.user_friendly_message(),
        }
        if self.expose_message:
            payload["error"] = self.message
        return payload


class EntityNotFoundError(RealEstateError):
    default_error_code = "ENTITY_NOT_FOUND"
    default_status = 404
    expose_message = True

    def __init__(self, entity_type: str, entity_id: Any = None, message: str | None = None):
        if message is None:
            message = (
                f"{entity_type} с ID {entity_id} не найден"
                if entity_id is not None
                else f"{entity_type} не найден"
            )
        super().__init__(message, details={"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id

    def user_friendly_message(self) -> str:
        return "Запрашиваемая информация не найдена"


class DataValidationError(RealEstateError):
    """
    Input failed validation.

    `field_errors` maps the wire field name (camelCase) to a human-readable
    reason; several fields can fail at once.
    """

    default_error_code = "VALIDATION_ERROR"
    default_status = 400
    expose_message = True

    def __init__(self, field_errors: dict[str, str], message: str | None = None):
        self.field_errors = dict(field_errors)
        if message is None:
            message = "; ".join(f"{field}: {reason}" for field, reason in self.field_errors.items())
        super().__init__(message, details=self.field_errors)

    @classmethod
    def for_field(cls, field: str, reason: str) -> "DataValidationError":
        return cls({field: reason})

    def user_friendly_message(self) -> str:
        return "Проверьте правильность введенных данных"

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["fieldErrors"] = dict(self.field_errors)
        return payload


class DatabaseError(RealEstateError):
    """
    A data-access failure that is not the caller's "not found".

    - operation_type: SELECT / INSERT / UPDATE / DELETE
    - kind: what the data-access boundary classified the failure as
    """

    default_error_code = "DATABASE_ERROR"

    USER_MESSAGES = {
        "INSERT": "Не удалось сохранить данные. Возможно, такая запись уже существует",
        "UPDATE": "Не удалось обновить данные",
        "DELETE": "Не удалось удалить данные",
    }
    DEFAULT_USER_MESSAGE = "Произошла ошибка при работе с базой данных"

    def __init__(
        self,
        operation_type: str,
        message: str,
        *,
        kind: DbFailureKind = DbFailureKind.OTHER,
        details: Any = None,
    ):
        super().__init__(message, details=details)
        self.operation_type = operation_type
        self.kind = kind

    def http_status(self) -> int:
        if self.kind is DbFailureKind.INTEGRITY_VIOLATION:
            return 400
        if self.kind is DbFailureKind.NOT_FOUND:
            return 404
        return 500

    def user_friendly_message(self) -> str:
        return self.USER_MESSAGES.get(self.operation_type, self.DEFAULT_USER_MESSAGE)

    def detailed_message(self) -> str:
        return f"[{self.operation_type}/{self.kind.value}] {super().detailed_message()}"


class BusinessRuleViolationError(RealEstateError):
    """An otherwise valid operation is blocked by an application rule."""

    default_error_code = "BUSINESS_RULE_VIOLATION"
    default_status = 409
    expose_message = True

    def __init__(self, rule_name: str, message: str, context: dict[str, Any] | None = None):
        super().__init__(message, details=context)
        self.rule_name = rule_name
        self.context = context or {}

    def user_friendly_message(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["rule"] = self.rule_name
        return payload


__all__ = [
    "RealEstateError",
    "EntityNotFoundError",
    "DataValidationError",
    "DatabaseError",
    "BusinessRuleViolationError",
]
