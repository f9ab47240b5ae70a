"""
Shared pydantic configuration.

Python code uses snake_case; JSON, HTML forms and partial-update maps use
camelCase (`firstName`, `idPropertyType`). Every schema accepts both.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ReadModel(CamelModel):
    """Immutable projection returned to callers."""

    model_config = ConfigDict(frozen=True)


class IdResponse(CamelModel):
    id: int
    message: str


class MessageResponse(CamelModel):
    message: str


class CountResponse(CamelModel):
    count: int
