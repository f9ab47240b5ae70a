"""
Shared lookups for the two "person" entities, clients and realtors.

Both tables carry the same name/phone/email columns; email and phone are the
fields the services keep unique per entity.
"""

from typing import TypeVar

from sqlalchemy import select

from realestate.models import Client, Realtor

from .base_repository import BaseRepository
from .fields import FieldSpec, optional_text, required_text
from .filters import apply_filters, contains, equals

PersonT = TypeVar("PersonT", Client, Realtor)


def person_fields(model) -> dict[str, FieldSpec]:
    return {
        "firstName": FieldSpec(model.first_name, required_text),
        "lastName": FieldSpec(model.last_name, required_text),
        "middleName": FieldSpec(model.middle_name, optional_text),
        "phone": FieldSpec(model.phone, optional_text),
        "email": FieldSpec(model.email, optional_text),
    }


class PersonRepository(BaseRepository[PersonT]):

    async def find_by_last_name(self, last_name: str) -> list[PersonT]:
        return await self.find_where(
            apply_filters(select(self.model), contains(self.model.last_name, last_name))
        )

    async def find_by_phone(self, phone: str) -> PersonT | None:
        return await self.find_one_by(self.model.phone, phone)

    async def find_by_email(self, email: str) -> PersonT | None:
        return await self.find_one_by(self.model.email, email)

    async def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        return await self.exists_by_field(self.model.email, email, exclude_id)

    async def exists_by_phone(self, phone: str, exclude_id: int | None = None) -> bool:
        return await self.exists_by_field(self.model.phone, phone, exclude_id)

    def search_statement(
        self,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ):
        return apply_filters(
            select(self.model),
            contains(self.model.last_name, last_name),
            equals(self.model.email, email),
            equals(self.model.phone, phone),
        )
