"""Create/update flow shared by clients and realtors."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from realestate.repositories.deal_repository import DealRepository
from realestate.schemas.entities import ClientCreate

from .base_service import BaseService, RepoT
from .validation import check_email, check_phone, coerce_fields, raise_if_errors, require_updates

logger = logging.getLogger(__name__)


class PersonService(BaseService[RepoT], ABC):
    # rule name and wording used when deals still reference the person
    related_deals_rule: str
    related_deals_message: str

    def __init__(self, db):
        super().__init__(db)
        self.deals = DealRepository(db)

    async def validate(self, data: Mapping[str, Any], entity_id: int | None = None) -> dict[str, Any]:
        """
        Convert and check `data`, returning the converted values by wire name.
        On update (`entity_id` given) only present keys are checked and the
        row itself is excluded from the uniqueness checks.
        """
        errors: dict[str, str] = {}
        values = coerce_fields(self.repo.update_fields, data, errors)
        check_email(errors, values)
        check_phone(errors, values)
        await self.check_unique(errors, "email", self.repo.model.email, values.get("email"), entity_id)
        await self.check_unique(errors, "phone", self.repo.model.phone, values.get("phone"), entity_id)
        raise_if_errors(errors)
        return values

    async def save(self, data: ClientCreate) -> int:
        """Validate and insert; returns the new id."""
        async with self.errors("INSERT", description=f"сохранение {self.entity_type}"):
            values = await self.validate(data.model_dump(by_alias=True))
            entity = await self.repo.create(**self.repo.update_fields.to_columns(values))
            await self.commit("INSERT", entity.id)

        logger.info("service.created", extra={"entity": self.entity_type, "id": entity.id})
        return entity.id

    async def update(self, entity_id: int, updates: Mapping[str, Any] | None) -> bool:
        """
        Partial update from a `{wireName: value}` map.

        Raises:
            DataValidationError: empty map or invalid values
            EntityNotFoundError: no row with `entity_id`
        """
        async with self.errors("UPDATE", entity_id, f"обновление {self.entity_type}"):
            require_updates(updates)
            await self.repo.find_by_id(entity_id)
            values = await self.validate(updates, entity_id)
            updated = await self.repo.update(entity_id, values)
            if updated:
                await self.commit("UPDATE", entity_id)
            return updated

    async def delete_by_id(self, entity_id: int) -> bool:
        return await self.delete_guarded(
            entity_id,
            self.has_deals,
            self.related_deals_rule,
            self.related_deals_message.format(id=entity_id),
        )

    @abstractmethod
    async def has_deals(self, entity_id: int) -> bool:
        """Whether any deal references this person."""

    async def find_by_last_name(self, last_name: str) -> list:
        async with self.errors("SELECT", description=f"поиск {self.entity_type} по фамилии"):
            return await self.repo.find_by_last_name(last_name)

    async def find_by_phone(self, phone: str):
        """Raises EntityNotFoundError when no row has this phone."""
        async with self.errors("SELECT", description=f"поиск {self.entity_type} по телефону"):
            entity = await self.repo.find_by_phone(phone)
            if entity is None:
                raise self.not_found(f"{self.entity_type} с телефоном {phone} не найден")
            return entity

    async def find_by_email(self, email: str):
        """Raises EntityNotFoundError when no row has this email."""
        async with self.errors("SELECT", description=f"поиск {self.entity_type} по email"):
            entity = await self.repo.find_by_email(email)
            if entity is None:
                raise self.not_found(f"{self.entity_type} с email {email} не найден")
            return entity
