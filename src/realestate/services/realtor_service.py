"""Realtor business logic."""

from realestate.exceptions import DataValidationError
from realestate.models import Realtor
from realestate.repositories import RealtorRepository

from .person_service import PersonService


class RealtorService(PersonService[RealtorRepository]):
    entity_type = "Realtor"
    repository_cls = RealtorRepository
    related_deals_rule = "REALTOR_HAS_RELATED_DEALS"
    related_deals_message = "Нельзя удалить риелтора с ID {id}, так как у него есть связанные сделки"

    async def has_deals(self, realtor_id: int) -> bool:
        return await self.deals.exists_for_realtor(realtor_id)

    async def find_by_experience_at_least(self, min_experience: int) -> list[Realtor]:
        async with self.errors("SELECT", description="поиск риелторов по опыту"):
            if min_experience < 0:
                raise DataValidationError.for_field("minExperience", "Опыт не может быть отрицательным")
            return await self.repo.find_by_experience_at_least(min_experience)

    async def search(
        self,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        min_experience: int | None = None,
    ) -> list[Realtor]:
        async with self.errors("SELECT", description="поиск риелторов"):
            return await self.repo.search(last_name, email, phone, min_experience)
