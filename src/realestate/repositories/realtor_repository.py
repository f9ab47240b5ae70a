"""Realtor data access."""

from sqlalchemy import select

from realestate.models import Realtor

from .fields import FieldRegistry, FieldSpec, int_in_range
from .filters import apply_filters, at_least
from .person_repository import PersonRepository, person_fields


class RealtorRepository(PersonRepository[Realtor]):
    model = Realtor
    default_order = (Realtor.last_name, Realtor.first_name)
    update_fields = FieldRegistry({
        **person_fields(Realtor),
        "experienceYears": FieldSpec(Realtor.experience_years, int_in_range(0, 100)),
    })

    async def find_by_experience_at_least(self, min_experience: int) -> list[Realtor]:
        """Most experienced first."""
        stmt = (
            select(Realtor)
            .where(Realtor.experience_years >= min_experience)
            .order_by(Realtor.experience_years.desc(), *self.default_order)
        )
        return await self.fetch_all(stmt)

    async def search(
        self,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        min_experience: int | None = None,
    ) -> list[Realtor]:
        stmt = apply_filters(
            self.search_statement(last_name, email, phone),
            at_least(Realtor.experience_years, min_experience),
        )
        return await self.find_where(stmt)
