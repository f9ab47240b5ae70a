"""Deal type and property type lookups."""

from realestate.repositories import DealTypeRepository, PropertyTypeRepository

from .base_service import BaseService, RepoT


class ReferenceService(BaseService[RepoT]):

    async def find_by_name(self, name: str):
        """Raises EntityNotFoundError when no type has this name."""
        async with self.errors("SELECT", description=f"поиск {self.entity_type} по названию"):
            entity = await self.repo.find_by_name(name)
            if entity is None:
                raise self.not_found(f"{self.entity_type} с названием {name} не найден")
            return entity


class DealTypeService(ReferenceService[DealTypeRepository]):
    entity_type = "DealType"
    repository_cls = DealTypeRepository


class PropertyTypeService(ReferenceService[PropertyTypeRepository]):
    entity_type = "PropertyType"
    repository_cls = PropertyTypeRepository
