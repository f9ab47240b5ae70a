"""Deal type and property type lookups (read-only)."""

from realestate.models import DealType, PropertyType

from .base_repository import BaseRepository


class DealTypeRepository(BaseRepository[DealType]):
    model = DealType
    default_order = (DealType.deal_type_name,)

    async def find_by_name(self, name: str) -> DealType | None:
        return await self.find_one_by(DealType.deal_type_name, name)


class PropertyTypeRepository(BaseRepository[PropertyType]):
    model = PropertyType
    default_order = (PropertyType.property_type_name,)

    async def find_by_name(self, name: str) -> PropertyType | None:
        return await self.find_one_by(PropertyType.property_type_name, name)
