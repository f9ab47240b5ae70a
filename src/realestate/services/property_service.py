"""Property business logic."""

import logging
from decimal import Decimal
from typing import Any, Mapping

from realestate.models import Property
from realestate.repositories import (
    CityRepository,
    CountryRepository,
    DealRepository,
    DistrictRepository,
    PropertyRepository,
    PropertyTypeRepository,
    RegionRepository,
    StreetRepository,
)
from realestate.schemas.entities import PropertyCreate
from realestate.schemas.views import PropertyReportRow, PropertyTableRow, PropertyWithDetails

from .base_service import BaseService
from .validation import check_value_range, coerce_fields, raise_if_errors, require_updates

logger = logging.getLogger(__name__)


class PropertyService(BaseService[PropertyRepository]):
    entity_type = "Property"
    repository_cls = PropertyRepository

    def __init__(self, db):
        super().__init__(db)
        self.deals = DealRepository(db)
        self.property_types = PropertyTypeRepository(db)
        self.countries = CountryRepository(db)
        self.regions = RegionRepository(db)
        self.cities = CityRepository(db)
        self.districts = DistrictRepository(db)
        self.streets = StreetRepository(db)

    async def validate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        errors: dict[str, str] = {}
        values = coerce_fields(self.repo.update_fields, data, errors)
        await self.check_related(errors, [
            ("idPropertyType", self.property_types, values.get("idPropertyType")),
            ("idCountry", self.countries, values.get("idCountry")),
            ("idRegion", self.regions, values.get("idRegion")),
            ("idCity", self.cities, values.get("idCity")),
            ("idDistrict", self.districts, values.get("idDistrict")),
            ("idStreet", self.streets, values.get("idStreet")),
        ])
        raise_if_errors(errors)
        return values

    # =================================================================================================================
    # Writes
    # =================================================================================================================

    async def save(self, data: PropertyCreate) -> int:
        async with self.errors("INSERT", description="сохранение объекта недвижимости"):
            values = await self.validate(data.model_dump(by_alias=True))
            entity = await self.repo.create(**self.repo.update_fields.to_columns(values))
            await self.commit("INSERT", entity.id)

        logger.info("service.created", extra={"entity": self.entity_type, "id": entity.id})
        return entity.id

    async def update(self, property_id: int, updates: Mapping[str, Any] | None) -> bool:
        async with self.errors("UPDATE", property_id, "обновление объекта недвижимости"):
            require_updates(updates)
            await self.repo.find_by_id(property_id)
            values = await self.validate(updates)
            updated = await self.repo.update(property_id, values)
            if updated:
                await self.commit("UPDATE", property_id)
            return updated

    async def delete_by_id(self, property_id: int) -> bool:
        return await self.delete_guarded(
            property_id,
            self.deals.exists_for_property,
            "PROPERTY_HAS_RELATED_DEALS",
            f"Нельзя удалить объект недвижимости с ID {property_id}, так как у него есть связанные сделки",
        )

    # =================================================================================================================
    # Reads
    # =================================================================================================================

    async def find_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Property]:
        async with self.errors("SELECT", description="поиск недвижимости по цене"):
            check_value_range(min_price, max_price, "minPrice", "maxPrice")
            return await self.repo.find_by_price_range(min_price, max_price)

    async def find_by_city_id(self, city_id: int) -> list[Property]:
        async with self.errors("SELECT", description="поиск недвижимости по городу"):
            return await self.repo.find_by_city_id(city_id)

    async def find_by_property_type_id(self, property_type_id: int) -> list[Property]:
        async with self.errors("SELECT", description="поиск недвижимости по типу"):
            return await self.repo.find_by_property_type_id(property_type_id)

    async def find_all_with_details(self) -> list[PropertyWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_all_with_details()

    async def find_by_id_with_details(self, property_id: int) -> PropertyWithDetails:
        async with self.errors("SELECT", property_id):
            return await self.repo.find_by_id_with_details(property_id)

    async def find_by_price_range_with_details(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[PropertyWithDetails]:
        async with self.errors("SELECT"):
            check_value_range(min_price, max_price, "minPrice", "maxPrice")
            return await self.repo.find_by_price_range_with_details(min_price, max_price)

    async def find_by_city_id_with_details(self, city_id: int) -> list[PropertyWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_city_id_with_details(city_id)

    async def find_by_property_type_id_with_details(self, property_type_id: int) -> list[PropertyWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_property_type_id_with_details(property_type_id)

    async def find_all_for_table(self) -> list[PropertyTableRow]:
        async with self.errors("SELECT"):
            return await self.repo.find_all_for_table()

    async def search(
        self,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        city_id: int | None = None,
        property_type_id: int | None = None,
        district_id: int | None = None,
        street_id: int | None = None,
    ) -> list[PropertyTableRow]:
        async with self.errors("SELECT", description="поиск недвижимости"):
            check_value_range(min_price, max_price, "minPrice", "maxPrice")
            return await self.repo.search(min_price, max_price, city_id, property_type_id, district_id, street_id)

    async def find_all_for_report(self) -> list[PropertyReportRow]:
        async with self.errors("SELECT", description="отчет по недвижимости"):
            return await self.repo.find_all_for_report()
