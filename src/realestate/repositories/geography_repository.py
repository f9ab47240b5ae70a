"""
Geography hierarchy lookups (read-only).

Country 1-N Region 1-N City, and a city holds both districts and streets.
Lookups "by region" or "by country" for the lower levels walk up the
hierarchy with joins. The with-details reads add the names of every ancestor.
"""

from sqlalchemy import Select, select

from realestate.models import City, Country, District, Region, Street
from realestate.schemas.views import (
    CityWithDetails,
    DistrictWithDetails,
    RegionWithDetails,
    StreetWithDetails,
)

from .base_repository import BaseRepository
from .filters import apply_filters, contains, equals
from .row_mappers import (
    map_city_with_details,
    map_district_with_details,
    map_region_with_details,
    map_street_with_details,
)


class CountryRepository(BaseRepository[Country]):
    model = Country
    default_order = (Country.country_name,)

    async def find_by_name(self, name: str) -> Country | None:
        return await self.find_one_by(Country.country_name, name)


# =====================================================================================================================
# Region
# =====================================================================================================================

def _region_details() -> Select:
    return (
        select(
            Region.id.label("id_region"),
            Region.name,
            Region.code,
            Region.id_country,
            Country.country_name,
        )
        .select_from(Region)
        .join(Country, Country.id == Region.id_country)
    )


class RegionRepository(BaseRepository[Region]):
    model = Region
    default_order = (Region.name,)

    async def find_by_code(self, code: str) -> Region | None:
        return await self.find_one_by(Region.code, code)

    async def find_by_country_id(self, country_id: int) -> list[Region]:
        return await self.find_where(select(Region).where(Region.id_country == country_id))

    async def find_by_name_and_country(self, name: str, country_id: int) -> Region | None:
        stmt = select(Region).where(Region.name == name, Region.id_country == country_id)
        return await self.fetch_one_or_none(self.ordered(stmt).limit(1))

    async def find_all_with_details(self) -> list[RegionWithDetails]:
        return await self.fetch_rows(self.ordered(_region_details()), map_region_with_details)

    async def find_by_id_with_details(self, region_id: int) -> RegionWithDetails:
        return await self.fetch_row(
            _region_details().where(Region.id == region_id), map_region_with_details, region_id
        )

    async def find_by_country_id_with_details(self, country_id: int) -> list[RegionWithDetails]:
        stmt = _region_details().where(Region.id_country == country_id)
        return await self.fetch_rows(self.ordered(stmt), map_region_with_details)

    async def search(
        self,
        name: str | None = None,
        code: str | None = None,
        country_id: int | None = None,
    ) -> list[RegionWithDetails]:
        stmt = apply_filters(
            _region_details(),
            contains(Region.name, name),
            contains(Region.code, code),
            equals(Region.id_country, country_id),
        )
        return await self.fetch_rows(self.ordered(stmt), map_region_with_details)


# =====================================================================================================================
# City
# =====================================================================================================================

def _city_details() -> Select:
    return (
        select(
            City.id.label("id_city"),
            City.city_name,
            City.id_region,
            Region.name.label("region_name"),
            Region.code.label("region_code"),
            Region.id_country,
            Country.country_name,
        )
        .select_from(City)
        .join(Region, Region.id == City.id_region)
        .join(Country, Country.id == Region.id_country)
    )


class CityRepository(BaseRepository[City]):
    model = City
    default_order = (City.city_name,)

    async def find_by_region_id(self, region_id: int) -> list[City]:
        return await self.find_where(select(City).where(City.id_region == region_id))

    async def find_by_country_id(self, country_id: int) -> list[City]:
        stmt = (
            select(City)
            .join(Region, Region.id == City.id_region)
            .where(Region.id_country == country_id)
        )
        return await self.find_where(stmt)

    async def find_by_name_and_region(self, name: str, region_id: int) -> City | None:
        stmt = select(City).where(City.city_name == name, City.id_region == region_id)
        return await self.fetch_one_or_none(self.ordered(stmt).limit(1))

    async def find_by_name_containing(self, pattern: str) -> list[City]:
        return await self.find_where(apply_filters(select(City), contains(City.city_name, pattern)))

    async def find_all_with_details(self) -> list[CityWithDetails]:
        return await self.fetch_rows(self.ordered(_city_details()), map_city_with_details)

    async def find_by_id_with_details(self, city_id: int) -> CityWithDetails:
        return await self.fetch_row(_city_details().where(City.id == city_id), map_city_with_details, city_id)

    async def find_by_region_id_with_details(self, region_id: int) -> list[CityWithDetails]:
        stmt = _city_details().where(City.id_region == region_id)
        return await self.fetch_rows(self.ordered(stmt), map_city_with_details)

    async def search(
        self,
        name: str | None = None,
        region_id: int | None = None,
        country_id: int | None = None,
    ) -> list[CityWithDetails]:
        stmt = apply_filters(
            _city_details(),
            contains(City.city_name, name),
            equals(City.id_region, region_id),
            equals(Region.id_country, country_id),
        )
        return await self.fetch_rows(self.ordered(stmt), map_city_with_details)


# =====================================================================================================================
# District
# =====================================================================================================================

def _district_details() -> Select:
    return (
        select(
            District.id.label("id_district"),
            District.district_name,
            District.id_city,
            City.city_name,
            City.id_region,
            Region.name.label("region_name"),
            Region.id_country,
            Country.country_name,
        )
        .select_from(District)
        .join(City, City.id == District.id_city)
        .join(Region, Region.id == City.id_region)
        .join(Country, Country.id == Region.id_country)
    )


class DistrictRepository(BaseRepository[District]):
    model = District
    default_order = (District.district_name,)

    async def find_by_city_id(self, city_id: int) -> list[District]:
        return await self.find_where(select(District).where(District.id_city == city_id))

    async def find_by_region_id(self, region_id: int) -> list[District]:
        stmt = (
            select(District)
            .join(City, City.id == District.id_city)
            .where(City.id_region == region_id)
        )
        return await self.find_where(stmt)

    async def find_by_country_id(self, country_id: int) -> list[District]:
        stmt = (
            select(District)
            .join(City, City.id == District.id_city)
            .join(Region, Region.id == City.id_region)
            .where(Region.id_country == country_id)
        )
        return await self.find_where(stmt)

    async def find_by_name_and_city(self, name: str, city_id: int) -> District | None:
        stmt = select(District).where(District.district_name == name, District.id_city == city_id)
        return await self.fetch_one_or_none(self.ordered(stmt).limit(1))

    async def find_all_with_details(self) -> list[DistrictWithDetails]:
        return await self.fetch_rows(self.ordered(_district_details()), map_district_with_details)

    async def find_by_id_with_details(self, district_id: int) -> DistrictWithDetails:
        return await self.fetch_row(
            _district_details().where(District.id == district_id), map_district_with_details, district_id
        )

    async def find_by_city_id_with_details(self, city_id: int) -> list[DistrictWithDetails]:
        stmt = _district_details().where(District.id_city == city_id)
        return await self.fetch_rows(self.ordered(stmt), map_district_with_details)

    async def search(
        self,
        name: str | None = None,
        city_id: int | None = None,
        region_id: int | None = None,
    ) -> list[DistrictWithDetails]:
        stmt = apply_filters(
            _district_details(),
            contains(District.district_name, name),
            equals(District.id_city, city_id),
            equals(City.id_region, region_id),
        )
        return await self.fetch_rows(self.ordered(stmt), map_district_with_details)


# =====================================================================================================================
# Street
# =====================================================================================================================

def _street_details() -> Select:
    return (
        select(
            Street.id.label("id_street"),
            Street.street_name,
            Street.id_city,
            City.city_name,
            City.id_region,
            Region.name.label("region_name"),
            Region.id_country,
            Country.country_name,
        )
        .select_from(Street)
        .join(City, City.id == Street.id_city)
        .join(Region, Region.id == City.id_region)
        .join(Country, Country.id == Region.id_country)
    )


class StreetRepository(BaseRepository[Street]):
    model = Street
    default_order = (Street.street_name,)

    async def find_by_city_id(self, city_id: int) -> list[Street]:
        return await self.find_where(select(Street).where(Street.id_city == city_id))

    async def find_by_name_and_city(self, name: str, city_id: int) -> Street | None:
        stmt = select(Street).where(Street.street_name == name, Street.id_city == city_id)
        return await self.fetch_one_or_none(self.ordered(stmt).limit(1))

    async def find_by_name_containing(self, pattern: str) -> list[Street]:
        return await self.find_where(apply_filters(select(Street), contains(Street.street_name, pattern)))

    async def find_all_with_details(self) -> list[StreetWithDetails]:
        return await self.fetch_rows(self.ordered(_street_details()), map_street_with_details)

    async def find_by_id_with_details(self, street_id: int) -> StreetWithDetails:
        return await self.fetch_row(
            _street_details().where(Street.id == street_id), map_street_with_details, street_id
        )

    async def find_by_city_id_with_details(self, city_id: int) -> list[StreetWithDetails]:
        stmt = _street_details().where(Street.id_city == city_id)
        return await self.fetch_rows(self.ordered(stmt), map_street_with_details)

    async def search(
        self,
        name: str | None = None,
        city_id: int | None = None,
        region_id: int | None = None,
    ) -> list[StreetWithDetails]:
        stmt = apply_filters(
            _street_details(),
            contains(Street.street_name, name),
            equals(Street.id_city, city_id),
            equals(City.id_region, region_id),
        )
        return await self.fetch_rows(self.ordered(stmt), map_street_with_details)
