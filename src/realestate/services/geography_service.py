"""
Geography lookups.

One service covers the whole hierarchy; each method runs under the error
boundary of the level it reads, so a missing region is reported as "Region"
and a missing street as "Street".
"""

from sqlalchemy.ext.asyncio import AsyncSession

from realestate.exceptions import EntityNotFoundError
from realestate.exceptions.handler import translate_errors
from realestate.models import City, Country, District, Region, Street
from realestate.repositories import (
    CityRepository,
    CountryRepository,
    DistrictRepository,
    RegionRepository,
    StreetRepository,
)
from realestate.schemas.views import CityWithDetails, DistrictWithDetails, RegionWithDetails, StreetWithDetails


def _select(entity_type: str, entity_id: int | None = None):
    return translate_errors("SELECT", entity_type, entity_id)


def _found(entity, entity_type: str, message: str):
    if entity is None:
        raise EntityNotFoundError(entity_type, message=message)
    return entity


class GeographyService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.countries = CountryRepository(db)
        self.regions = RegionRepository(db)
        self.cities = CityRepository(db)
        self.districts = DistrictRepository(db)
        self.streets = StreetRepository(db)

    # =================================================================================================================
    # Countries
    # =================================================================================================================

    async def find_all_countries(self) -> list[Country]:
        async with _select("Country"):
            return await self.countries.find_all()

    async def find_country_by_id(self, country_id: int) -> Country:
        async with _select("Country", country_id):
            return await self.countries.find_by_id(country_id)

    async def find_country_by_name(self, name: str) -> Country:
        async with _select("Country"):
            return _found(await self.countries.find_by_name(name), "Country", f"Страна {name} не найдена")

    # =================================================================================================================
    # Regions
    # =================================================================================================================

    async def find_all_regions(self) -> list[Region]:
        async with _select("Region"):
            return await self.regions.find_all()

    async def find_region_by_id(self, region_id: int) -> Region:
        async with _select("Region", region_id):
            return await self.regions.find_by_id(region_id)

    async def find_region_by_code(self, code: str) -> Region:
        async with _select("Region"):
            return _found(await self.regions.find_by_code(code), "Region", f"Регион с кодом {code} не найден")

    async def find_regions_by_country(self, country_id: int) -> list[Region]:
        async with _select("Region"):
            return await self.regions.find_by_country_id(country_id)

    async def find_region_by_name_and_country(self, name: str, country_id: int) -> Region:
        async with _select("Region"):
            region = await self.regions.find_by_name_and_country(name, country_id)
            return _found(region, "Region", f"Регион {name} не найден в стране {country_id}")

    async def find_all_regions_with_details(self) -> list[RegionWithDetails]:
        async with _select("Region"):
            return await self.regions.find_all_with_details()

    async def find_region_by_id_with_details(self, region_id: int) -> RegionWithDetails:
        async with _select("Region", region_id):
            return await self.regions.find_by_id_with_details(region_id)

    async def find_regions_by_country_with_details(self, country_id: int) -> list[RegionWithDetails]:
        async with _select("Region"):
            return await self.regions.find_by_country_id_with_details(country_id)

    async def search_regions(
        self,
        name: str | None = None,
        code: str | None = None,
        country_id: int | None = None,
    ) -> list[RegionWithDetails]:
        async with _select("Region"):
            return await self.regions.search(name, code, country_id)

    # =================================================================================================================
    # Cities
    # =================================================================================================================

    async def find_all_cities(self) -> list[City]:
        async with _select("City"):
            return await self.cities.find_all()

    async def find_city_by_id(self, city_id: int) -> City:
        async with _select("City", city_id):
            return await self.cities.find_by_id(city_id)

    async def find_cities_by_region(self, region_id: int) -> list[City]:
        async with _select("City"):
            return await self.cities.find_by_region_id(region_id)

    async def find_cities_by_country(self, country_id: int) -> list[City]:
        async with _select("City"):
            return await self.cities.find_by_country_id(country_id)

    async def find_city_by_name_and_region(self, name: str, region_id: int) -> City:
        async with _select("City"):
            city = await self.cities.find_by_name_and_region(name, region_id)
            return _found(city, "City", f"Город {name} не найден в регионе {region_id}")

    async def find_cities_by_name(self, pattern: str) -> list[City]:
        async with _select("City"):
            return await self.cities.find_by_name_containing(pattern)

    async def find_all_cities_with_details(self) -> list[CityWithDetails]:
        async with _select("City"):
            return await self.cities.find_all_with_details()

    async def find_city_by_id_with_details(self, city_id: int) -> CityWithDetails:
        async with _select("City", city_id):
            return await self.cities.find_by_id_with_details(city_id)

    async def find_cities_by_region_with_details(self, region_id: int) -> list[CityWithDetails]:
        async with _select("City"):
            return await self.cities.find_by_region_id_with_details(region_id)

    async def search_cities(
        self,
        name: str | None = None,
        region_id: int | None = None,
        country_id: int | None = None,
    ) -> list[CityWithDetails]:
        async with _select("City"):
            return await self.cities.search(name, region_id, country_id)

    # =================================================================================================================
    # Districts
    # =================================================================================================================

    async def find_all_districts(self) -> list[District]:
        async with _select("District"):
            return await self.districts.find_all()

    async def find_district_by_id(self, district_id: int) -> District:
        async with _select("District", district_id):
            return await self.districts.find_by_id(district_id)

    async def find_districts_by_city(self, city_id: int) -> list[District]:
        async with _select("District"):
            return await self.districts.find_by_city_id(city_id)

    async def find_districts_by_region(self, region_id: int) -> list[District]:
        async with _select("District"):
            return await self.districts.find_by_region_id(region_id)

    async def find_districts_by_country(self, country_id: int) -> list[District]:
        async with _select("District"):
            return await self.districts.find_by_country_id(country_id)

    async def find_district_by_name_and_city(self, name: str, city_id: int) -> District:
        async with _select("District"):
            district = await self.districts.find_by_name_and_city(name, city_id)
            return _found(district, "District", f"Район {name} не найден в городе {city_id}")

    async def find_all_districts_with_details(self) -> list[DistrictWithDetails]:
        async with _select("District"):
            return await self.districts.find_all_with_details()

    async def find_district_by_id_with_details(self, district_id: int) -> DistrictWithDetails:
        async with _select("District", district_id):
            return await self.districts.find_by_id_with_details(district_id)

    async def find_districts_by_city_with_details(self, city_id: int) -> list[DistrictWithDetails]:
        async with _select("District"):
            return await self.districts.find_by_city_id_with_details(city_id)

    async def search_districts(
        self,
        name: str | None = None,
        city_id: int | None = None,
        region_id: int | None = None,
    ) -> list[DistrictWithDetails]:
        async with _select("District"):
            return await self.districts.search(name, city_id, region_id)

    # =================================================================================================================
    # Streets
    # =================================================================================================================

    async def find_all_streets(self) -> list[Street]:
        async with _select("Street"):
            return await self.streets.find_all()

    async def find_street_by_id(self, street_id: int) -> Street:
        async with _select("Street", street_id):
            return await self.streets.find_by_id(street_id)

    async def find_streets_by_city(self, city_id: int) -> list[Street]:
        async with _select("Street"):
            return await self.streets.find_by_city_id(city_id)

    async def find_street_by_name_and_city(self, name: str, city_id: int) -> Street:
        async with _select("Street"):
            street = await self.streets.find_by_name_and_city(name, city_id)
            return _found(street, "Street", f"Улица {name} не найдена в городе {city_id}")

    async def find_streets_by_name(self, pattern: str) -> list[Street]:
        async with _select("Street"):
            return await self.streets.find_by_name_containing(pattern)

    async def find_all_streets_with_details(self) -> list[StreetWithDetails]:
        async with _select("Street"):
            return await self.streets.find_all_with_details()

    async def find_street_by_id_with_details(self, street_id: int) -> StreetWithDetails:
        async with _select("Street", street_id):
            return await self.streets.find_by_id_with_details(street_id)

    async def find_streets_by_city_with_details(self, city_id: int) -> list[StreetWithDetails]:
        async with _select("Street"):
            return await self.streets.find_by_city_id_with_details(city_id)

    async def search_streets(
        self,
        name: str | None = None,
        city_id: int | None = None,
        region_id: int | None = None,
    ) -> list[StreetWithDetails]:
        async with _select("Street"):
            return await self.streets.search(name, city_id, region_id)
