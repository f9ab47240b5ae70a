"""
REST endpoints for the geography hierarchy: /api/geography.

Read-only. Each level has list, by-id, with-details and search endpoints;
children are reachable from their parent (`/countries/{id}/regions`,
`/regions/{id}/cities`, `/cities/{id}/districts`, `/cities/{id}/streets`).
"""

from fastapi import APIRouter, Query

from realestate.core.dependencies import Geography
from realestate.schemas import (
    CityRead,
    CityWithDetails,
    CountryRead,
    DistrictRead,
    DistrictWithDetails,
    RegionRead,
    RegionWithDetails,
    StreetRead,
    StreetWithDetails,
)

router = APIRouter(prefix="/geography", tags=["geography"])


# =====================================================================================================================
# Countries
# =====================================================================================================================

@router.get("/countries", response_model=list[CountryRead])
async def list_countries(service: Geography):
    return await service.find_all_countries()


@router.get("/countries/search/by-name", response_model=CountryRead)
async def country_by_name(service: Geography, name: str = Query()):
    return await service.find_country_by_name(name)


@router.get("/countries/{country_id}", response_model=CountryRead)
async def get_country(country_id: int, service: Geography):
    return await service.find_country_by_id(country_id)


@router.get("/countries/{country_id}/regions", response_model=list[RegionRead])
async def regions_of_country(country_id: int, service: Geography):
    return await service.find_regions_by_country(country_id)


@router.get("/countries/{country_id}/regions/with-details", response_model=list[RegionWithDetails])
async def regions_of_country_with_details(country_id: int, service: Geography):
    return await service.find_regions_by_country_with_details(country_id)


@router.get("/countries/{country_id}/cities", response_model=list[CityRead])
async def cities_of_country(country_id: int, service: Geography):
    return await service.find_cities_by_country(country_id)


@router.get("/countries/{country_id}/districts", response_model=list[DistrictRead])
async def districts_of_country(country_id: int, service: Geography):
    return await service.find_districts_by_country(country_id)


# =====================================================================================================================
# Regions
# =====================================================================================================================

@router.get("/regions", response_model=list[RegionRead])
async def list_regions(service: Geography):
    return await service.find_all_regions()


@router.get("/regions/with-details", response_model=list[RegionWithDetails])
async def list_regions_with_details(service: Geography):
    return await service.find_all_regions_with_details()


@router.get("/regions/search", response_model=list[RegionWithDetails])
async def search_regions(
    service: Geography,
    name: str | None = None,
    code: str | None = None,
    country_id: int | None = Query(None, alias="countryId"),
):
    return await service.search_regions(name, code, country_id)


@router.get("/regions/search/by-code", response_model=RegionRead)
async def region_by_code(service: Geography, code: str = Query()):
    return await service.find_region_by_code(code)


@router.get("/regions/search/by-name", response_model=RegionRead)
async def region_by_name_and_country(
    service: Geography,
    name: str = Query(),
    country_id: int = Query(alias="countryId"),
):
    return await service.find_region_by_name_and_country(name, country_id)


@router.get("/regions/{region_id}", response_model=RegionRead)
async def get_region(region_id: int, service: Geography):
    return await service.find_region_by_id(region_id)


@router.get("/regions/{region_id}/with-details", response_model=RegionWithDetails)
async def get_region_with_details(region_id: int, service: Geography):
    return await service.find_region_by_id_with_details(region_id)


@router.get("/regions/{region_id}/cities", response_model=list[CityRead])
async def cities_of_region(region_id: int, service: Geography):
    return await service.find_cities_by_region(region_id)


@router.get("/regions/{region_id}/cities/with-details", response_model=list[CityWithDetails])
async def cities_of_region_with_details(region_id: int, service: Geography):
    return await service.find_cities_by_region_with_details(region_id)


@router.get("/regions/{region_id}/districts", response_model=list[DistrictRead])
async def districts_of_region(region_id: int, service: Geography):
    return await service.find_districts_by_region(region_id)


# =====================================================================================================================
# Cities
# =====================================================================================================================

@router.get("/cities", response_model=list[CityRead])
async def list_cities(service: Geography):
    return await service.find_all_cities()


@router.get("/cities/with-details", response_model=list[CityWithDetails])
async def list_cities_with_details(service: Geography):
    return await service.find_all_cities_with_details()


@router.get("/cities/search", response_model=list[CityWithDetails])
async def search_cities(
    service: Geography,
    name: str | None = None,
    region_id: int | None = Query(None, alias="regionId"),
    country_id: int | None = Query(None, alias="countryId"),
):
    return await service.search_cities(name, region_id, country_id)


@router.get("/cities/search/by-name", response_model=list[CityRead])
async def cities_by_name(service: Geography, name: str = Query()):
    return await service.find_cities_by_name(name)


@router.get("/cities/search/by-name-and-region", response_model=CityRead)
async def city_by_name_and_region(
    service: Geography,
    name: str = Query(),
    region_id: int = Query(alias="regionId"),
):
    return await service.find_city_by_name_and_region(name, region_id)


@router.get("/cities/{city_id}", response_model=CityRead)
async def get_city(city_id: int, service: Geography):
    return await service.find_city_by_id(city_id)


@router.get("/cities/{city_id}/with-details", response_model=CityWithDetails)
async def get_city_with_details(city_id: int, service: Geography):
    return await service.find_city_by_id_with_details(city_id)


@router.get("/cities/{city_id}/districts", response_model=list[DistrictRead])
async def districts_of_city(city_id: int, service: Geography):
    return await service.find_districts_by_city(city_id)


@router.get("/cities/{city_id}/districts/with-details", response_model=list[DistrictWithDetails])
async def districts_of_city_with_details(city_id: int, service: Geography):
    return await service.find_districts_by_city_with_details(city_id)


@router.get("/cities/{city_id}/streets", response_model=list[StreetRead])
async def streets_of_city(city_id: int, service: Geography):
    return await service.find_streets_by_city(city_id)


@router.get("/cities/{city_id}/streets/with-details", response_model=list[StreetWithDetails])
async def streets_of_city_with_details(city_id: int, service: Geography):
    return await service.find_streets_by_city_with_details(city_id)


# =====================================================================================================================
# Districts
# =====================================================================================================================

@router.get("/districts", response_model=list[DistrictRead])
async def list_districts(service: Geography):
    return await service.find_all_districts()


@router.get("/districts/with-details", response_model=list[DistrictWithDetails])
async def list_districts_with_details(service: Geography):
    return await service.find_all_districts_with_details()


@router.get("/districts/search", response_model=list[DistrictWithDetails])
async def search_districts(
    service: Geography,
    name: str | None = None,
    city_id: int | None = Query(None, alias="cityId"),
    region_id: int | None = Query(None, alias="regionId"),
):
    return await service.search_districts(name, city_id, region_id)


@router.get("/districts/search/by-name-and-city", response_model=DistrictRead)
async def district_by_name_and_city(
    service: Geography,
    name: str = Query(),
    city_id: int = Query(alias="cityId"),
):
    return await service.find_district_by_name_and_city(name, city_id)


@router.get("/districts/{district_id}", response_model=DistrictRead)
async def get_district(district_id: int, service: Geography):
    return await service.find_district_by_id(district_id)


@router.get("/districts/{district_id}/with-details", response_model=DistrictWithDetails)
async def get_district_with_details(district_id: int, service: Geography):
    return await service.find_district_by_id_with_details(district_id)


# =====================================================================================================================
# Streets
# =====================================================================================================================

@router.get("/streets", response_model=list[StreetRead])
async def list_streets(service: Geography):
    return await service.find_all_streets()


@router.get("/streets/with-details", response_model=list[StreetWithDetails])
async def list_streets_with_details(service: Geography):
    return await service.find_all_streets_with_details()


@router.get("/streets/search", response_model=list[StreetWithDetails])
async def search_streets(
    service: Geography,
    name: str | None = None,
    city_id: int | None = Query(None, alias="cityId"),
    region_id: int | None = Query(None, alias="regionId"),
):
    return await service.search_streets(name, city_id, region_id)


@router.get("/streets/search/by-name", response_model=list[StreetRead])
async def streets_by_name(service: Geography, name: str = Query()):
    return await service.find_streets_by_name(name)


@router.get("/streets/search/by-name-and-city", response_model=StreetRead)
async def street_by_name_and_city(
    service: Geography,
    name: str = Query(),
    city_id: int = Query(alias="cityId"),
):
    return await service.find_street_by_name_and_city(name, city_id)


@router.get("/streets/{street_id}", response_model=StreetRead)
async def get_street(street_id: int, service: Geography):
    return await service.find_street_by_id(street_id)


@router.get("/streets/{street_id}/with-details", response_model=StreetWithDetails)
async def get_street_with_details(street_id: int, service: Geography):
    return await service.find_street_by_id_with_details(street_id)
