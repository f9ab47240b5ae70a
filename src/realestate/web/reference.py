"""Read-only reference pages: /reference/..."""

from fastapi import APIRouter, Query, Request

from realestate.core.dependencies import DealTypes, Geography, PropertyTypes

from .common import has_any, render

router = APIRouter(prefix="/reference", tags=["web"], include_in_schema=False)


# (column title, attribute) pairs shown for each reference list
COLUMNS = {
    "deal-types": [("ID", "id"), ("Тип сделки", "deal_type_name")],
    "property-types": [("ID", "id"), ("Тип недвижимости", "property_type_name")],
    "countries": [("ID", "id"), ("Страна", "country_name")],
    "regions": [("ID", "id_region"), ("Регион", "name"), ("Код", "code"), ("Страна", "country_name")],
    "cities": [("ID", "id_city"), ("Город", "city_name"), ("Регион", "region_name"), ("Страна", "country_name")],
    "districts": [("ID", "id_district"), ("Район", "district_name"), ("Город", "city_name"), ("Регион", "region_name")],
    "streets": [("ID", "id_street"), ("Улица", "street_name"), ("Город", "city_name"), ("Регион", "region_name")],
}


def _reference(request: Request, title: str, kind: str, items, **filters):
    return render(
        request,
        "reference.html",
        title,
        kind=kind,
        items=items,
        columns=COLUMNS[kind],
        filters=filters,
    )


@router.get("/deal-types")
async def deal_types_page(request: Request, service: DealTypes):
    return _reference(request, "Типы сделок", "deal-types", await service.find_all())


@router.get("/property-types")
async def property_types_page(request: Request, service: PropertyTypes):
    return _reference(request, "Типы недвижимости", "property-types", await service.find_all())


@router.get("/countries")
async def countries_page(request: Request, geography: Geography):
    return _reference(request, "Страны", "countries", await geography.find_all_countries())


@router.get("/regions")
async def regions_page(
    request: Request,
    geography: Geography,
    name: str | None = None,
    code: str | None = None,
    country_id: int | None = Query(None, alias="countryId"),
):
    if has_any(name, code, country_id):
        regions = await geography.search_regions(name, code, country_id)
    else:
        regions = await geography.find_all_regions_with_details()
    return _reference(request, "Регионы", "regions", regions, name=name, code=code, countryId=country_id)


@router.get("/cities")
async def cities_page(
    request: Request,
    geography: Geography,
    name: str | None = None,
    region_id: int | None = Query(None, alias="regionId"),
    country_id: int | None = Query(None, alias="countryId"),
):
    if has_any(name, region_id, country_id):
        cities = await geography.search_cities(name, region_id, country_id)
    else:
        cities = await geography.find_all_cities_with_details()
    return _reference(request, "Города", "cities", cities, name=name, regionId=region_id, countryId=country_id)


@router.get("/districts")
async def districts_page(
    request: Request,
    geography: Geography,
    name: str | None = None,
    city_id: int | None = Query(None, alias="cityId"),
    region_id: int | None = Query(None, alias="regionId"),
):
    if has_any(name, city_id, region_id):
        districts = await geography.search_districts(name, city_id, region_id)
    else:
        districts = await geography.find_all_districts_with_details()
    return _reference(request, "Районы", "districts", districts, name=name, cityId=city_id, regionId=region_id)


@router.get("/streets")
async def streets_page(
    request: Request,
    geography: Geography,
    name: str | None = None,
    city_id: int | None = Query(None, alias="cityId"),
    region_id: int | None = Query(None, alias="regionId"),
):
    if has_any(name, city_id, region_id):
        streets = await geography.search_streets(name, city_id, region_id)
    else:
        streets = await geography.find_all_streets_with_details()
    return _reference(request, "Улицы", "streets", streets, name=name, cityId=city_id, regionId=region_id)
