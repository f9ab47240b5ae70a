"""Property pages: /properties."""

from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Body, Query, Request

from realestate.core.dependencies import CsvExport, Geography, Properties, PropertyTypes
from realestate.schemas import PropertyCreate
from realestate.services.csv_export import PROPERTY_COLUMNS

from .common import csv_response, done_or_404, form_payload, has_any, redirect_to, render

router = APIRouter(prefix="/properties", tags=["web"], include_in_schema=False)


@router.get("")
async def properties_page(
    request: Request,
    service: Properties,
    property_types: PropertyTypes,
    geography: Geography,
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    city_id: int | None = Query(None, alias="cityId"),
    property_type_id: int | None = Query(None, alias="propertyTypeId"),
    district_id: int | None = Query(None, alias="districtId"),
    street_id: int | None = Query(None, alias="streetId"),
):
    if has_any(min_price, max_price, city_id, property_type_id, district_id, street_id):
        properties = await service.search(min_price, max_price, city_id, property_type_id, district_id, street_id)
    else:
        properties = await service.find_all_for_table()
    return render(
        request,
        "properties.html",
        "Объекты недвижимости",
        properties=properties,
        property_types=await property_types.find_all(),
        countries=await geography.find_all_countries(),
        regions=await geography.find_all_regions(),
        cities=await geography.find_all_cities(),
        districts=await geography.find_all_districts(),
        streets=await geography.find_all_streets(),
        min_price=min_price,
        max_price=max_price,
        city_id=city_id,
        property_type_id=property_type_id,
        district_id=district_id,
        street_id=street_id,
    )


@router.post("/add")
async def add_property(request: Request, service: Properties):
    await service.save(await form_payload(request, PropertyCreate))
    return redirect_to("/properties")


@router.post("/update/{property_id}")
async def update_property(property_id: int, service: Properties, updates: dict[str, Any] = Body(...)):
    return done_or_404(await service.update(property_id, updates), "Property", property_id)


@router.api_route("/delete/{property_id}", methods=["DELETE", "POST"])
async def delete_property(property_id: int, service: Properties):
    return done_or_404(await service.delete_by_id(property_id), "Property", property_id)


@router.get("/report")
async def properties_report(service: Properties, exporter: CsvExport):
    return csv_response(exporter, await service.find_all_for_report(), PROPERTY_COLUMNS, "properties")
