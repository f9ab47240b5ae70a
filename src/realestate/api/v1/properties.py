"""REST endpoints for properties: /api/properties."""

from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Body, Query, status

from realestate.core.dependencies import Properties
from realestate.schemas import (
    CountResponse,
    IdResponse,
    MessageResponse,
    PropertyCreate,
    PropertyRead,
    PropertyTableRow,
    PropertyWithDetails,
)

from .common import deleted_or_404, updated_or_404

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=list[PropertyRead])
async def list_properties(service: Properties):
    return await service.find_all()


@router.get("/count", response_model=CountResponse)
async def count_properties(service: Properties):
    return CountResponse(count=await service.count())


@router.get("/with-details", response_model=list[PropertyWithDetails])
async def list_with_details(service: Properties):
    return await service.find_all_with_details()


@router.get("/for-table", response_model=list[PropertyTableRow])
async def list_for_table(service: Properties):
    return await service.find_all_for_table()


@router.get("/search/by-price-range", response_model=list[PropertyRead])
async def search_by_price_range(
    service: Properties,
    min_price: Decimal = Query(alias="minPrice"),
    max_price: Decimal = Query(alias="maxPrice"),
):
    return await service.find_by_price_range(min_price, max_price)


@router.get("/search/by-price-range-with-details", response_model=list[PropertyWithDetails])
async def search_by_price_range_with_details(
    service: Properties,
    min_price: Decimal = Query(alias="minPrice"),
    max_price: Decimal = Query(alias="maxPrice"),
):
    return await service.find_by_price_range_with_details(min_price, max_price)


@router.get("/search/by-city/{city_id}", response_model=list[PropertyRead])
async def search_by_city(city_id: int, service: Properties):
    return await service.find_by_city_id(city_id)


@router.get("/search/by-city/{city_id}/with-details", response_model=list[PropertyWithDetails])
async def search_by_city_with_details(city_id: int, service: Properties):
    return await service.find_by_city_id_with_details(city_id)


@router.get("/search/by-type/{property_type_id}", response_model=list[PropertyRead])
async def search_by_type(property_type_id: int, service: Properties):
    return await service.find_by_property_type_id(property_type_id)


@router.get("/search/by-type/{property_type_id}/with-details", response_model=list[PropertyWithDetails])
async def search_by_type_with_details(property_type_id: int, service: Properties):
    return await service.find_by_property_type_id_with_details(property_type_id)


@router.get("/search", response_model=list[PropertyTableRow])
async def search_properties(
    service: Properties,
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    city_id: int | None = Query(None, alias="cityId"),
    property_type_id: int | None = Query(None, alias="propertyTypeId"),
    district_id: int | None = Query(None, alias="districtId"),
    street_id: int | None = Query(None, alias="streetId"),
):
    return await service.search(min_price, max_price, city_id, property_type_id, district_id, street_id)


@router.get("/{property_id}", response_model=PropertyRead)
async def get_property(property_id: int, service: Properties):
    return await service.find_by_id(property_id)


@router.get("/{property_id}/with-details", response_model=PropertyWithDetails)
async def get_property_with_details(property_id: int, service: Properties):
    return await service.find_by_id_with_details(property_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_property(payload: PropertyCreate, service: Properties):
    property_id = await service.save(payload)
    return IdResponse(id=property_id, message="Объект недвижимости успешно создан")


@router.put("/{property_id}", response_model=MessageResponse)
async def update_property(property_id: int, service: Properties, updates: dict[str, Any] = Body(...)):
    updated = await service.update(property_id, updates)
    return updated_or_404(updated, "Property", property_id, "Объект недвижимости успешно обновлен")


@router.delete("/{property_id}", response_model=MessageResponse)
async def delete_property(property_id: int, service: Properties):
    deleted = await service.delete_by_id(property_id)
    return deleted_or_404(deleted, "Property", property_id, "Объект недвижимости успешно удален")
