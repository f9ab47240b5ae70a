"""REST endpoints for the deal type and property type lookups."""

from fastapi import APIRouter, Query

from realestate.core.dependencies import DealTypes, PropertyTypes
from realestate.schemas import DealTypeRead, PropertyTypeRead

deal_types_router = APIRouter(prefix="/deal-types", tags=["reference"])
property_types_router = APIRouter(prefix="/property-types", tags=["reference"])


@deal_types_router.get("", response_model=list[DealTypeRead])
async def list_deal_types(service: DealTypes):
    return await service.find_all()


@deal_types_router.get("/search/by-name", response_model=DealTypeRead)
async def deal_type_by_name(service: DealTypes, name: str = Query()):
    return await service.find_by_name(name)


@deal_types_router.get("/{deal_type_id}", response_model=DealTypeRead)
async def get_deal_type(deal_type_id: int, service: DealTypes):
    return await service.find_by_id(deal_type_id)


@property_types_router.get("", response_model=list[PropertyTypeRead])
async def list_property_types(service: PropertyTypes):
    return await service.find_all()


@property_types_router.get("/search/by-name", response_model=PropertyTypeRead)
async def property_type_by_name(service: PropertyTypes, name: str = Query()):
    return await service.find_by_name(name)


@property_types_router.get("/{property_type_id}", response_model=PropertyTypeRead)
async def get_property_type(property_type_id: int, service: PropertyTypes):
    return await service.find_by_id(property_type_id)
