"""REST endpoints for deals: /api/deals."""

from datetime import date
from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Body, Query, status
from pydantic import BaseModel

from realestate.core.dependencies import Deals
from realestate.schemas import (
    CountResponse,
    DealCreate,
    DealRead,
    DealTableRow,
    DealWithDetails,
    IdResponse,
    MessageResponse,
)

from .common import deleted_or_404, updated_or_404

router = APIRouter(prefix="/deals", tags=["deals"])


class TotalAmountResponse(BaseModel):
    total: Decimal


@router.get("", response_model=list[DealRead])
async def list_deals(service: Deals):
    return await service.find_all()


@router.get("/count", response_model=CountResponse)
async def count_deals(service: Deals):
    return CountResponse(count=await service.count())


@router.get("/total-amount", response_model=TotalAmountResponse)
async def total_amount(service: Deals):
    return TotalAmountResponse(total=await service.total_amount())


@router.get("/with-details", response_model=list[DealWithDetails])
async def list_with_details(service: Deals):
    return await service.find_all_with_details()


@router.get("/for-table", response_model=list[DealTableRow])
async def list_for_table(service: Deals):
    return await service.find_all_for_table()


@router.get("/search/by-date", response_model=list[DealRead])
async def search_by_date(service: Deals, deal_date: date = Query(alias="date")):
    return await service.find_by_date(deal_date)


@router.get("/search/by-date-with-details", response_model=list[DealWithDetails])
async def search_by_date_with_details(service: Deals, deal_date: date = Query(alias="date")):
    return await service.find_by_date_with_details(deal_date)


@router.get("/search/by-date-range", response_model=list[DealRead])
async def search_by_date_range(
    service: Deals,
    start_date: date = Query(alias="startDate"),
    end_date: date = Query(alias="endDate"),
):
    return await service.find_by_date_range(start_date, end_date)


@router.get("/search/by-date-range-with-details", response_model=list[DealWithDetails])
async def search_by_date_range_with_details(
    service: Deals,
    start_date: date = Query(alias="startDate"),
    end_date: date = Query(alias="endDate"),
):
    return await service.find_by_date_range_with_details(start_date, end_date)


@router.get("/search/by-realtor/{realtor_id}", response_model=list[DealRead])
async def search_by_realtor(realtor_id: int, service: Deals):
    return await service.find_by_realtor_id(realtor_id)


@router.get("/search/by-realtor/{realtor_id}/with-details", response_model=list[DealWithDetails])
async def search_by_realtor_with_details(realtor_id: int, service: Deals):
    return await service.find_by_realtor_id_with_details(realtor_id)


@router.get("/search/by-client/{client_id}", response_model=list[DealRead])
async def search_by_client(client_id: int, service: Deals):
    return await service.find_by_client_id(client_id)


@router.get("/search/by-client/{client_id}/with-details", response_model=list[DealWithDetails])
async def search_by_client_with_details(client_id: int, service: Deals):
    return await service.find_by_client_id_with_details(client_id)


@router.get("/search/by-property/{property_id}", response_model=list[DealRead])
async def search_by_property(property_id: int, service: Deals):
    return await service.find_by_property_id(property_id)


@router.get("/search/by-type/{deal_type_id}", response_model=list[DealRead])
async def search_by_type(deal_type_id: int, service: Deals):
    return await service.find_by_deal_type_id(deal_type_id)


@router.get("/search/by-cost-range", response_model=list[DealRead])
async def search_by_cost_range(
    service: Deals,
    min_cost: Decimal = Query(alias="minCost"),
    max_cost: Decimal = Query(alias="maxCost"),
):
    return await service.find_by_cost_range(min_cost, max_cost)


@router.get("/search", response_model=list[DealTableRow])
async def search_deals(
    service: Deals,
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    realtor_id: int | None = Query(None, alias="realtorId"),
    client_id: int | None = Query(None, alias="clientId"),
    deal_type_id: int | None = Query(None, alias="dealTypeId"),
):
    return await service.search(start_date, end_date, realtor_id, client_id, deal_type_id)


@router.get("/{deal_id}", response_model=DealRead)
async def get_deal(deal_id: int, service: Deals):
    return await service.find_by_id(deal_id)


@router.get("/{deal_id}/with-details", response_model=DealWithDetails)
async def get_deal_with_details(deal_id: int, service: Deals):
    return await service.find_by_id_with_details(deal_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_deal(payload: DealCreate, service: Deals):
    deal_id = await service.save(payload)
    return IdResponse(id=deal_id, message="Сделка успешно создана")


@router.put("/{deal_id}", response_model=MessageResponse)
async def update_deal(deal_id: int, service: Deals, updates: dict[str, Any] = Body(...)):
    updated = await service.update(deal_id, updates)
    return updated_or_404(updated, "Deal", deal_id, "Сделка успешно обновлена")


@router.delete("/{deal_id}", response_model=MessageResponse)
async def delete_deal(deal_id: int, service: Deals):
    deleted = await service.delete_by_id(deal_id)
    return deleted_or_404(deleted, "Deal", deal_id, "Сделка успешно удалена")
