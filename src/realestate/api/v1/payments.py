"""REST endpoints for payments: /api/payments."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Query, status

from realestate.core.dependencies import Payments
from realestate.schemas import IdResponse, MessageResponse, PaymentCreate, PaymentRead, PaymentTableRow

from .common import deleted_or_404, updated_or_404

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=list[PaymentRead])
async def list_payments(service: Payments):
    return await service.find_all()


@router.get("/with-details", response_model=list[PaymentTableRow])
async def list_with_details(service: Payments):
    return await service.find_all_with_details()


@router.get("/deal/{deal_id}", response_model=list[PaymentRead])
async def payments_by_deal(deal_id: int, service: Payments):
    return await service.find_by_deal_id(deal_id)


@router.get("/search", response_model=list[PaymentTableRow])
async def search_payments(
    service: Payments,
    deal_id: int | None = Query(None, alias="dealId"),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
):
    return await service.search(deal_id, start_date, end_date)


@router.get("/{payment_id}", response_model=PaymentRead)
async def get_payment(payment_id: int, service: Payments):
    return await service.find_by_id(payment_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(payload: PaymentCreate, service: Payments):
    payment_id = await service.save(payload)
    return IdResponse(id=payment_id, message="Платеж успешно создан")


@router.put("/{payment_id}", response_model=MessageResponse)
async def update_payment(payment_id: int, service: Payments, updates: dict[str, Any] = Body(...)):
    updated = await service.update(payment_id, updates)
    return updated_or_404(updated, "Payment", payment_id, "Платеж успешно обновлен")


@router.delete("/{payment_id}", response_model=MessageResponse)
async def delete_payment(payment_id: int, service: Payments):
    deleted = await service.delete_by_id(payment_id)
    return deleted_or_404(deleted, "Payment", payment_id, "Платеж успешно удален")
