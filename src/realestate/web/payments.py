"""Payment pages: /payments."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Query, Request

from realestate.core.dependencies import CsvExport, Deals, Payments
from realestate.schemas import PaymentCreate
from realestate.services.csv_export import PAYMENT_COLUMNS

from .common import csv_response, done_or_404, form_payload, has_any, redirect_to, render

router = APIRouter(prefix="/payments", tags=["web"], include_in_schema=False)


@router.get("")
async def payments_page(
    request: Request,
    service: Payments,
    deals: Deals,
    deal_id: int | None = Query(None, alias="dealId"),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
):
    if has_any(deal_id, start_date, end_date):
        payments = await service.search(deal_id, start_date, end_date)
    else:
        payments = await service.find_all_with_details()
    return render(
        request,
        "payments.html",
        "Платежи",
        payments=payments,
        deals=await deals.find_all_for_table(),
        deal_id=deal_id,
        start_date=start_date,
        end_date=end_date,
    )


@router.post("/add")
async def add_payment(request: Request, service: Payments):
    await service.save(await form_payload(request, PaymentCreate))
    return redirect_to("/payments")


@router.post("/update/{payment_id}")
async def update_payment(payment_id: int, service: Payments, updates: dict[str, Any] = Body(...)):
    return done_or_404(await service.update(payment_id, updates), "Payment", payment_id)


@router.api_route("/delete/{payment_id}", methods=["DELETE", "POST"])
async def delete_payment(payment_id: int, service: Payments):
    return done_or_404(await service.delete_by_id(payment_id), "Payment", payment_id)


@router.get("/report")
async def payments_report(service: Payments, exporter: CsvExport):
    return csv_response(exporter, await service.find_all_for_report(), PAYMENT_COLUMNS, "payments")
