"""Deal pages: /deals."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Query, Request

from realestate.core.dependencies import Clients, CsvExport, Deals, DealTypes, Properties, Realtors
from realestate.schemas import DealCreate
from realestate.services.csv_export import DEAL_COLUMNS

from .common import csv_response, done_or_404, form_payload, has_any, redirect_to, render

router = APIRouter(prefix="/deals", tags=["web"], include_in_schema=False)


@router.get("")
async def deals_page(
    request: Request,
    service: Deals,
    clients: Clients,
    realtors: Realtors,
    properties: Properties,
    deal_types: DealTypes,
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    realtor_id: int | None = Query(None, alias="realtorId"),
    client_id: int | None = Query(None, alias="clientId"),
    deal_type_id: int | None = Query(None, alias="dealTypeId"),
):
    if has_any(start_date, end_date, realtor_id, client_id, deal_type_id):
        deals = await service.search(start_date, end_date, realtor_id, client_id, deal_type_id)
    else:
        deals = await service.find_all_for_table()
    return render(
        request,
        "deals.html",
        "Сделки",
        deals=deals,
        clients=await clients.find_all(),
        realtors=await realtors.find_all(),
        properties=await properties.find_all_for_table(),
        deal_types=await deal_types.find_all(),
        start_date=start_date,
        end_date=end_date,
        realtor_id=realtor_id,
        client_id=client_id,
        deal_type_id=deal_type_id,
    )


@router.post("/add")
async def add_deal(request: Request, service: Deals):
    await service.save(await form_payload(request, DealCreate))
    return redirect_to("/deals")


@router.post("/update/{deal_id}")
async def update_deal(deal_id: int, service: Deals, updates: dict[str, Any] = Body(...)):
    return done_or_404(await service.update(deal_id, updates), "Deal", deal_id)


@router.api_route("/delete/{deal_id}", methods=["DELETE", "POST"])
async def delete_deal(deal_id: int, service: Deals):
    return done_or_404(await service.delete_by_id(deal_id), "Deal", deal_id)


@router.get("/report")
async def deals_report(service: Deals, exporter: CsvExport):
    return csv_response(exporter, await service.find_all_for_report(), DEAL_COLUMNS, "deals")
