"""Realtor pages: /realtors."""

from typing import Any

from fastapi import APIRouter, Body, Query, Request

from realestate.core.dependencies import CsvExport, Realtors
from realestate.schemas import RealtorCreate
from realestate.services.csv_export import REALTOR_COLUMNS

from .common import csv_response, done_or_404, form_payload, has_any, redirect_to, render

router = APIRouter(prefix="/realtors", tags=["web"], include_in_schema=False)


@router.get("")
async def realtors_page(
    request: Request,
    service: Realtors,
    last_name: str | None = Query(None, alias="lastName"),
    email: str | None = None,
    phone: str | None = None,
    min_experience: int | None = Query(None, alias="minExperience"),
):
    if has_any(last_name, email, phone, min_experience):
        realtors = await service.search(last_name, email, phone, min_experience)
    else:
        realtors = await service.find_all()
    return render(
        request,
        "realtors.html",
        "Риелторы",
        realtors=realtors,
        last_name=last_name,
        email=email,
        phone=phone,
        min_experience=min_experience,
    )


@router.post("/add")
async def add_realtor(request: Request, service: Realtors):
    await service.save(await form_payload(request, RealtorCreate))
    return redirect_to("/realtors")


@router.post("/update/{realtor_id}")
async def update_realtor(realtor_id: int, service: Realtors, updates: dict[str, Any] = Body(...)):
    return done_or_404(await service.update(realtor_id, updates), "Realtor", realtor_id)


@router.api_route("/delete/{realtor_id}", methods=["DELETE", "POST"])
async def delete_realtor(realtor_id: int, service: Realtors):
    return done_or_404(await service.delete_by_id(realtor_id), "Realtor", realtor_id)


@router.get("/report")
async def realtors_report(service: Realtors, exporter: CsvExport):
    return csv_response(exporter, await service.find_all(), REALTOR_COLUMNS, "realtors")
