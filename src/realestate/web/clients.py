"""Client pages: /clients."""

from typing import Any

from fastapi import APIRouter, Body, Query, Request

from realestate.core.dependencies import Clients, CsvExport
from realestate.schemas import ClientCreate
from realestate.services.csv_export import CLIENT_COLUMNS

from .common import csv_response, done_or_404, form_payload, has_any, redirect_to, render

router = APIRouter(prefix="/clients", tags=["web"], include_in_schema=False)


@router.get("")
async def clients_page(
    request: Request,
    service: Clients,
    last_name: str | None = Query(None, alias="lastName"),
    email: str | None = None,
    phone: str | None = None,
):
    if has_any(last_name, email, phone):
        clients = await service.search(last_name, email, phone)
    else:
        clients = await service.find_all()
    return render(
        request,
        "clients.html",
        "Клиенты",
        clients=clients,
        last_name=last_name,
        email=email,
        phone=phone,
    )


@router.post("/add")
async def add_client(request: Request, service: Clients):
    await service.save(await form_payload(request, ClientCreate))
    return redirect_to("/clients")


@router.post("/update/{client_id}")
async def update_client(client_id: int, service: Clients, updates: dict[str, Any] = Body(...)):
    return done_or_404(await service.update(client_id, updates), "Client", client_id)


@router.api_route("/delete/{client_id}", methods=["DELETE", "POST"])
async def delete_client(client_id: int, service: Clients):
    return done_or_404(await service.delete_by_id(client_id), "Client", client_id)


@router.get("/report")
async def clients_report(service: Clients, exporter: CsvExport):
    return csv_response(exporter, await service.find_all(), CLIENT_COLUMNS, "clients")
