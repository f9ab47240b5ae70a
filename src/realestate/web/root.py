"""Landing page."""

from fastapi import APIRouter, Request

from realestate.core.dependencies import Clients, Deals, Payments, Properties, Realtors

from .common import render

router = APIRouter(tags=["web"], include_in_schema=False)


@router.get("/")
async def index(
    request: Request,
    clients: Clients,
    realtors: Realtors,
    properties: Properties,
    deals: Deals,
    payments: Payments,
):
    counts = {
        "clients": await clients.count(),
        "realtors": await realtors.count(),
        "properties": await properties.count(),
        "deals": await deals.count(),
        "payments": await payments.count(),
    }
    return render(request, "index.html", "Агентство недвижимости", counts=counts, total_amount=await deals.total_amount())
