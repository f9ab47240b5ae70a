"""REST endpoints for clients: /api/clients."""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from realestate.core.dependencies import Clients
from realestate.schemas import ClientCreate, ClientRead, CountResponse, IdResponse, MessageResponse

from .common import deleted_or_404, updated_or_404

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=list[ClientRead])
async def list_clients(service: Clients):
    return await service.find_all()


@router.get("/count", response_model=CountResponse)
async def count_clients(service: Clients):
    return CountResponse(count=await service.count())


@router.get("/search/by-lastname", response_model=list[ClientRead])
async def search_by_last_name(service: Clients, last_name: str = Query(alias="lastName")):
    return await service.find_by_last_name(last_name)


@router.get("/search/by-phone", response_model=ClientRead)
async def search_by_phone(service: Clients, phone: str = Query()):
    return await service.find_by_phone(phone)


@router.get("/search/by-email", response_model=ClientRead)
async def search_by_email(service: Clients, email: str = Query()):
    return await service.find_by_email(email)


@router.get("/search", response_model=list[ClientRead])
async def search_clients(
    service: Clients,
    last_name: str | None = Query(None, alias="lastName"),
    email: str | None = None,
    phone: str | None = None,
):
    return await service.search(last_name, email, phone)


@router.get("/{client_id}", response_model=ClientRead)
async def get_client(client_id: int, service: Clients):
    return await service.find_by_id(client_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_client(payload: ClientCreate, service: Clients):
    client_id = await service.save(payload)
    return IdResponse(id=client_id, message="Клиент успешно создан")


@router.put("/{client_id}", response_model=MessageResponse)
async def update_client(client_id: int, service: Clients, updates: dict[str, Any] = Body(...)):
    updated = await service.update(client_id, updates)
    return updated_or_404(updated, "Client", client_id, "Клиент успешно обновлен")


@router.delete("/{client_id}", response_model=MessageResponse)
async def delete_client(client_id: int, service: Clients):
    deleted = await service.delete_by_id(client_id)
    return deleted_or_404(deleted, "Client", client_id, "Клиент успешно удален")
