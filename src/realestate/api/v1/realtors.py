"""REST endpoints for realtors: /api/realtors."""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from realestate.core.dependencies import Realtors
from realestate.schemas import CountResponse, IdResponse, MessageResponse, RealtorCreate, RealtorRead

from .common import deleted_or_404, updated_or_404

router = APIRouter(prefix="/realtors", tags=["realtors"])


@router.get("", response_model=list[RealtorRead])
async def list_realtors(service: Realtors):
    return await service.find_all()


@router.get("/count", response_model=CountResponse)
async def count_realtors(service: Realtors):
    return CountResponse(count=await service.count())


@router.get("/search/by-lastname", response_model=list[RealtorRead])
async def search_by_last_name(service: Realtors, last_name: str = Query(alias="lastName")):
    return await service.find_by_last_name(last_name)


@router.get("/search/by-phone", response_model=RealtorRead)
async def search_by_phone(service: Realtors, phone: str = Query()):
    return await service.find_by_phone(phone)


@router.get("/search/by-email", response_model=RealtorRead)
async def search_by_email(service: Realtors, email: str = Query()):
    return await service.find_by_email(email)


@router.get("/search/by-experience", response_model=list[RealtorRead])
async def search_by_experience(service: Realtors, min_experience: int = Query(alias="minExperience")):
    return await service.find_by_experience_at_least(min_experience)


@router.get("/search", response_model=list[RealtorRead])
async def search_realtors(
    service: Realtors,
    last_name: str | None = Query(None, alias="lastName"),
    email: str | None = None,
    phone: str | None = None,
    min_experience: int | None = Query(None, alias="minExperience"),
):
    return await service.search(last_name, email, phone, min_experience)


@router.get("/{realtor_id}", response_model=RealtorRead)
async def get_realtor(realtor_id: int, service: Realtors):
    return await service.find_by_id(realtor_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_realtor(payload: RealtorCreate, service: Realtors):
    realtor_id = await service.save(payload)
    return IdResponse(id=realtor_id, message="Риелтор успешно создан")


@router.put("/{realtor_id}", response_model=MessageResponse)
async def update_realtor(realtor_id: int, service: Realtors, updates: dict[str, Any] = Body(...)):
    updated = await service.update(realtor_id, updates)
    return updated_or_404(updated, "Realtor", realtor_id, "Риелтор успешно обновлен")


@router.delete("/{realtor_id}", response_model=MessageResponse)
async def delete_realtor(realtor_id: int, service: Realtors):
    deleted = await service.delete_by_id(realtor_id)
    return deleted_or_404(deleted, "Realtor", realtor_id, "Риелтор успешно удален")
