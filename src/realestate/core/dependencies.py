"""
FastAPI dependency providers.

Every request gets its own session (`get_async_session`) and fresh service
objects built on it. Tests override either the session dependency or a
service provider through `app.dependency_overrides`.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from realestate.database.session import get_async_session
from realestate.services import (
    ClientService,
    CsvExportService,
    DealService,
    DealTypeService,
    GeographyService,
    PaymentService,
    PropertyService,
    PropertyTypeService,
    RealtorService,
)

DbSession = Annotated[AsyncSession, Depends(get_async_session)]


def get_client_service(db: DbSession) -> ClientService:
    return ClientService(db)


def get_realtor_service(db: DbSession) -> RealtorService:
    return RealtorService(db)


def get_property_service(db: DbSession) -> PropertyService:
    return PropertyService(db)


def get_deal_service(db: DbSession) -> DealService:
    return DealService(db)


def get_payment_service(db: DbSession) -> PaymentService:
    return PaymentService(db)


def get_deal_type_service(db: DbSession) -> DealTypeService:
    return DealTypeService(db)


def get_property_type_service(db: DbSession) -> PropertyTypeService:
    return PropertyTypeService(db)


def get_geography_service(db: DbSession) -> GeographyService:
    return GeographyService(db)


def get_csv_export_service() -> CsvExportService:
    return CsvExportService()


Clients = Annotated[ClientService, Depends(get_client_service)]
Realtors = Annotated[RealtorService, Depends(get_realtor_service)]
Properties = Annotated[PropertyService, Depends(get_property_service)]
Deals = Annotated[DealService, Depends(get_deal_service)]
Payments = Annotated[PaymentService, Depends(get_payment_service)]
DealTypes = Annotated[DealTypeService, Depends(get_deal_type_service)]
PropertyTypes = Annotated[PropertyTypeService, Depends(get_property_type_service)]
Geography = Annotated[GeographyService, Depends(get_geography_service)]
CsvExport = Annotated[CsvExportService, Depends(get_csv_export_service)]
