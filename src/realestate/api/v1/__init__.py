"""REST API, mounted under /api by the app factory."""

from fastapi import APIRouter

from . import clients, deals, geography, payments, properties, realtors, reference

api_router = APIRouter(prefix="/api")
api_router.include_router(clients.router)
api_router.include_router(realtors.router)
api_router.include_router(properties.router)
api_router.include_router(deals.router)
api_router.include_router(payments.router)
api_router.include_router(reference.deal_types_router)
api_router.include_router(reference.property_types_router)
api_router.include_router(geography.router)

__all__ = ["api_router"]
