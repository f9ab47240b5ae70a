"""Server-rendered pages, mounted at the site root by the app factory."""

from fastapi import APIRouter

from . import clients, deals, payments, properties, realtors, reference, root

web_router = APIRouter()
web_router.include_router(root.router)
web_router.include_router(clients.router)
web_router.include_router(realtors.router)
web_router.include_router(properties.router)
web_router.include_router(deals.router)
web_router.include_router(payments.router)
web_router.include_router(reference.router)

__all__ = ["web_router"]
