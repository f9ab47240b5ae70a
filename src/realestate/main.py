"""
Application factory.

    uvicorn realestate.main:create_app --factory

`create_app(settings)` wires logging, the request-id middleware, the domain
exception handlers, the REST API under /api and the HTML pages at the root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from realestate import models  # noqa: F401  registers every table on Base.metadata
from realestate.api.v1 import api_router
from realestate.api.v1.error_handlers import register_exception_handlers
from realestate.config import Settings, get_settings
from realestate.core.logging import RequestIDMiddleware, setup_logging
from realestate.database import Base, get_engine
from realestate.utils.project_metadata import get_project_version
from realestate.web import web_router

logger = logging.getLogger(__name__)


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if settings.DB_CREATE_TABLES:
            async with get_engine().begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("db.tables.created")

        logger.info("app.startup", extra={"env": settings.ENV})
        yield

        await get_engine().dispose()
        logger.info("app.shutdown")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_TITLE,
        version=get_project_version(),
        lifespan=_lifespan(settings),
    )
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    app.include_router(api_router)
    app.include_router(web_router)
    return app

