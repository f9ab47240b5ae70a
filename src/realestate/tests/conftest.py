"""
Core pytest configuration for the entire test suite.

This module provides only the essential database setup and core utilities
that are needed across ALL types of tests (repositories, services, API, ...).

Domain fixtures (seeded reference data, entity factories, repositories,
services, the test client) live in:
- tests/test_fixtures/data_fixtures.py
- tests/test_fixtures/api_fixtures.py
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import os
import sys
import logging
from pathlib import Path
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Set the level for noisy third-party loggers at import time, before importing modules that
# might initialize them.
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from pytest import FixtureRequest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Import project modules AFTER the noisy logger levels are set.
from realestate import models  # noqa: F401  registers every table on Base.metadata
from realestate.config import get_settings
from realestate.database.base import Base
from realestate.database.session import build_engine
from realestate.core.logging.builder import setup_logging

# -------------------------------
# Load settings
# -------------------------------
settings = get_settings()
logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest):
    """
    Install application logging for the entire test session.

    dictConfig can drop pytest's capture handler from the root logger, so it is
    re-attached afterwards; `caplog.records` stays usable.
    """
    setup_logging(settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


def pytest_collection_modifyitems(items):
    """
    Run every async test on the session event loop.

    The engine fixture is session-scoped, so its connections belong to the
    session loop; a test on its own loop could not use them.
    """
    session_loop = pytest.mark.asyncio(loop_scope="session")
    for item in items:
        if item.get_closest_marker("asyncio") is not None:
            item.add_marker(session_loop)


# ------------------------------------------------------------------------------------------------
# Determining and Logging the Test Database URL for Tests
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    """Scheme, host, port and database name only; credentials are dropped."""
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url() -> str:
    """
    Determine the test database URL.

    1. `TEST_DATABASE_URL` environment variable (CI/CD override)
    2. The app's `DATABASE_URL` when `TESTING=true` and `TEST_POSTGRES_DB` is set
    3. A local SQLite file through aiosqlite
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url

    if settings.TESTING and settings.TEST_POSTGRES_DB:
        return settings.DATABASE_URL

    return "sqlite+aiosqlite:///./test_database.db"


TEST_DATABASE_URL = get_test_database_url()
logger.info(f"Using test DB: {safe_log_db_url(TEST_DATABASE_URL)}")

# ------------------------------------------------------------------------------------------------
# PATH PATCHING
# ------------------------------------------------------------------------------------------------

# Ensure 'src' on sys.path so `import realestate...` works without an install
SRC = Path(__file__).resolve().parents[2]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    # The sqlite driver manages transactions itself and never emits SAVEPOINT
    # correctly; take over BEGIN so nested transactions work.
    @event.listens_for(engine.sync_engine, "connect")
    def _no_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(TEST_DATABASE_URL, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    Transaction-per-test.

    Pattern:
      - acquire a connection and begin an outer transaction on it
      - bind an AsyncSession to the connection with
        `join_transaction_mode="create_savepoint"`, so the code under test
        commits and rolls back SAVEPOINTs instead of the outer transaction
      - roll back the outer transaction at the end, leaving the DB clean
    """
    async with async_engine.connect() as connection:
        transaction = await connection.begin()

        maker = async_sessionmaker(
            bind=connection,
            class_=AsyncSession,
            expire_on_commit=False,
            join_transaction_mode="create_savepoint",
        )
        session: AsyncSession = maker()

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


# Domain fixtures
from .test_fixtures.data_fixtures import (  # noqa: E402,F401
    reference_data,
    make_client,
    make_realtor,
    make_property,
    make_deal,
    make_payment,
)
from .test_fixtures.api_fixtures import (  # noqa: E402,F401
    stub_services,
    client_app,
    api_client,
)
