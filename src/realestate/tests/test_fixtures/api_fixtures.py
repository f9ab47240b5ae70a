"""
Fixtures for the REST and web route tests.

Routes are exercised through `TestClient` with every service provider
overridden by an `AsyncMock` built from the real service class, so route
tests check HTTP wiring (paths, query aliases, status codes, payload shape,
error translation) without a database. Service behavior has its own tests.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from realestate.config import Settings
from realestate.core import dependencies as deps
from realestate.main import create_app
from realestate.services import (
    ClientService,
    DealService,
    DealTypeService,
    GeographyService,
    PaymentService,
    PropertyService,
    PropertyTypeService,
    RealtorService,
)

# stub name -> (provider overridden, service class the stub mimics)
STUBBED_PROVIDERS = {
    "clients": (deps.get_client_service, ClientService),
    "realtors": (deps.get_realtor_service, RealtorService),
    "properties": (deps.get_property_service, PropertyService),
    "deals": (deps.get_deal_service, DealService),
    "payments": (deps.get_payment_service, PaymentService),
    "deal_types": (deps.get_deal_type_service, DealTypeService),
    "property_types": (deps.get_property_type_service, PropertyTypeService),
    "geography": (deps.get_geography_service, GeographyService),
}


@pytest.fixture
def stub_services() -> SimpleNamespace:
    """
    One AsyncMock per service; tests set return values or side effects:

        stub_services.clients.find_by_id.return_value = client
        stub_services.realtors.delete_by_id.side_effect = BusinessRuleViolationError(...)
    """
    return SimpleNamespace(**{name: AsyncMock(spec=cls) for name, (_, cls) in STUBBED_PROVIDERS.items()})


def _provide(stub):
    def provider():
        return stub
    return provider


@pytest.fixture
def client_app(stub_services: SimpleNamespace) -> FastAPI:
    app = create_app(Settings(DB_CREATE_TABLES=False, LOG_TO_STDOUT=True))
    for name, (provider, _) in STUBBED_PROVIDERS.items():
        app.dependency_overrides[provider] = _provide(getattr(stub_services, name))
    return app


@pytest.fixture
def api_client(client_app: FastAPI):
    # server exceptions become 500 responses, as they would for a real caller
    with TestClient(client_app, raise_server_exceptions=False) as client:
        yield client
