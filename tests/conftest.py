"""Shared test fixtures."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from gateway_facade.engine.facade import GatewayFacade
from gateway_facade.main import create_app
from gateway_facade.models.request import Credentials
from gateway_facade.providers.fake_provider import FakeGatewayClient, FakeRecord


@pytest.fixture
def credentials():
    return Credentials(
        environment="sandbox",
        merchant_id="test_merchant",
        public_key="test_public",
        private_key="test_private",
    )


@pytest.fixture
def plans():
    return [
        FakeRecord(id="basic", attributes={"name": "Basic", "price": Decimal("9.99"), "billing_frequency": 1}),
        FakeRecord(id="pro", attributes={"name": "Pro", "price": Decimal("29.00"), "billing_frequency": 1}),
        FakeRecord(id="annual", attributes={"name": "Annual", "price": Decimal("290.00"), "billing_frequency": 12}),
    ]


@pytest.fixture
def fake_client(plans):
    return FakeGatewayClient(plans=plans)


@pytest.fixture
def facade(credentials, fake_client):
    return GatewayFacade.initialize(credentials, client=fake_client)


@pytest.fixture
def customer_id(facade, fake_client):
    """Id of a customer already in the fake vault."""
    result = fake_client.create_customer({"id": "cust_001", "first_name": "Ada", "last_name": "Lovelace"})
    return result.customer.id


@pytest.fixture
def api(facade):
    """TestClient wired to the fake-backed facade (lifespan not run)."""
    app = create_app()
    app.state.facade = facade
    return TestClient(app)
