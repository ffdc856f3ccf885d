"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.po_payment.domain.models import Order, PaymentMethod


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def example_methods() -> list[PaymentMethod]:
    return [
        PaymentMethod(id="PUNKTY", discount=15, limit=10000),
        PaymentMethod(id="mZysk", discount=10, limit=18000),
        PaymentMethod(id="BosBankrut", discount=5, limit=20000),
    ]


@pytest.fixture
def example_orders() -> list[Order]:
    return [
        Order(id="ORDER1", value=10000, promotions=("mZysk",)),
        Order(id="ORDER2", value=20000, promotions=("BosBankrut",)),
        Order(id="ORDER3", value=15000, promotions=("mZysk", "BosBankrut")),
        Order(id="ORDER4", value=5000),
    ]
