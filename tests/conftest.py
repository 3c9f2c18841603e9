import asyncio
import pytest
from fastapi.testclient import TestClient

from order_intake.main import app
from order_intake.presentation.api import get_order_repository
from order_intake.application.interfaces import OrderRepository
from order_intake.domain.exceptions import PersistenceError


class FakeOrderRepository(OrderRepository):
    """Хранилище в памяти вместо БД"""

    def __init__(self, delay: float = 0.0, fail: bool = False):
        self.orders = []
        self._delay = delay
        self._fail = fail

    async def create(self, order):
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._fail:
            raise PersistenceError("connection refused")
        order_id = f"order-{len(self.orders) + 1}"
        self.orders.append(order)
        return order_id

    async def ping(self):
        pass


@pytest.fixture
def valid_payload():
    return {
        "productType": "Flyer",
        "subOption": "A4",
        "orderType": "New Brand",
        "quantity": "50",
        "size": "A4",
        "deliveryDate": "2025-03-10",
        "deliveryTime": "14:30",
        "companyName": "Acme",
        "email": "a@b.com",
        "phoneNumber": "555",
        "address": "1 Main St",
        "termsAccepted": True,
    }


@pytest.fixture
def repository():
    return FakeOrderRepository()


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_order_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
