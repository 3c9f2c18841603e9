import pytest
from fastapi.testclient import TestClient

from order_intake.config import settings
from order_intake.main import app
from order_intake.presentation.api import get_order_repository
from order_intake.infrastructure.repositories import SQLAlchemyOrderRepository
from conftest import FakeOrderRepository

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors(response):
    for header, value in CORS.items():
        assert response.headers[header] == value


def test_valid_order_is_received(client, repository, valid_payload):
    response = client.post("/order", json=valid_payload)

    assert response.status_code == 200
    assert response.json() == {"orderID": "order-1", "status": "Order received"}
    assert_cors(response)
    assert len(repository.orders) == 1
    assert repository.orders[0].company_name == "Acme"


def test_existing_brand_without_brand_name(client, repository, valid_payload):
    valid_payload.update(orderType="Existing Brand", brandName="", quantity="50")

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 400
    assert response.text == "brandName is required for Existing Brand orders"
    assert response.headers["content-type"].startswith("text/plain")
    assert repository.orders == []


def test_existing_brand_small_quantity(client, valid_payload):
    valid_payload.update(orderType="Existing Brand", brandName="Acme", quantity="50")

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 400
    assert response.text == "quantity must be at least 1000 for Existing Brand orders"


def test_bad_email(client, valid_payload):
    valid_payload["email"] = "bad-email"

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 400
    assert response.text == "invalid email format"


def test_missing_fields(client, repository):
    response = client.post("/order", json={"productType": "Flyer"})

    assert response.status_code == 400
    assert response.text == "missing required fields"
    assert repository.orders == []


def test_bad_delivery_time(client, valid_payload):
    valid_payload["deliveryTime"] = "2pm"

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 400
    assert response.text == "invalid delivery date or time format"


@pytest.mark.parametrize("body", [
    b"",
    b"{not json",
    b"[1, 2, 3]",
    b'{"quantity": 50}',
    b'{"termsAccepted": "yes"}',
])
def test_malformed_body(client, repository, body):
    response = client.post("/order", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.text == "Invalid JSON data"
    assert_cors(response)
    assert repository.orders == []


def test_client_id_and_created_at_are_ignored(client, repository, valid_payload):
    valid_payload.update(id="abc", createdAt="2000-01-01T00:00:00Z")

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 200
    assert response.json()["orderID"] == "order-1"
    assert repository.orders[0].id is None
    assert repository.orders[0].created_at.year != 2000


def test_get_is_not_allowed(client):
    response = client.get("/order")

    assert response.status_code == 405
    assert_cors(response)


def test_options_preflight_on_any_path(client):
    for path in ("/order", "/anything"):
        response = client.options(path)
        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)


def test_store_timeout_returns_500(valid_payload, monkeypatch):
    slow = FakeOrderRepository(delay=1.0)
    monkeypatch.setattr(settings, "STORE_TIMEOUT", 0.05)
    app.dependency_overrides[get_order_repository] = lambda: slow
    try:
        response = TestClient(app).post("/order", json=valid_payload)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.text == "Internal server error"
    assert "orderID" not in response.text


def test_store_failure_returns_500(valid_payload):
    app.dependency_overrides[get_order_repository] = lambda: FakeOrderRepository(fail=True)
    try:
        response = TestClient(app).post("/order", json=valid_payload)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.text == "Internal server error"


def test_null_optional_fields_are_accepted(client, repository, valid_payload):
    valid_payload.update(brandName=None, specialInstructions=None)

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 200
    assert response.json()["orderID"] == "order-1"
    assert repository.orders[0].brand_name == ""
    assert repository.orders[0].special_instructions == ""


def test_null_terms_accepted_is_false(client, repository, valid_payload):
    valid_payload["termsAccepted"] = None

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 200
    assert repository.orders[0].terms_accepted is False


def test_null_required_field_is_missing(client, repository, valid_payload):
    valid_payload["companyName"] = None

    response = client.post("/order", json=valid_payload)

    assert response.status_code == 400
    assert response.text == "missing required fields"
    assert repository.orders == []


@pytest.mark.parametrize("body", [b"null", b"  null\n"])
def test_null_body_is_empty_order(client, repository, body):
    response = client.post("/order", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.text == "missing required fields"
    assert repository.orders == []


def test_unexpected_store_error_returns_500_with_cors(valid_payload):
    class BrokenSession:
        async def __aenter__(self):
            raise RuntimeError("driver exploded")

        async def __aexit__(self, *exc_info):
            return False

    repository = SQLAlchemyOrderRepository(lambda: BrokenSession())
    app.dependency_overrides[get_order_repository] = lambda: repository
    try:
        response = TestClient(app).post("/order", json=valid_payload)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.text == "Internal server error"
    assert_cors(response)
