"""
Tests for the car HTTP API.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from car_api.api.app import create_app
from car_api.services import CarService


def test_root(client):
    """Test liveness endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "i am alive"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": True, "cache": True}


def test_health_unhealthy(client, cache_store):
    cache_store.healthy = False

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_create_then_get(client, corolla_payload):
    response = client.post("/api/v1/cars", json=corolla_payload)
    assert response.status_code == 200
    assert response.json() == {"message": "car created"}

    response = client.get("/api/v1/cars/1")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == 1
    for field, value in corolla_payload.items():
        assert data[field] == value
    assert data["created_at"] == data["updated_at"]
    assert data["created_at"].startswith("2024-01-15T10:30:00")


def test_create_with_zero_year_is_bad_request(client, car_repository, corolla_payload):
    response = client.post("/api/v1/cars", json={**corolla_payload, "year": 0})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "invalid_input"
    assert error["details"] == {"year": "cannot be blank"}
    assert car_repository.calls == []


def test_create_with_missing_fields_lists_them(client):
    response = client.post("/api/v1/cars", json={"make": "Toyota"})

    assert response.status_code == 400
    assert "make" not in response.json()["error"]["details"]
    assert "identification" in response.json()["error"]["details"]


@pytest.mark.parametrize(
    "body",
    [b"", b"{not json", b"[]", b'{"make": "Toyota", "year": "twenty"}'],
)
def test_malformed_body_is_unprocessable(client, car_repository, body):
    response = client.post("/api/v1/cars", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "unprocessable_entity"
    assert car_repository.calls == []


@pytest.mark.parametrize(
    "field, value",
    [
        ("year", "2020"),
        ("year", True),
        ("mileage", 5000.0),
        ("price", "18000"),
        ("make", 123),
        ("mileage", 2**31),
        ("price", -(2**31) - 1),
    ],
)
def test_wrong_typed_or_oversized_field_is_unprocessable(client, car_repository, corolla_payload, field, value):
    response = client.post("/api/v1/cars", json={**corolla_payload, field: value})

    assert response.status_code == 422
    assert field in response.json()["error"]["details"]
    assert car_repository.calls == []


def test_largest_integer_column_value_is_accepted(client, corolla_payload):
    response = client.post("/api/v1/cars", json={**corolla_payload, "mileage": 2**31 - 1})

    assert response.status_code == 200


def test_get_missing_car(client):
    response = client.get("/api/v1/cars/999999")

    assert response.status_code == 404
    assert response.json() == {"error": {"code": "not_found", "message": "car not found"}}


def test_non_numeric_id_is_not_found(client):
    assert client.get("/api/v1/cars/abc").status_code == 404
    assert client.delete("/api/v1/cars/abc").status_code == 404


@pytest.mark.parametrize("raw_id", ["99999999999999999999", str(2**63), str(-(2**63) - 1)])
def test_id_outside_int64_is_not_found(client, car_repository, corolla_payload, raw_id):
    url = f"/api/v1/cars/{raw_id}"

    responses = [client.get(url), client.put(url, json=corolla_payload), client.delete(url)]

    for response in responses:
        assert response.status_code == 404
        assert response.json() == {"error": {"code": "not_found", "message": "car not found"}}
    assert car_repository.calls == []


def test_list_cars(client, corolla_payload):
    assert client.get("/api/v1/cars").json() == {"data": []}

    client.post("/api/v1/cars", json=corolla_payload)

    # still served from the cached empty snapshot
    assert client.get("/api/v1/cars").json() == {"data": []}


def test_list_cars_after_expiry(client, cache_store, corolla_payload):
    client.post("/api/v1/cars", json=corolla_payload)
    client.get("/api/v1/cars")
    cache_store.advance(30)
    client.post("/api/v1/cars", json={**corolla_payload, "identification": "VIN456"})
    cache_store.advance(30)

    response = client.get("/api/v1/cars")

    assert response.status_code == 200
    assert [car["identification"] for car in response.json()["data"]] == ["VIN123", "VIN456"]


def test_update(client, car_repository, corolla_payload):
    client.post("/api/v1/cars", json=corolla_payload)

    response = client.put("/api/v1/cars/1", json={**corolla_payload, "color": "Red", "price": 17000})

    assert response.status_code == 200
    assert response.json() == {"message": "car updated"}
    data = client.get("/api/v1/cars/1").json()["data"]
    assert data["color"] == "Red"
    assert data["price"] == 17000
    assert data["updated_at"] > data["created_at"]


def test_update_missing_car(client, corolla_payload):
    response = client.put("/api/v1/cars/5", json=corolla_payload)

    assert response.status_code == 404


def test_update_validates_before_lookup(client, car_repository, corolla_payload):
    response = client.put("/api/v1/cars/5", json={**corolla_payload, "make": ""})

    assert response.status_code == 400
    assert car_repository.calls == []


def test_delete_twice(client, corolla_payload):
    client.post("/api/v1/cars", json=corolla_payload)

    first = client.delete("/api/v1/cars/1")
    second = client.delete("/api/v1/cars/1")

    assert first.status_code == 200
    assert first.json() == {"message": "car deleted"}
    assert second.status_code == 404


def test_store_failure_is_internal_error(client, car_repository):
    car_repository.fetch = AsyncMock(side_effect=RuntimeError("connection refused"))

    response = client.get("/api/v1/cars")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "internal_error"
    assert "connection refused" not in response.text


def test_timeout_is_internal_error(car_repository, cache_store):
    async def slow_get_by_id(car_id):
        await asyncio.sleep(5)

    car_repository.get_by_id = slow_get_by_id
    service = CarService(repository=car_repository, cache=cache_store, timeout=0.05)
    client = TestClient(create_app(car_service=service))

    response = client.get("/api/v1/cars/1")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "timeout"


def test_request_id_header(client):
    generated = client.get("/")
    echoed = client.get("/", headers={"X-Request-ID": "abc123"})

    assert len(generated.headers["X-Request-ID"]) == 32
    assert echoed.headers["X-Request-ID"] == "abc123"


def test_missing_service_raises():
    client = TestClient(create_app())

    with pytest.raises(RuntimeError, match="not initialized"):
        client.get("/api/v1/cars")
