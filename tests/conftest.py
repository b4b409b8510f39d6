"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from car_api.api.app import create_app
from car_api.dto import CreateCarRequest
from car_api.entities import CarEntity
from car_api.repositories.errors import NoRowsError, RowsAffectedError
from car_api.services import CarService


class FakeCarRepository:
    """In-memory CarRepository that records every call."""

    def __init__(self) -> None:
        self.rows: dict[int, CarEntity] = {}
        self.calls: list[str] = []
        self._next_id = 1
        self.healthy = True

    async def create(self, car: CarEntity) -> CarEntity:
        self.calls.append("create")
        stored = replace(car, id=self._next_id)
        self.rows[stored.id] = stored
        self._next_id += 1
        return stored

    async def get_by_id(self, car_id: int) -> CarEntity:
        self.calls.append("get_by_id")
        if car_id not in self.rows:
            raise NoRowsError()
        return self.rows[car_id]

    async def fetch(self) -> list[CarEntity]:
        self.calls.append("fetch")
        return list(self.rows.values())

    async def update(self, car: CarEntity) -> None:
        self.calls.append("update")
        if car.id not in self.rows:
            raise RowsAffectedError(0)
        self.rows[car.id] = car

    async def delete(self, car_id: int) -> None:
        self.calls.append("delete")
        if self.rows.pop(car_id, None) is None:
            raise RowsAffectedError(0)

    async def health_check(self) -> bool:
        return self.healthy


class FakeCacheStore:
    """In-memory CacheStore with expiry driven by a manual clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.entries: dict[str, tuple[str, float]] = {}
        self.set_calls: list[tuple[str, str, int]] = []
        self.healthy = True

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def get(self, key: str) -> str | None:
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        self.set_calls.append((key, value, ttl))
        self.entries[key] = (value, self.now + ttl)

    async def health_check(self) -> bool:
        return self.healthy


class StepClock:
    """Deterministic clock that moves forward one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def car_repository() -> FakeCarRepository:
    return FakeCarRepository()


@pytest.fixture
def cache_store() -> FakeCacheStore:
    return FakeCacheStore()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def service(car_repository, cache_store, clock) -> CarService:
    return CarService(repository=car_repository, cache=cache_store, timeout=1.0, clock=clock)


@pytest.fixture
def client(service) -> TestClient:
    """Test client serving the fake-backed service (lifespan is not started)."""
    return TestClient(create_app(car_service=service))


@pytest.fixture
def corolla_payload() -> dict:
    return {
        "make": "Toyota",
        "model": "Corolla",
        "package": "LE",
        "color": "Blue",
        "year": 2020,
        "category": "Sedan",
        "mileage": 5000,
        "price": 18000,
        "identification": "VIN123",
    }


@pytest.fixture
def corolla_request(corolla_payload) -> CreateCarRequest:
    return CreateCarRequest(**corolla_payload)
