"""Car service for core business logic.

This service orchestrates car operations by coordinating the relational
repository (source of truth) and the key/value cache (list snapshot).
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from car_api.config import settings
from car_api.dto import CarRequest
from car_api.entities import CarEntity
from car_api.errors import NotFoundError, ServiceTimeoutError
from car_api.protocols import CacheStore, CarRepository
from car_api.repositories.errors import NoRowsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The full Fetch result is cached under one key with a short expiry.
# Writers never invalidate it, so readers may see data up to the TTL old.
CARS_CACHE_KEY = "cars"
CARS_CACHE_TTL_SECONDS = 30

_CAR_LIST = TypeAdapter(list[CarEntity])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CarService:
    """Core car orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - CarRepository: PostgreSQL in production, in-memory fakes in tests
    - CacheStore: Redis in production, in-memory fakes in tests

    Every public operation runs under its own deadline (``timeout``
    seconds). On expiry the in-flight store or cache call is cancelled
    and ``ServiceTimeoutError`` is raised.

    Example:
        ```python
        service = CarService.create(
            repository=PostgresCarRepository(pool),
            cache=RedisCacheRepository.create(),
        )
        car = await service.create_car(CreateCarRequest(...))
        ```
    """

    def __init__(
        self,
        repository: CarRepository,
        cache: CacheStore,
        timeout: float | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the car service.

        Args:
            repository: Relational store for car records (required).
            cache: Key/value cache for the list snapshot (required).
            timeout: Per-operation deadline in seconds. Defaults to settings.
            clock: Source of the current time for created/updated stamps.
        """
        self._repository = repository
        self._cache = cache
        self._timeout = timeout or settings.context_timeout
        self._clock = clock

    @classmethod
    def create(
        cls,
        repository: CarRepository,
        cache: CacheStore,
        timeout: float | None = None,
    ) -> "CarService":
        """Factory method to create CarService with sensible defaults.

        Args:
            repository: Relational store for car records (required).
            cache: Key/value cache (required).
            timeout: Per-operation deadline in seconds. If None, uses settings.

        Returns:
            Configured CarService instance
        """
        return cls(repository=repository, cache=cache, timeout=timeout)

    async def _with_deadline(self, operation: str, work: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(work, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.warning("%s exceeded deadline of %ss", operation, self._timeout)
            raise ServiceTimeoutError(f"{operation} timed out after {self._timeout}s") from e

    async def _get_existing(self, car_id: int) -> CarEntity:
        try:
            return await self._repository.get_by_id(car_id)
        except NoRowsError as e:
            raise NotFoundError("car not found") from e

    async def create_car(self, request: CarRequest) -> CarEntity:
        """Persist a new car built from the request.

        Both timestamps are set to the same current time. The list cache
        is left untouched.

        Args:
            request: Validated create request

        Returns:
            The stored car with its assigned id
        """
        now = self._clock()
        car = CarEntity(
            id=0,
            make=request.make,
            model=request.model,
            package=request.package,
            color=request.color,
            year=request.year,
            category=request.category,
            mileage=request.mileage,
            price=request.price,
            identification=request.identification,
            created_at=now,
            updated_at=now,
        )
        return await self._with_deadline("create car", self._repository.create(car))

    async def get_car(self, car_id: int) -> CarEntity:
        """Get a car by id, bypassing the cache.

        Raises:
            NotFoundError: If no car has this id
        """
        return await self._with_deadline("get car", self._get_existing(car_id))

    async def list_cars(self) -> list[CarEntity]:
        """List all cars using the cache-aside pattern.

        Business logic:
        1. Read the snapshot under the ``cars`` key; a decodable value is returned as is
        2. On a miss, a cache error or undecodable content, query the repository
        3. Write the fresh result back with a 30s TTL, ignoring cache failures

        Returns:
            All cars (possibly up to the TTL out of date)
        """
        return await self._with_deadline("list cars", self._list_cars())

    async def _list_cars(self) -> list[CarEntity]:
        cached = await self._read_snapshot()
        if cached is not None:
            return cached

        cars = await self._repository.fetch()
        await self._write_snapshot(cars)
        return cars

    async def _read_snapshot(self) -> list[CarEntity] | None:
        try:
            raw = await self._cache.get(CARS_CACHE_KEY)
        except Exception:
            logger.warning("Cache read failed for key %r, falling back to store", CARS_CACHE_KEY, exc_info=True)
            return None

        if raw is None:
            logger.debug("Cache miss for key %r", CARS_CACHE_KEY)
            return None

        try:
            cars = _CAR_LIST.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding undecodable cache content for key %r", CARS_CACHE_KEY)
            return None

        logger.debug("Cache hit for key %r (%d cars)", CARS_CACHE_KEY, len(cars))
        return cars

    async def _write_snapshot(self, cars: list[CarEntity]) -> None:
        try:
            payload = _CAR_LIST.dump_json(cars).decode()
            await self._cache.set(CARS_CACHE_KEY, payload, CARS_CACHE_TTL_SECONDS)
        except Exception:
            logger.warning("Cache write failed for key %r", CARS_CACHE_KEY, exc_info=True)

    async def update_car(self, car_id: int, request: CarRequest) -> CarEntity:
        """Replace every mutable field of an existing car.

        Business logic:
        1. Load the current record (missing -> NotFoundError)
        2. Overwrite all fields from the request and stamp updated_at
        3. Write it back through the repository

        Returns:
            The car as written

        Raises:
            NotFoundError: If no car has this id
        """
        return await self._with_deadline("update car", self._update_car(car_id, request))

    async def _update_car(self, car_id: int, request: CarRequest) -> CarEntity:
        current = await self._get_existing(car_id)
        car = replace(
            current,
            make=request.make,
            model=request.model,
            package=request.package,
            color=request.color,
            year=request.year,
            category=request.category,
            mileage=request.mileage,
            price=request.price,
            identification=request.identification,
            updated_at=max(self._clock(), current.updated_at),
        )
        await self._repository.update(car)
        return car

    async def delete_car(self, car_id: int) -> None:
        """Delete a car after checking it exists.

        Raises:
            NotFoundError: If no car has this id
        """
        await self._with_deadline("delete car", self._delete_car(car_id))

    async def _delete_car(self, car_id: int) -> None:
        await self._get_existing(car_id)
        await self._repository.delete(car_id)

    async def is_healthy(self) -> dict[str, bool]:
        """Check both backends.

        A backend that does not answer within the deadline counts as down.

        Returns:
            Dict with ``database`` and ``cache`` reachability
        """
        database, cache = await asyncio.gather(
            self._check_backend("database", self._repository.health_check()),
            self._check_backend("cache", self._cache.health_check()),
        )
        return {"database": database, "cache": cache}

    async def _check_backend(self, name: str, check: Awaitable[bool]) -> bool:
        try:
            return await asyncio.wait_for(check, timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("%s health check exceeded deadline of %ss", name, self._timeout)
            return False

    @property
    def timeout(self) -> float:
        """Get the per-operation deadline in seconds."""
        return self._timeout

    @property
    def repository(self) -> CarRepository:
        """Get the underlying repository (for testing)."""
        return self._repository

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache (for testing)."""
        return self._cache
