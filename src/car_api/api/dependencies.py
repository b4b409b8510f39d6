"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from car_api.config import create_db_pool, settings
from car_api.handlers import CarHandler
from car_api.repositories import PostgresCarRepository, RedisCacheRepository
from car_api.services import CarService

logger = logging.getLogger(__name__)


def get_car_service(request: Request) -> CarService:
    """Dependency injection for CarService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "car_service", None)
    if service is None:
        raise RuntimeError("CarService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> CarHandler:
    """Dependency injection for CarHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "car_handler", None)
    if handler is None:
        raise RuntimeError("CarHandler not initialized. Check lifespan setup.")
    return handler


def install_service(app: FastAPI, car_service: CarService) -> None:
    """Store the service and its handler in app.state."""
    app.state.car_service = car_service
    app.state.car_handler = CarHandler(car_service=car_service)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Repositories (PostgreSQL pool, Redis client)
    2. Service (business logic) - app.state.car_service
    3. Handler (HTTP endpoints) - app.state.car_handler

    If a service was installed before startup (tests, embedding), it is
    used as is and no backends are created.
    """
    if getattr(app.state, "car_service", None) is not None:
        yield
        return

    pool = await create_db_pool()
    repository = PostgresCarRepository(pool)
    await repository.ensure_schema()
    cache = RedisCacheRepository.create()

    car_service = CarService.create(repository=repository, cache=cache)
    install_service(app, car_service)

    logger.info("Car service initialized (timeout=%ss)", car_service.timeout)
    logger.info("Database: %s", settings.database_url.rsplit("@", 1)[-1])
    logger.info("Redis: %s", settings.redis_url)

    try:
        yield
    finally:
        del app.state.car_handler
        del app.state.car_service
        await cache.close()
        await repository.close()
        logger.info("Car service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CarHandler, Depends(get_handler)]
ServiceDep = Annotated[CarService, Depends(get_car_service)]
