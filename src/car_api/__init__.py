"""Car API - CRUD service for cars with a cache-aside list endpoint.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CarRepository, CacheStore)
    - repositories: Data access implementations (PostgreSQL, Redis)
    - services: Business logic (CarService)
    - handlers: HTTP endpoint handlers (CarHandler)
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

For HTTP API:
    ```python
    from car_api.api.app import app
    ```
"""

from car_api.config import get_redis_client, settings
from car_api.dto import CreateCarRequest, UpdateCarRequest
from car_api.entities import CarEntity
from car_api.errors import (
    CarApiError,
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    ServiceTimeoutError,
    UnprocessableEntityError,
)
from car_api.handlers import CarHandler
from car_api.protocols import CacheStore, CarRepository
from car_api.repositories import PostgresCarRepository, RedisCacheRepository
from car_api.services import CarService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CarRepository",
    "CacheStore",
    # Services (business logic)
    "CarService",
    # Handlers (HTTP)
    "CarHandler",
    # Repositories (data access)
    "PostgresCarRepository",
    "RedisCacheRepository",
    # Entities (domain models)
    "CarEntity",
    # DTOs (API contracts)
    "CreateCarRequest",
    "UpdateCarRequest",
    # Errors
    "ErrorKind",
    "CarApiError",
    "InvalidInputError",
    "UnprocessableEntityError",
    "NotFoundError",
    "ServiceTimeoutError",
]
