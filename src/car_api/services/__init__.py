"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> {Repository, Cache}
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from car_api.services import CarService

    service = CarService.create(repository=repo, cache=cache)
    service = CarService.create(repository=repo, cache=cache, timeout=5)
    ```
"""

from .car_service import CARS_CACHE_KEY, CARS_CACHE_TTL_SECONDS, CarService

__all__ = [
    "CARS_CACHE_KEY",
    "CARS_CACHE_TTL_SECONDS",
    "CarService",
]
