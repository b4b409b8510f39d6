"""Repository layer for data access.

This layer hides the external stores (PostgreSQL, Redis) behind the
protocols in ``car_api.protocols``. Repositories report raw store
conditions (``NoRowsError``, ``RowsAffectedError``); they know nothing
about HTTP or not-found semantics.
"""

from car_api.protocols import CacheStore, CarRepository

from .errors import NoRowsError, RowsAffectedError
from .postgres_car_repository import PostgresCarRepository
from .redis_cache_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "CarRepository",
    "NoRowsError",
    "RowsAffectedError",
    "PostgresCarRepository",
    "RedisCacheRepository",
]
