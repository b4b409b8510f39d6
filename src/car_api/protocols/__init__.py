"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so the service can run against asyncpg and
Redis in production and against in-memory fakes in tests.
"""

from .cache_store import CacheStore
from .car_repository import CarRepository

__all__ = [
    "CacheStore",
    "CarRepository",
]
