"""Redis implementation of CacheStore.

Plain string GET/SET with per-key expiry; serialization is the caller's job.
"""

import logging

import redis.asyncio as redis

from car_api.config import get_redis_client

logger = logging.getLogger(__name__)


class RedisCacheRepository:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the protocol through structural typing - no
    explicit inheritance needed.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: asyncio Redis client. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults."""
        return cls()

    async def get(self, key: str) -> str | None:
        value = await self._client.get(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        await self._client.set(key, value, ex=ttl)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except Exception:
            logger.warning("Redis health check failed", exc_info=True)
            return False

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
