"""Key/value cache protocol.

Values are caller-serialized strings; the cache has no knowledge of their shape.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for key/value cache backends with per-key expiry."""

    async def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None on a miss."""
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""
        ...

    async def health_check(self) -> bool:
        """Check if the cache is reachable."""
        ...
