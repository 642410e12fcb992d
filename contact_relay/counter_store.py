"""Key-value store holding the per-client submission counters."""

from typing import Protocol

from redis.asyncio import Redis

from .redis import redis


class CounterStore(Protocol):
    async def get(self, key: str) -> str | None:
        ...

    async def put(self, key: str, value: str, ttl: int) -> None:
        ...


class RedisCounterStore:
    def __init__(self, connection: Redis) -> None:
        self._redis = connection

    async def get(self, key: str) -> str | None:
        value: str | None = await self._redis.get(key)
        return value

    async def put(self, key: str, value: str, ttl: int) -> None:
        await self._redis.setex(key, ttl, value)


def get_counter_store() -> CounterStore | None:
    """Return the configured counter store, or None if rate limiting is disabled."""

    if redis is None:
        return None
    return RedisCounterStore(redis)
