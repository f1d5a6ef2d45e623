"""Async Redis client wrapper."""

from __future__ import annotations

import json
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError


class AsyncRedisClient:
    """Async Redis client storing JSON values."""

    def __init__(self, redis_url: str) -> None:
        self._redis_url = redis_url
        self._pool: aioredis.ConnectionPool | None = None
        self._redis: aioredis.Redis | None = None

    @property
    def is_connected(self) -> bool:
        return self._redis is not None

    async def connect(self) -> None:
        """
        Connect to Redis and check the server answers.

        Raises:
            redis.exceptions.RedisError: The server could not be reached
        """
        self._pool = aioredis.ConnectionPool.from_url(
            self._redis_url,
            decode_responses=True,
        )
        self._redis = aioredis.Redis(connection_pool=self._pool)
        try:
            await self._redis.ping()
        except RedisError:
            await self.close()
            raise

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis:
            await self._redis.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._redis = None
        self._pool = None

    async def get(self, key: str) -> Any | None:
        """Get a value, or None when missing or not connected."""
        if not self._redis:
            return None
        value = await self._redis.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    async def set(self, key: str, value: Any, ttl: int = 300) -> None:
        """Store a value with a TTL in seconds."""
        if not self._redis:
            return
        await self._redis.set(key, json.dumps(value, default=str), ex=ttl)

    async def delete_matching(self, pattern: str) -> int:
        """Delete every key matching a glob pattern, returning how many were removed."""
        if not self._redis:
            return 0
        deleted = 0
        async for key in self._redis.scan_iter(match=pattern):
            deleted += await self._redis.delete(key)
        return deleted

    async def __aenter__(self) -> AsyncRedisClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
