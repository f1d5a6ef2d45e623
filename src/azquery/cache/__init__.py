"""Caching layer with Redis."""

from .client import AsyncRedisClient
from .decorators import cached
from .keys import CacheKeys

__all__ = [
    "AsyncRedisClient",
    "CacheKeys",
    "cached",
]
