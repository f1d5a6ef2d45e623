"""Caching decorator for async methods."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300


def cached(
    key_builder: Callable[..., str],
    ttl: int | None = None,
):
    """
    Decorator for caching the results of async methods.

    The cache is read from ``self._cache``; when it is ``None`` the method
    is called directly. ``None`` results are never cached.

    Args:
        key_builder: Function taking the same arguments as the decorated
                    method (without ``self``) and returning a cache key.
        ttl: Time to live in seconds. Defaults to ``self._cache_ttl``.

    Usage:
        @cached(CacheKeys.search)
        async def _fetch(self, index_name: str, request: QueryRequest) -> dict:
            ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        async def wrapper(self, *args: P.args, **kwargs: P.kwargs) -> R:
            cache = getattr(self, "_cache", None)
            if cache is None:
                return await func(self, *args, **kwargs)

            key = key_builder(*args, **kwargs)

            cached_value = await cache.get(key)
            if cached_value is not None:
                logger.debug(f"Cache hit: {key}")
                return cached_value

            result = await func(self, *args, **kwargs)

            if result is not None:
                expiry = ttl if ttl is not None else getattr(self, "_cache_ttl", DEFAULT_TTL)
                await cache.set(key, result, ttl=expiry)

            return result

        return wrapper

    return decorator
