"""Pluggable embedding-vector caches behind the IVectorCache protocol."""

from __future__ import annotations

from shapeshift.core.config import AppSettings
from shapeshift.core.protocols import IVectorCache
from shapeshift.persistence.memory_backend import MemoryVectorCache
from shapeshift.persistence.redis_backend import RedisVectorCache


def create_cache(settings: AppSettings | None = None) -> IVectorCache | None:
    """Create the embedding cache from application settings.

    Returns:
        A Redis cache when caching is enabled, otherwise None.
    """
    if settings is None:
        settings = AppSettings()

    if not settings.cache.enabled:
        return None

    return RedisVectorCache.from_config(settings.redis)


__all__ = ["IVectorCache", "MemoryVectorCache", "RedisVectorCache", "create_cache"]
