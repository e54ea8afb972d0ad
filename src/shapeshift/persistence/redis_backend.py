"""Redis embedding-vector cache implementing IVectorCache.

Vectors are stored as JSON arrays under caller-supplied keys. Lookups use a
single MGET and writes a single pipelined batch of SETEX commands.
"""

from __future__ import annotations

import json

import redis

from shapeshift.core.config import RedisConfig
from shapeshift.core.exceptions import CacheError


class RedisVectorCache:
    """Production IVectorCache backed by Redis."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0) -> None:
        self._client = redis.Redis(host=host, port=port, db=db, decode_responses=True)

    @classmethod
    def from_config(cls, config: RedisConfig) -> RedisVectorCache:
        return cls(host=config.host, port=config.port, db=config.db)

    def get_vectors(self, keys: list[str]) -> list[list[float] | None]:
        if not keys:
            return []
        try:
            raw = self._client.mget(keys)
        except redis.RedisError as exc:
            raise CacheError(f"Redis MGET failed for {len(keys)} keys: {exc}") from exc

        vectors: list[list[float] | None] = []
        for key, value in zip(keys, raw):
            if value is None:
                vectors.append(None)
                continue
            try:
                vectors.append([float(x) for x in json.loads(value)])
            except (TypeError, ValueError) as exc:
                raise CacheError(f"Corrupt cached vector at key={key!r}: {exc}") from exc
        return vectors

    def set_vectors(self, vectors: dict[str, list[float]], ttl: int) -> None:
        if not vectors:
            return
        try:
            with self._client.pipeline(transaction=False) as pipe:
                for key, vector in vectors.items():
                    pipe.setex(key, ttl, json.dumps(vector))
                pipe.execute()
        except redis.RedisError as exc:
            raise CacheError(f"Redis SETEX batch failed for {len(vectors)} keys: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as exc:
            raise CacheError(f"Redis DELETE failed for key={key!r}: {exc}") from exc
