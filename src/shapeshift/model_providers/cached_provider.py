"""Embedding provider wrapper that caches vectors in an IVectorCache."""

from __future__ import annotations

import hashlib
import logging

from shapeshift.core.exceptions import EmbeddingCountMismatchError
from shapeshift.core.protocols import IEmbeddingProvider, IVectorCache

logger = logging.getLogger(__name__)


class CachingEmbeddingProvider:
    """IEmbeddingProvider that serves repeated texts from a cache.

    Misses are embedded in a single batch by the wrapped provider and written
    back with a TTL. Output order always matches input order.
    """

    CACHE_TTL = 86400  # 24 hours

    def __init__(self, provider: IEmbeddingProvider, cache: IVectorCache,
                 model: str = "", ttl: int | None = None) -> None:
        self._provider = provider
        self._cache = cache
        self._model = model
        self._ttl = self.CACHE_TTL if ttl is None else ttl

    def cache_key(self, text: str) -> str:
        digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
        return f"embedding:{self._model}:{digest}"

    def embed(self, texts: list[str]) -> list[list[float]]:
        vectors = self._cache.get_vectors([self.cache_key(text) for text in texts])
        misses = list(dict.fromkeys(t for t, v in zip(texts, vectors) if v is None))
        logger.debug("Embedding cache: %d hits, %d misses", len(texts) - vectors.count(None), len(misses))
        if not misses:
            return vectors  # type: ignore[return-value]

        embedded = self._provider.embed(misses)
        if len(embedded) != len(misses):
            raise EmbeddingCountMismatchError(len(misses), len(embedded))
        fresh = dict(zip(misses, embedded))
        self._cache.set_vectors({self.cache_key(t): v for t, v in fresh.items()}, self._ttl)
        return [fresh[t] if v is None else v for t, v in zip(texts, vectors)]
