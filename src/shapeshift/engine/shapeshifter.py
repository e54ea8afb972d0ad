"""Shapeshift engine: reshape a source value into a target template by key similarity.

Matching is greedy and single-pass. Target keys are visited in traversal
order. Each one claims its most similar source key if the score clears the
threshold and no earlier target claimed that key. There is no fallback to the
next-best source key, so results depend on target key order.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any

from shapeshift.core.config import AppSettings
from shapeshift.core.exceptions import (
    ConfigurationError,
    EmbeddingCountMismatchError,
    EmbeddingDimensionError,
    ProviderError,
)
from shapeshift.core.protocols import IEmbeddingProvider
from shapeshift.core.types import JsonValue
from shapeshift.engine.flatten import flatten, insert_nested
from shapeshift.engine.similarity import best_match
from shapeshift.model_providers import CachingEmbeddingProvider, create_embedding_provider
from shapeshift.models.result import Diagnostics, MatchDecision, ShapeshiftResult
from shapeshift.persistence import create_cache

logger = logging.getLogger(__name__)


class Shapeshift:
    """Semantic schema translator.

    Configuration is fixed at construction. Calls keep all working state in
    locals, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        embedding_client: str,
        api_key: str,
        embedding_model: str,
        similarity_threshold: float,
        *,
        provider: IEmbeddingProvider | None = None,
    ) -> None:
        if isinstance(similarity_threshold, bool) or not isinstance(similarity_threshold, (int, float)):
            raise ConfigurationError(f"similarity_threshold must be a number, got {similarity_threshold!r}")
        if not math.isfinite(similarity_threshold):
            raise ConfigurationError(f"similarity_threshold must be finite, got {similarity_threshold!r}")

        self._embedding_client = embedding_client
        self._api_key = api_key
        self._embedding_model = embedding_model
        self._similarity_threshold = float(similarity_threshold)
        if provider is None:
            provider = create_embedding_provider(embedding_client, api_key, embedding_model)
        self._provider = provider

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> Shapeshift:
        """Build an engine (and its provider, optionally cached) from settings."""
        if settings is None:
            settings = AppSettings()

        emb = settings.embedding
        provider = create_embedding_provider(
            emb.provider,
            emb.api_key,
            emb.model,
            base_url=emb.base_url,
            region=emb.region,
            endpoint_url=emb.endpoint_url,
            timeout=emb.timeout,
        )
        cache = create_cache(settings)
        if cache is not None:
            provider = CachingEmbeddingProvider(
                provider, cache, model=f"{emb.provider}:{emb.model}", ttl=settings.cache.ttl,
            )

        return cls(
            emb.provider,
            emb.api_key,
            emb.model,
            settings.matcher.similarity_threshold,
            provider=provider,
        )

    @property
    def embedding_client(self) -> str:
        return self._embedding_client

    @property
    def embedding_model(self) -> str:
        return self._embedding_model

    @property
    def similarity_threshold(self) -> float:
        return self._similarity_threshold

    @property
    def provider(self) -> IEmbeddingProvider:
        return self._provider

    # ---- public API ----

    def shapeshift(self, source: JsonValue, target: JsonValue) -> ShapeshiftResult:
        """Reshape ``source`` into the structure of ``target``.

        Raises:
            ProviderError: If either embedding batch fails. No partial result.
        """
        flat_source = flatten(source)
        flat_target = flatten(target)
        source_keys = list(flat_source)
        target_keys = list(flat_target)
        logger.debug("Flattened source into %d keys, target into %d keys", len(source_keys), len(target_keys))

        source_embeddings = self._embed(source_keys)
        target_embeddings = self._embed(target_keys)
        return self._assemble(flat_source, source_keys, target_keys, source_embeddings, target_embeddings)

    async def ashapeshift(self, source: JsonValue, target: JsonValue) -> ShapeshiftResult:
        """Async :meth:`shapeshift` that requests both embedding batches concurrently."""
        flat_source = flatten(source)
        flat_target = flatten(target)
        source_keys = list(flat_source)
        target_keys = list(flat_target)

        source_embeddings, target_embeddings = await asyncio.gather(
            asyncio.to_thread(self._embed, source_keys),
            asyncio.to_thread(self._embed, target_keys),
        )
        return self._assemble(flat_source, source_keys, target_keys, source_embeddings, target_embeddings)

    # ---- internals ----

    def _embed(self, keys: list[str]) -> list[list[float]]:
        if not keys:
            return []
        try:
            vectors = self._provider.embed(keys)
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(f"Embedding provider {self._embedding_client!r} failed: {exc}") from exc

        if len(vectors) != len(keys):
            raise EmbeddingCountMismatchError(len(keys), len(vectors))
        logger.debug("Received %d embeddings", len(vectors))
        return [list(v) for v in vectors]

    def _assemble(
        self,
        flat_source: dict[str, Any],
        source_keys: list[str],
        target_keys: list[str],
        source_embeddings: list[list[float]],
        target_embeddings: list[list[float]],
    ) -> ShapeshiftResult:
        dimensions = {len(v) for v in source_embeddings} | {len(v) for v in target_embeddings}
        if len(dimensions) > 1:
            raise EmbeddingDimensionError(dimensions)

        transformed: dict[str, Any] = {}
        used: set[str] = set()
        decisions: list[MatchDecision] = []

        for target_key, target_embedding in zip(target_keys, target_embeddings):
            decision = self._decide(target_key, target_embedding, source_keys, source_embeddings, used)
            value = None
            if decision.matched:
                used.add(decision.source_key)
                value = flat_source[decision.source_key]
            insert_nested(transformed, target_key, value)
            decisions.append(decision)

        logger.info(
            "Shapeshift matched %d of %d target keys (threshold=%.2f)",
            len(used), len(target_keys), self._similarity_threshold,
        )
        return ShapeshiftResult(
            result=transformed,
            diagnostics=Diagnostics(
                source_keys=source_keys,
                target_keys=target_keys,
                source_embeddings=source_embeddings,
                target_embeddings=target_embeddings,
                decisions=decisions,
            ),
        )

    def _decide(
        self,
        target_key: str,
        target_embedding: list[float],
        source_keys: list[str],
        source_embeddings: list[list[float]],
        used: set[str],
    ) -> MatchDecision:
        best = best_match(target_embedding, source_embeddings)
        if best is None:
            logger.debug("No source keys for target key %r", target_key)
            return MatchDecision(target_key=target_key, status="no_source")

        index, score = best
        source_key = source_keys[index]
        if score < self._similarity_threshold:
            logger.debug("No match for target key %r (best %r, score=%.4f)", target_key, source_key, score)
            status = "below_threshold"
        elif source_key in used:
            logger.debug("Source key %r already used, target key %r left empty", source_key, target_key)
            status = "already_used"
        else:
            logger.debug("Matched source key %r to target key %r (score=%.4f)", source_key, target_key, score)
            status = "matched"
        return MatchDecision(target_key=target_key, source_key=source_key, score=score, status=status)
