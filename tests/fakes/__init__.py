"""Shared test doubles: in-memory vector cache, mock and failing embedding providers."""

from __future__ import annotations

from shapeshift.model_providers.mock_provider import MockEmbeddingProvider
from shapeshift.persistence.memory_backend import MemoryVectorCache


class FailingEmbeddingProvider:
    """IEmbeddingProvider that always raises ``exc``."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc
        self.calls: list[list[str]] = []

    def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        raise self._exc


class ShortBatchProvider:
    """IEmbeddingProvider that drops the last vector of every batch."""

    def embed(self, texts: list[str]) -> list[list[float]]:
        return [[1.0, 0.0] for _ in texts[:-1]]


__all__ = [
    "FailingEmbeddingProvider",
    "MemoryVectorCache",
    "MockEmbeddingProvider",
    "ShortBatchProvider",
]
