"""Protocol interfaces for Shapeshift abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from shapeshift.core.types import EmbeddingVector


# ---------------------------------------------------------------------------
# Embedding Provider
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmbeddingProvider(Protocol):
    """Batch text-to-vector capability (mock, OpenAI-compatible, Bedrock).

    Returns one vector per input text, in input order.
    """

    def embed(self, texts: list[str]) -> list[EmbeddingVector]: ...


# ---------------------------------------------------------------------------
# Persistence: Vector Cache
# ---------------------------------------------------------------------------

@runtime_checkable
class IVectorCache(Protocol):
    """Keyed embedding-vector cache (Redis or in-memory).

    Batch lookups return one entry per key, ``None`` for misses.
    """

    def get_vectors(self, keys: list[str]) -> list[EmbeddingVector | None]: ...

    def set_vectors(self, vectors: dict[str, EmbeddingVector], ttl: int) -> None: ...

    def delete(self, key: str) -> None: ...
