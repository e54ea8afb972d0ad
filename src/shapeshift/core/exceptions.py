"""Shapeshift exception hierarchy."""

from __future__ import annotations


class ShapeshiftError(Exception):
    """Base exception for all Shapeshift errors."""


class ProviderError(ShapeshiftError):
    """Embedding provider failed to return a batch."""


class EmbeddingCountMismatchError(ProviderError):
    """Provider returned a different number of vectors than texts requested."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Expected {expected} embeddings, provider returned {received}")


class EmbeddingDimensionError(ProviderError):
    """Provider returned vectors of differing dimensions."""

    def __init__(self, dimensions: set[int]) -> None:
        self.dimensions = dimensions
        super().__init__(f"Inconsistent embedding dimensions: {sorted(dimensions)}")


class ConfigurationError(ShapeshiftError):
    """Invalid engine or provider configuration."""


class CacheError(ShapeshiftError):
    """Cache backend operation failed."""
