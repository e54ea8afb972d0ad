"""Mock embedding provider for local development and testing.

Returns canned vectors. No real embedding calls.
"""

from __future__ import annotations

# Five-dimensional fixture vectors covering a person/address vocabulary.
DEFAULT_VECTORS: dict[str, list[float]] = {
    "name": [0.9, 0.1, 0.0, 0.0, 0.0],
    "full_name": [0.9, 0.1, 0.0, 0.0, 0.0],
    "age": [0.0, 0.9, 0.1, 0.0, 0.0],
    "years_old": [0.0, 0.9, 0.1, 0.0, 0.0],
    "city": [0.0, 0.0, 0.9, 0.1, 0.0],
    "location.city": [0.0, 0.0, 0.9, 0.1, 0.0],
    "country": [0.0, 0.0, 0.1, 0.9, 0.0],
    "location.country": [0.0, 0.0, 0.1, 0.9, 0.0],
    "location": [0.0, 0.0, 0.7, 0.3, 0.0],
}

FALLBACK_VECTOR = [0.2, 0.2, 0.2, 0.2, 0.2]


class MockEmbeddingProvider:
    """IEmbeddingProvider implementation that returns deterministic vectors."""

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        fallback: list[float] | None = None,
    ) -> None:
        self._vectors = dict(DEFAULT_VECTORS if vectors is None else vectors)
        self._fallback = list(FALLBACK_VECTOR if fallback is None else fallback)
        self.calls: list[list[str]] = []

    def set_vector(self, text: str, vector: list[float]) -> None:
        """Register the vector returned for an exact text."""
        self._vectors[text] = list(vector)

    def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [list(self._vectors.get(text, self._fallback)) for text in texts]
