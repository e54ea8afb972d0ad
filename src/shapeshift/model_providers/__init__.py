"""Embedding providers behind the IEmbeddingProvider protocol."""

from __future__ import annotations

from shapeshift.core.exceptions import ConfigurationError
from shapeshift.core.protocols import IEmbeddingProvider
from shapeshift.model_providers.bedrock_provider import BedrockEmbeddingProvider
from shapeshift.model_providers.cached_provider import CachingEmbeddingProvider
from shapeshift.model_providers.mock_provider import MockEmbeddingProvider
from shapeshift.model_providers.openai_provider import OpenAIEmbeddingProvider

PROVIDERS = ("mock", "openai", "bedrock")


def create_embedding_provider(
    provider: str,
    api_key: str = "",
    model: str = "",
    *,
    base_url: str = "https://api.openai.com/v1",
    region: str = "us-east-1",
    endpoint_url: str | None = None,
    timeout: float = 30.0,
) -> IEmbeddingProvider:
    """Build an embedding provider from its identifier.

    The credential and model identifier are passed through unexamined.

    Raises:
        ConfigurationError: If ``provider`` is not a known identifier.
    """
    name = provider.strip().lower()
    if name == "mock":
        return MockEmbeddingProvider()
    if name == "openai":
        return OpenAIEmbeddingProvider(
            api_key=api_key, model=model, base_url=base_url, timeout=timeout,
        )
    if name == "bedrock":
        kwargs: dict = {"region": region, "endpoint_url": endpoint_url}
        if model:
            kwargs["model"] = model
        return BedrockEmbeddingProvider(**kwargs)
    raise ConfigurationError(
        f"Unknown embedding provider {provider!r}; expected one of {', '.join(PROVIDERS)}"
    )


__all__ = [
    "BedrockEmbeddingProvider",
    "CachingEmbeddingProvider",
    "IEmbeddingProvider",
    "MockEmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "create_embedding_provider",
]
