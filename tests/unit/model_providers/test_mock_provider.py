"""Tests for MockEmbeddingProvider and the provider factory."""

from __future__ import annotations

import pytest

from shapeshift.core.exceptions import ConfigurationError
from shapeshift.core.protocols import IEmbeddingProvider
from shapeshift.model_providers import (
    BedrockEmbeddingProvider,
    MockEmbeddingProvider,
    OpenAIEmbeddingProvider,
    create_embedding_provider,
)
from shapeshift.model_providers.mock_provider import FALLBACK_VECTOR


class TestMockEmbeddingProvider:
    def test_satisfies_protocol(self):
        assert isinstance(MockEmbeddingProvider(), IEmbeddingProvider)

    def test_preserves_order_and_length(self):
        provider = MockEmbeddingProvider()
        vectors = provider.embed(["age", "name", "unknown"])
        assert vectors == [
            [0.0, 0.9, 0.1, 0.0, 0.0],
            [0.9, 0.1, 0.0, 0.0, 0.0],
            FALLBACK_VECTOR,
        ]

    def test_set_vector_overrides(self):
        provider = MockEmbeddingProvider()
        provider.set_vector("name", [1.0, 0.0, 0.0, 0.0, 0.0])
        assert provider.embed(["name"]) == [[1.0, 0.0, 0.0, 0.0, 0.0]]

    def test_returned_vectors_are_independent_copies(self):
        provider = MockEmbeddingProvider()
        provider.embed(["name"])[0][0] = 42.0
        assert provider.embed(["name"])[0][0] == 0.9

    def test_records_calls(self):
        provider = MockEmbeddingProvider()
        provider.embed(["a", "b"])
        provider.embed([])
        assert provider.calls == [["a", "b"], []]


class TestCreateEmbeddingProvider:
    def test_mock(self):
        assert isinstance(create_embedding_provider("mock"), MockEmbeddingProvider)

    def test_identifier_is_case_insensitive(self):
        assert isinstance(create_embedding_provider(" Mock "), MockEmbeddingProvider)

    def test_openai(self):
        provider = create_embedding_provider("openai", "sk-test", "text-embedding-3-small")
        assert isinstance(provider, OpenAIEmbeddingProvider)

    def test_bedrock(self):
        provider = create_embedding_provider("bedrock", region="us-west-2")
        assert isinstance(provider, BedrockEmbeddingProvider)

    def test_unknown_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown embedding provider"):
            create_embedding_provider("word2vec-on-a-floppy")
