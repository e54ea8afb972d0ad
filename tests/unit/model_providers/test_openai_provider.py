"""Unit tests for OpenAIEmbeddingProvider using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from shapeshift.core.exceptions import ProviderError
from shapeshift.model_providers.openai_provider import OpenAIEmbeddingProvider


def _provider(handler) -> OpenAIEmbeddingProvider:
    return OpenAIEmbeddingProvider(
        api_key="sk-test",
        model="text-embedding-3-small",
        base_url="https://llm.example.com/v1/",
        transport=httpx.MockTransport(handler),
    )


class TestEmbed:
    def test_sends_model_input_and_bearer_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": [
                {"index": 0, "embedding": [1, 0]},
                {"index": 1, "embedding": [0, 1]},
            ]})

        vectors = _provider(handler).embed(["name", "age"])
        assert vectors == [[1.0, 0.0], [0.0, 1.0]]
        assert seen["url"] == "https://llm.example.com/v1/embeddings"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"] == {"model": "text-embedding-3-small", "input": ["name", "age"]}

    def test_reorders_by_index(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": [
                {"index": 1, "embedding": [0.0, 1.0]},
                {"index": 0, "embedding": [1.0, 0.0]},
            ]})

        assert _provider(handler).embed(["a", "b"]) == [[1.0, 0.0], [0.0, 1.0]]

    def test_empty_batch_makes_no_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        assert _provider(handler).embed([]) == []


class TestErrorWrapping:
    def test_http_status_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, text="invalid api key")

        with pytest.raises(ProviderError, match="invalid api key"):
            _provider(handler).embed(["name"])

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        with pytest.raises(ProviderError, match="connection refused"):
            _provider(handler).embed(["name"])

    def test_malformed_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"unexpected": True})

        with pytest.raises(ProviderError, match="Invalid embedding response"):
            _provider(handler).embed(["name"])

    def test_non_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(ProviderError):
            _provider(handler).embed(["name"])
