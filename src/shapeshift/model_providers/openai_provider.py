"""OpenAI-compatible embedding provider over HTTP.

Works against any server exposing ``POST {base_url}/embeddings`` (OpenAI,
LiteLLM proxy, vLLM, Ollama's compatibility layer).
"""

from __future__ import annotations

import logging

import httpx

from shapeshift.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider:
    """Production IEmbeddingProvider backed by an OpenAI-compatible endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._url = base_url.rstrip("/") + "/embeddings"
        self._timeout = timeout
        self._transport = transport

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        payload = {"model": self._model, "input": texts}
        headers = {"Authorization": f"Bearer {self._api_key}"}
        logger.debug("Requesting %d embeddings from %s (model=%s)", len(texts), self._url, self._model)

        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = client.post(self._url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as exc:
                detail = ""
                if isinstance(exc, httpx.HTTPStatusError):
                    detail = exc.response.text
                message = f"Embedding request failed: {detail or str(exc)}"
                logger.error(message)
                raise ProviderError(message) from exc
            except ValueError as exc:
                raise ProviderError(f"Embedding response is not JSON: {exc}") from exc

        try:
            items = sorted(data["data"], key=lambda item: item["index"])
            return [[float(x) for x in item["embedding"]] for item in items]
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(f"Invalid embedding response format: {exc}") from exc
