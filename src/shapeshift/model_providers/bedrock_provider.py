"""Bedrock embedding provider via boto3 ``bedrock-runtime``.

Titan text embedding models accept a single ``inputText`` per request, so a
batch is issued as one ``invoke_model`` call per text.
"""

from __future__ import annotations

import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shapeshift.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class BedrockEmbeddingProvider:
    """Production IEmbeddingProvider backed by Amazon Bedrock."""

    def __init__(self, model: str = "amazon.titan-embed-text-v2:0",
                 region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._model = model
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("bedrock-runtime", **kwargs)

    def embed(self, texts: list[str]) -> list[list[float]]:
        logger.debug("Requesting %d embeddings from Bedrock (model=%s)", len(texts), self._model)
        return [self._embed_one(text) for text in texts]

    def _embed_one(self, text: str) -> list[float]:
        try:
            resp = self._client.invoke_model(
                modelId=self._model,
                body=json.dumps({"inputText": text}),
                contentType="application/json",
                accept="application/json",
            )
        except (BotoCoreError, ClientError) as exc:
            raise ProviderError(f"Bedrock invoke_model failed for {text!r}: {exc}") from exc

        try:
            body = json.loads(resp["body"].read())
            return [float(x) for x in body["embedding"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(f"Invalid Bedrock embedding response for {text!r}: {exc}") from exc
