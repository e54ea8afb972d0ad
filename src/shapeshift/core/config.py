"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class EmbeddingConfig(BaseSettings):
    """Embedding provider configuration."""

    model_config = {"env_prefix": "SHAPESHIFT_EMBEDDING_"}

    provider: Literal["mock", "openai", "bedrock"] = "mock"
    api_key: str = ""
    model: str = "text-embedding-3-small"
    base_url: str = "https://api.openai.com/v1"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    timeout: float = 30.0


class MatcherConfig(BaseSettings):
    """Matching engine configuration."""

    model_config = {"env_prefix": "SHAPESHIFT_MATCHER_"}

    similarity_threshold: float = 0.8


class CacheConfig(BaseSettings):
    """Embedding cache configuration."""

    model_config = {"env_prefix": "SHAPESHIFT_CACHE_"}

    enabled: bool = False
    ttl: int = 86400  # 24 hours


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "SHAPESHIFT_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SHAPESHIFT_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    embedding: EmbeddingConfig = EmbeddingConfig()
    matcher: MatcherConfig = MatcherConfig()
    cache: CacheConfig = CacheConfig()
    redis: RedisConfig = RedisConfig()
