"""Shapeshift: map a source JSON value onto a target template by semantic key similarity."""

from __future__ import annotations

from shapeshift.core.exceptions import (
    ConfigurationError,
    EmbeddingCountMismatchError,
    EmbeddingDimensionError,
    ProviderError,
    ShapeshiftError,
)
from shapeshift.engine.flatten import flatten, unflatten
from shapeshift.engine.shapeshifter import Shapeshift
from shapeshift.engine.similarity import cosine_similarity
from shapeshift.models.result import Diagnostics, MatchDecision, ShapeshiftResult

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Diagnostics",
    "EmbeddingCountMismatchError",
    "EmbeddingDimensionError",
    "MatchDecision",
    "ProviderError",
    "Shapeshift",
    "ShapeshiftError",
    "ShapeshiftResult",
    "cosine_similarity",
    "flatten",
    "unflatten",
]
