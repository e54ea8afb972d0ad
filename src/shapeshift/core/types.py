"""Type aliases used across the Shapeshift package."""

from __future__ import annotations

from typing import Any, Union

JsonValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]
FlatMap = dict[str, Any]
EmbeddingVector = list[float]
