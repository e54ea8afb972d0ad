"""Dotted-path flattening and reconstruction of nested JSON-like values.

Only objects are descended into. Arrays and scalars are leaves and are stored
whole under the path that reached them.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from shapeshift.core.types import FlatMap

logger = logging.getLogger(__name__)

SEPARATOR = "."


def flatten(value: Any) -> FlatMap:
    """Flatten a nested value into an insertion-ordered ``{dotted_path: leaf}`` map.

    A non-object root is recorded under the empty key. Nested empty objects are
    kept as leaves so that ``unflatten(flatten(v)) == v`` holds for them too.
    """
    flat: FlatMap = {}
    _flatten_into(value, None, flat)
    return flat


def _flatten_into(value: Any, prefix: str | None, flat: FlatMap) -> None:
    # prefix is None only at the root; "" is a real (empty) member name
    if isinstance(value, dict) and (value or prefix is None):
        for key, child in value.items():
            path = str(key) if prefix is None else f"{prefix}{SEPARATOR}{key}"
            _flatten_into(child, path, flat)
    else:
        flat["" if prefix is None else prefix] = copy.deepcopy(value)


def unflatten(flat: FlatMap) -> dict[str, Any]:
    """Rebuild a nested object from a flat map."""
    result: dict[str, Any] = {}
    for key, value in flat.items():
        insert_nested(result, key, value)
    return result


def insert_nested(container: dict[str, Any], key: str, value: Any) -> None:
    """Set ``value`` at dotted ``key`` inside ``container``, creating objects on the way.

    Path collisions resolve last-write-wins: a scalar sitting where an object is
    needed is replaced, and so is an object sitting where a leaf is written.
    """
    parts = key.split(SEPARATOR)
    current = container
    for depth, part in enumerate(parts[:-1]):
        child = current.get(part)
        if not isinstance(child, dict):
            if part in current:
                logger.warning(
                    "Path collision at %r: replacing leaf %r with an object",
                    SEPARATOR.join(parts[: depth + 1]),
                    child,
                )
            child = {}
            current[part] = child
        current = child

    last = parts[-1]
    if isinstance(current.get(last), dict) and current[last]:
        logger.warning("Path collision at %r: overwriting object with a leaf", key)
    current[last] = value
