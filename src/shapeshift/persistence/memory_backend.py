"""In-memory vector cache for unit tests and single-process use."""

from __future__ import annotations


class MemoryVectorCache:
    """Dict-backed IVectorCache. TTLs are recorded but never expire entries."""

    def __init__(self) -> None:
        self._store: dict[str, list[float]] = {}
        self.ttls: dict[str, int] = {}

    def get_vectors(self, keys: list[str]) -> list[list[float] | None]:
        return [list(self._store[k]) if k in self._store else None for k in keys]

    def set_vectors(self, vectors: dict[str, list[float]], ttl: int) -> None:
        for key, vector in vectors.items():
            self._store[key] = list(vector)
            self.ttls[key] = ttl

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
        self.ttls.pop(key, None)

    def __len__(self) -> int:
        return len(self._store)
