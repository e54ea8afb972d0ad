"""Shapeshift result and diagnostics models."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

MatchStatus = Literal["matched", "below_threshold", "already_used", "no_source"]


class MatchDecision(BaseModel):
    """Outcome of matching a single target key."""

    target_key: str
    source_key: Optional[str] = None  # best candidate, even when rejected
    score: Optional[float] = None
    status: MatchStatus

    @property
    def matched(self) -> bool:
        return self.status == "matched"


class Diagnostics(BaseModel):
    """How a result was derived: keys, embeddings and per-target decisions."""

    source_keys: list[str] = Field(default_factory=list)
    target_keys: list[str] = Field(default_factory=list)
    source_embeddings: list[list[float]] = Field(default_factory=list)
    target_embeddings: list[list[float]] = Field(default_factory=list)
    decisions: list[MatchDecision] = Field(default_factory=list)

    @property
    def assignments(self) -> dict[str, str | None]:
        """Target key -> source key for accepted matches, ``None`` otherwise."""
        return {
            d.target_key: d.source_key if d.matched else None
            for d in self.decisions
        }


class ShapeshiftResult(BaseModel):
    """Target-shaped output plus diagnostics."""

    result: Any = None
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)

    def to_payload(self) -> dict[str, Any]:
        """Serialize as ``{"result": ..., "debug_info": {...}}``."""
        return {
            "result": self.result,
            "debug_info": self.diagnostics.model_dump(
                include={"source_keys", "target_keys", "source_embeddings", "target_embeddings"}
            ),
        }
