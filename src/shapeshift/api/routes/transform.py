"""Shapeshift endpoint: reshape a source document into a target template."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from shapeshift.core.exceptions import ProviderError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shapeshift"])


class ShapeshiftRequest(BaseModel):
    """Source document and target template."""

    source: Any = None
    target: Any = None


@router.post("/shapeshift")
async def shapeshift(body: ShapeshiftRequest, request: Request) -> dict:
    """Return the target-shaped result with debug info."""
    engine = request.app.state.engine
    try:
        result = await engine.ashapeshift(body.source, body.target)
    except ProviderError as exc:
        logger.error("Shapeshift failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return result.to_payload()
