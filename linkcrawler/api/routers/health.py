"""Liveness probe.

Routes
------
GET /health    → {"status": "OK", "timestamp": "..."}
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from linkcrawler.api.schemas import HealthResponse, isoformat_utc

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Static OK; does not touch the browser."""
    return HealthResponse(timestamp=isoformat_utc(datetime.now(timezone.utc)))
