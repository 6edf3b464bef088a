# app/routers/health.py
"""Liveness endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas import HealthResponse
from app.timestamps import format_timestamp

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Report that the API is up; does not touch the database."""
    return HealthResponse(
        message="API is running",
        timestamp=format_timestamp(datetime.now(timezone.utc)),
    )
