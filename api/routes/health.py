"""
Health check endpoint.
"""

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

from shared.clock import utc_now

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="ok", timestamp=utc_now())
