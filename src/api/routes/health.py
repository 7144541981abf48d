"""
Health check endpoint.
"""

from fastapi import APIRouter

from models.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe; no upstream dependency."""
    return HealthResponse(status="ok")
