"""
Health check endpoints.

Provides the liveness probe.
"""

from fastapi import APIRouter, status

from migration_planner import __version__
from migration_planner.infrastructure.config import get_settings

router = APIRouter()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Check if the service is alive",
    tags=["Health"],
)
async def liveness() -> dict:
    """
    Liveness probe - check if the process is running.

    The planner holds no connections, so this endpoint always returns 200
    while the process is alive.
    """
    return {
        "status": "healthy",
        "service": get_settings().observability.service_name,
        "version": __version__,
    }
