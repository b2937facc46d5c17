"""
Health check router.

Provides liveness and readiness probes.
"""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel

from ..dependencies import get_employee_client
from ..infrastructure.employee_client import EmployeeClient

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    settings = request.app.state.settings
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        service=settings.SERVICE_NAME,
        version=settings.VERSION,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
    summary="Readiness check",
)
async def readiness_check(
    response: Response,
    client: EmployeeClient = Depends(get_employee_client),
) -> ReadinessResponse:
    """
    Readiness check.

    Returns 200 if the upstream employee API answers, 503 otherwise.
    """
    upstream_ok = await client.health_check()
    checks = {"upstream": "healthy" if upstream_ok else "unhealthy"}

    if not upstream_ok:
        logger.warning("Readiness check failed", checks=checks)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(ready=upstream_ok, checks=checks, timestamp=_now())
