# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import GalleryDep
from app.exceptions import GalleryReadError

router = APIRouter()

VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual directory checks."""
    images: str
    catalog: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(gallery: GalleryDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=gallery.settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(gallery: GalleryDep):
    """
    Readiness check endpoint.

    Returns whether the images and catalog directories can be listed.
    """
    checks = ChecksResponse(images="unknown", catalog="unknown")

    try:
        gallery.catalog.get_image_names()
        checks.images = "healthy"
    except GalleryReadError as e:
        checks.images = f"unhealthy: {e.details.get('error', '')[:50]}"

    try:
        gallery.catalog.get_catalog_names()
        checks.catalog = "healthy"
    except GalleryReadError as e:
        checks.catalog = f"unhealthy: {e.details.get('error', '')[:50]}"

    all_healthy = checks.images == "healthy" and checks.catalog == "healthy"

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
