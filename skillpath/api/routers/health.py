"""Health check API routes."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from skillpath.shared.service_registry import get_service_registry

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(
        ...,
        description="Overall health status",
    )
    version: str = Field(
        default="1.0.0",
        description="API version",
    )


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    status: str = Field(
        ...,
        description="Overall readiness status",
    )
    storage: str = Field(
        ...,
        description="Storage collaborator status",
    )
    recommendation_provider: str = Field(
        ...,
        description="Provider asked first for recommendations",
    )


class LivenessResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(
        default="alive",
        description="Liveness status",
    )


@router.get(
    "",
    response_model=HealthResponse,
    summary="Basic health check",
    description="Simple health check endpoint.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Check if the service is ready to accept traffic.",
)
async def readiness_check() -> ReadinessResponse:
    """Readiness check with dependency verification.

    Returns:
        Readiness status with component details
    """
    registry = get_service_registry()
    storage_status = "healthy"

    try:
        await registry.get_storage().get_courses()
    except Exception:
        storage_status = "unhealthy"

    return ReadinessResponse(
        status="ready" if storage_status == "healthy" else "not_ready",
        storage=storage_status,
        recommendation_provider=registry.get_recommendation_service().provider_name,
    )


@router.get(
    "/live",
    response_model=LivenessResponse,
    summary="Liveness check",
    description="Check if the service is alive.",
)
async def liveness_check() -> LivenessResponse:
    """Liveness check.

    Always returns alive if the endpoint is reachable.
    """
    return LivenessResponse(status="alive")
