"""Analytics API routes."""

from fastapi import APIRouter

from skillpath.api.dependencies import AnalyticsServiceDep
from skillpath.modules.analytics.interface import Analytics

router = APIRouter()


@router.get(
    "",
    response_model=Analytics,
    summary="Get analytics",
    description=(
        "Summary statistics for the learner. A learner without activity gets "
        "zero-state analytics rather than an error."
    ),
)
async def get_analytics(analytics_service: AnalyticsServiceDep) -> Analytics:
    return await analytics_service.get_analytics()
