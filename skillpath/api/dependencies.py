"""FastAPI dependency injection for services.

Routers receive services through Depends() so tests can swap them with
app.dependency_overrides. The instances themselves come from the
service registry.
"""

from typing import Annotated

from fastapi import Depends

from skillpath.modules.analytics.service import AnalyticsService
from skillpath.modules.assessment.service import AssessmentService
from skillpath.modules.catalog.service import CatalogService
from skillpath.modules.recommendation.service import RecommendationService
from skillpath.shared.service_registry import get_service_registry


# ===================
# Service Dependencies
# ===================

async def get_catalog_service() -> CatalogService:
    """Get catalog service instance."""
    return get_service_registry().get_catalog_service()


async def get_assessment_service() -> AssessmentService:
    """Get assessment service instance."""
    return get_service_registry().get_assessment_service()


async def get_analytics_service() -> AnalyticsService:
    """Get analytics service instance."""
    return get_service_registry().get_analytics_service()


async def get_recommendation_service() -> RecommendationService:
    """Get recommendation service instance."""
    return get_service_registry().get_recommendation_service()


# ===================
# Type Aliases for Dependencies
# ===================

CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
AssessmentServiceDep = Annotated[AssessmentService, Depends(get_assessment_service)]
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
RecommendationServiceDep = Annotated[
    RecommendationService, Depends(get_recommendation_service)
]
