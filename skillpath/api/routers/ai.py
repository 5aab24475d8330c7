"""AI recommendation API routes.

These endpoints never fail because of the generative model: when it is
unavailable or replies with something unusable, the deterministic fallback
answers instead.
"""

from fastapi import APIRouter

from skillpath.api.dependencies import RecommendationServiceDep
from skillpath.modules.recommendation.interface import (
    ProjectEnvelope,
    ProjectIdeaRequest,
    RecommendationEnvelope,
    RecommendationRequest,
)

router = APIRouter()


@router.post(
    "/recommend-path",
    response_model=RecommendationEnvelope,
    summary="Recommend a learning path",
    description="Recommend a learning path for a learner profile.",
)
@router.post(
    "/generate-learning-path",
    response_model=RecommendationEnvelope,
    include_in_schema=False,
)
async def recommend_path(
    request: RecommendationRequest,
    recommendation_service: RecommendationServiceDep,
) -> RecommendationEnvelope:
    """Recommend a learning path.

    Args:
        request: Skills, goals, current level and weekly time budget
        recommendation_service: Recommendation service instance

    Returns:
        The recommendation wrapped in an envelope
    """
    recommendation = await recommendation_service.recommend_path(request)
    return RecommendationEnvelope(recommendation=recommendation)


@router.post(
    "/generate-project",
    response_model=ProjectEnvelope,
    summary="Generate a project idea",
)
async def generate_project(
    request: ProjectIdeaRequest,
    recommendation_service: RecommendationServiceDep,
) -> ProjectEnvelope:
    project = await recommendation_service.generate_project(request)
    return ProjectEnvelope(project=project)
