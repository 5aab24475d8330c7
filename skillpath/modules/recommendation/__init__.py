"""Recommendation Module - learning path and project suggestions."""

from skillpath.modules.recommendation.client import (
    RecommendationProfile,
    RecommendationRequester,
    build_request,
    profile_from_result,
    resolve_courses,
)
from skillpath.modules.recommendation.interface import (
    IRecommendationProvider,
    ProjectEnvelope,
    ProjectIdeaRequest,
    RecommendationEnvelope,
    RecommendationRequest,
    RecommendationResponse,
)
from skillpath.modules.recommendation.providers import (
    FallbackRecommendationProvider,
    LiveRecommendationProvider,
)
from skillpath.modules.recommendation.service import RecommendationService

__all__ = [
    "FallbackRecommendationProvider",
    "IRecommendationProvider",
    "LiveRecommendationProvider",
    "ProjectEnvelope",
    "ProjectIdeaRequest",
    "RecommendationEnvelope",
    "RecommendationProfile",
    "RecommendationRequest",
    "RecommendationRequester",
    "RecommendationResponse",
    "RecommendationService",
    "build_request",
    "profile_from_result",
    "resolve_courses",
]
