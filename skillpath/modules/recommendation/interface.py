"""Recommendation Module - request/response contract for AI-assisted suggestions.

A response looks the same whether a generative model or the deterministic
fallback produced it. Nothing in the schema tells the two apart.
"""

from typing import Protocol

from pydantic import Field

from skillpath.modules.catalog.schemas import Project
from skillpath.shared.constants import DEFAULT_TIME_AVAILABLE
from skillpath.shared.models import BaseSchema, FrozenSchema


class RecommendationRequest(BaseSchema):
    """Learner profile sent to the recommendation endpoint."""

    skills: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    current_level: str = "beginner"
    time_available: str = DEFAULT_TIME_AVAILABLE


class RecommendationResponse(FrozenSchema):
    """A recommended learning path.

    courses holds course ids that are not guaranteed to exist in the
    catalog; consumers must not assume they resolve.
    """

    title: str = Field(..., min_length=1)
    description: str
    estimated_duration: str
    courses: tuple[str, ...]
    skills: tuple[str, ...]
    reasoning: str = Field(..., min_length=1)


class RecommendationEnvelope(BaseSchema):
    """Wire envelope for POST /api/ai/recommend-path."""

    recommendation: RecommendationResponse


class ProjectIdeaRequest(BaseSchema):
    """Profile for a generated project idea."""

    skills: list[str] | None = None
    difficulty: str | None = None
    category: str | None = None


class ProjectEnvelope(BaseSchema):
    """Wire envelope for POST /api/ai/generate-project."""

    project: Project


class IRecommendationProvider(Protocol):
    """Capability that turns a learner profile into suggestions.

    Implementations raise on any failure; the service decides what to do
    about it.
    """

    async def generate_recommendation(
        self, request: RecommendationRequest
    ) -> RecommendationResponse:
        ...

    async def generate_project(self, request: ProjectIdeaRequest) -> Project:
        ...
