"""Recommendation Service - server boundary for AI-assisted suggestions.

When a live provider is configured it is asked first. Any failure there
(transport errors, missing credentials, malformed or off-schema replies)
is logged and answered with the deterministic fallback instead, so callers
always receive a complete, schema-conformant response.
"""

import logging

from skillpath.modules.catalog.schemas import Project
from skillpath.modules.recommendation.interface import (
    IRecommendationProvider,
    ProjectIdeaRequest,
    RecommendationRequest,
    RecommendationResponse,
)

logger = logging.getLogger(__name__)


class RecommendationService:
    """Chooses between a live provider and the fallback for each request."""

    def __init__(
        self,
        fallback: IRecommendationProvider,
        live: IRecommendationProvider | None = None,
        live_projects: bool = True,
    ) -> None:
        self._fallback = fallback
        self._live = live
        self._live_projects = live_projects

    @property
    def provider_name(self) -> str:
        """Name of the provider asked first, for logs and health output."""
        return type(self._live or self._fallback).__name__

    async def recommend_path(self, request: RecommendationRequest) -> RecommendationResponse:
        """Recommend a learning path for the given profile."""
        if self._live is not None:
            try:
                return await self._live.generate_recommendation(request)
            except Exception as e:
                logger.warning(
                    f"Live recommendation failed, using fallback: {type(e).__name__}: {e}"
                )
        return await self._fallback.generate_recommendation(request)

    async def generate_project(self, request: ProjectIdeaRequest) -> Project:
        """Suggest a project idea for the given profile."""
        if self._live is not None and self._live_projects:
            try:
                return await self._live.generate_project(request)
            except Exception as e:
                logger.warning(
                    f"Live project generation failed, using fallback: {type(e).__name__}: {e}"
                )
        return await self._fallback.generate_project(request)
