"""Recommendation providers - live (generative model) and deterministic fallback."""

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from skillpath.modules.catalog.schemas import Project
from skillpath.modules.llm.service import LLMService
from skillpath.modules.recommendation.interface import (
    IRecommendationProvider,
    ProjectIdeaRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from skillpath.shared.exceptions import LLMServiceError
from skillpath.shared.models import DifficultyLevel

if TYPE_CHECKING:
    from skillpath.modules.catalog.interface import ICatalogStorage

logger = logging.getLogger(__name__)

FALLBACK_PATH_TITLE = "Full-Stack Web Developer"
FALLBACK_PATH_COURSES = ("1", "7")
FALLBACK_PATH_SKILLS = ("HTML", "CSS", "JavaScript", "React")
FALLBACK_PATH_DESCRIPTION = (
    "Based on your goals, we recommend starting with web development fundamentals."
)
FALLBACK_PATH_DURATION = "6 months"
FALLBACK_PATH_REASONING = (
    "This path covers essential skills for modern web development and provides "
    "a strong foundation for your learning journey."
)

FALLBACK_PROJECT_SKILLS = ("HTML", "CSS", "JavaScript")


def _coerce_difficulty(value: str | None) -> DifficultyLevel:
    try:
        return DifficultyLevel(value) if value else DifficultyLevel.INTERMEDIATE
    except ValueError:
        return DifficultyLevel.INTERMEDIATE


def extract_json_object(content: str) -> dict[str, Any]:
    """Parse a JSON object out of a model reply, tolerating code fences.

    Raises:
        LLMServiceError: If the reply holds no JSON object
    """
    content = content.strip()
    if "```" in content:
        match = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", content)
        if match:
            content = match.group(1)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise LLMServiceError(f"Response is not valid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise LLMServiceError(f"Expected a JSON object, got {type(data).__name__}")
    return data


class FallbackRecommendationProvider(IRecommendationProvider):
    """Deterministic suggestions used when the generative model is unavailable.

    The learning path is derived from the first stored path, or from fixed
    literals when storage holds none.
    """

    def __init__(self, storage: "ICatalogStorage") -> None:
        self._storage = storage

    async def generate_recommendation(
        self, request: RecommendationRequest
    ) -> RecommendationResponse:
        paths = await self._storage.get_learning_paths()
        first = paths[0] if paths else None
        return RecommendationResponse(
            title=first.title if first else FALLBACK_PATH_TITLE,
            description=FALLBACK_PATH_DESCRIPTION,
            estimated_duration=FALLBACK_PATH_DURATION,
            courses=tuple(first.courses) if first else FALLBACK_PATH_COURSES,
            skills=tuple(first.skills) if first else FALLBACK_PATH_SKILLS,
            reasoning=FALLBACK_PATH_REASONING,
        )

    async def generate_project(self, request: ProjectIdeaRequest) -> Project:
        return Project(
            title="Interactive Web Dashboard",
            description=(
                "Build a responsive dashboard displaying dynamic data with charts "
                "and user interactions."
            ),
            difficulty=_coerce_difficulty(request.difficulty),
            estimated_time="20 hours",
            skills=list(request.skills or FALLBACK_PROJECT_SKILLS),
            requirements=[
                "Responsive layout design",
                "Data visualization with charts",
                "User authentication flow",
                "API integration",
            ],
            learning_outcomes=[
                "Master responsive design techniques",
                "Implement data visualization",
                "Handle user state and authentication",
                "Work with REST APIs",
            ],
        )


class LiveRecommendationProvider(IRecommendationProvider):
    """Suggestions generated by the LLM service.

    Raises LLMServiceError for replies that are not valid JSON or do not
    match the response schema. Partial objects are never returned.
    """

    PATH_TEMPLATE = "recommendation/learning_path"
    PROJECT_TEMPLATE = "recommendation/project_idea"

    def __init__(self, llm_service: LLMService, storage: "ICatalogStorage") -> None:
        self._llm = llm_service
        self._storage = storage

    async def _catalog_summary(self) -> str:
        courses = await self._storage.get_courses()
        if not courses:
            return "(no courses listed)"
        return "\n".join(f"{course.id}: {course.title}" for course in courses)

    async def generate_recommendation(
        self, request: RecommendationRequest
    ) -> RecommendationResponse:
        template = self._llm.load_prompt_template(self.PATH_TEMPLATE)
        system, user = template.format(
            goals=", ".join(request.goals) or "Learn new skills",
            skills=", ".join(request.skills) or "Beginner",
            current_level=request.current_level,
            time_available=request.time_available,
            catalog=await self._catalog_summary(),
        )

        response = await self._llm.complete(prompt=user, system_prompt=system)
        data = extract_json_object(response.content)

        # Older prompt revisions asked for "recommendedSkills"
        if "skills" not in data and "recommendedSkills" in data:
            data["skills"] = data.pop("recommendedSkills")
        data.setdefault("courses", [])

        try:
            recommendation = RecommendationResponse.model_validate(data)
        except PydanticValidationError as e:
            raise LLMServiceError(
                f"Recommendation does not match schema ({e.error_count()} errors)"
            ) from e

        logger.info(
            f"Generated recommendation '{recommendation.title}' "
            f"({response.usage.get('output_tokens', 0)} output tokens)"
        )
        return recommendation

    async def generate_project(self, request: ProjectIdeaRequest) -> Project:
        difficulty = _coerce_difficulty(request.difficulty).value
        template = self._llm.load_prompt_template(self.PROJECT_TEMPLATE)
        system, user = template.format(
            skills=", ".join(request.skills or []) or "Web development basics",
            difficulty=difficulty,
            category=request.category or "development",
        )

        response = await self._llm.complete(prompt=user, system_prompt=system)
        data = extract_json_object(response.content)
        data.setdefault("difficulty", difficulty)

        try:
            return Project.model_validate(data)
        except PydanticValidationError as e:
            raise LLMServiceError(
                f"Project idea does not match schema ({e.error_count()} errors)"
            ) from e
