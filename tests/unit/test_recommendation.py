"""Unit tests for recommendation providers and the recommendation service."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from skillpath.modules.llm.service import LLMService
from skillpath.modules.recommendation.interface import (
    ProjectIdeaRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from skillpath.modules.recommendation.providers import (
    FALLBACK_PATH_COURSES,
    FALLBACK_PATH_SKILLS,
    FALLBACK_PATH_TITLE,
    FallbackRecommendationProvider,
    LiveRecommendationProvider,
    extract_json_object,
)
from skillpath.modules.recommendation.service import RecommendationService
from skillpath.shared.config import Settings
from skillpath.shared.exceptions import LLMServiceError
from skillpath.shared.models import DifficultyLevel


VALID_REPLY = {
    "title": "Frontend Engineer",
    "description": "From HTML to production React apps.",
    "estimatedDuration": "4 months",
    "courses": ["1", "2"],
    "skills": ["HTML", "React"],
    "reasoning": "You scored highest in development.",
}


@pytest.fixture
def request_body():
    return RecommendationRequest(
        skills=["Development"],
        goals=["career advancement", "skill development"],
        current_level="intermediate",
    )


@pytest.fixture
def llm_with_reply(mock_llm_service):
    """Mock LLM whose templates load from disk and whose reply can be set."""
    real = LLMService(Settings(anthropic_api_key=None))
    mock_llm_service.load_prompt_template = real.load_prompt_template

    def _reply(content: str):
        mock_llm_service.complete.return_value = MagicMock(
            content=content,
            usage={"input_tokens": 10, "output_tokens": 20},
        )
        return mock_llm_service

    return _reply


class TestExtractJsonObject:
    """Tests for JSON extraction from model replies."""

    def test_plain_json(self):
        assert extract_json_object('{"a": 1}') == {"a": 1}

    def test_fenced_json(self):
        content = 'Here you go:\n```json\n{"a": 1}\n```'
        assert extract_json_object(content) == {"a": 1}

    def test_bare_fence(self):
        assert extract_json_object('```\n{"a": 2}\n```') == {"a": 2}

    def test_garbage_raises(self):
        with pytest.raises(LLMServiceError):
            extract_json_object("I cannot help with that.")

    def test_non_object_raises(self):
        with pytest.raises(LLMServiceError):
            extract_json_object("[1, 2, 3]")


class TestFallbackProvider:
    """Tests for the deterministic fallback."""

    @pytest.mark.asyncio
    async def test_uses_first_learning_path(self, sample_storage, request_body):
        provider = FallbackRecommendationProvider(sample_storage)
        response = await provider.generate_recommendation(request_body)

        assert response.title == "Full-Stack Web Developer"
        assert response.courses == ("1", "2", "7")
        assert response.estimated_duration == "6 months"
        assert response.reasoning

    @pytest.mark.asyncio
    async def test_literals_without_paths(self, empty_storage, request_body):
        provider = FallbackRecommendationProvider(empty_storage)
        response = await provider.generate_recommendation(request_body)

        assert response.title == FALLBACK_PATH_TITLE
        assert response.courses == FALLBACK_PATH_COURSES == ("1", "7")
        assert response.skills == FALLBACK_PATH_SKILLS
        assert response.reasoning

    @pytest.mark.asyncio
    async def test_is_deterministic(self, sample_storage, request_body):
        provider = FallbackRecommendationProvider(sample_storage)
        first = await provider.generate_recommendation(request_body)
        second = await provider.generate_recommendation(request_body)
        assert first == second

    @pytest.mark.asyncio
    async def test_project_echoes_request(self, empty_storage):
        provider = FallbackRecommendationProvider(empty_storage)
        project = await provider.generate_project(
            ProjectIdeaRequest(skills=["Python"], difficulty="advanced")
        )
        assert project.title == "Interactive Web Dashboard"
        assert project.difficulty == DifficultyLevel.ADVANCED
        assert project.skills == ["Python"]

    @pytest.mark.asyncio
    async def test_project_defaults(self, empty_storage):
        provider = FallbackRecommendationProvider(empty_storage)
        project = await provider.generate_project(ProjectIdeaRequest(difficulty="expert"))
        assert project.difficulty == DifficultyLevel.INTERMEDIATE
        assert project.skills == ["HTML", "CSS", "JavaScript"]


class TestLiveProvider:
    """Tests for the LLM-backed provider."""

    @pytest.mark.asyncio
    async def test_parses_valid_reply(self, llm_with_reply, sample_storage, request_body):
        llm = llm_with_reply(json.dumps(VALID_REPLY))
        provider = LiveRecommendationProvider(llm, sample_storage)

        response = await provider.generate_recommendation(request_body)

        assert response.title == "Frontend Engineer"
        assert response.courses == ("1", "2")
        prompt = llm.complete.call_args.kwargs["prompt"]
        assert "intermediate" in prompt
        assert "1: Web Development Fundamentals" in prompt

    @pytest.mark.asyncio
    async def test_accepts_recommended_skills_and_missing_courses(
        self, llm_with_reply, sample_storage, request_body
    ):
        reply = dict(VALID_REPLY)
        reply["recommendedSkills"] = reply.pop("skills")
        del reply["courses"]
        provider = LiveRecommendationProvider(
            llm_with_reply(f"```json\n{json.dumps(reply)}\n```"), sample_storage
        )

        response = await provider.generate_recommendation(request_body)

        assert response.skills == ("HTML", "React")
        assert response.courses == ()

    @pytest.mark.asyncio
    async def test_missing_reasoning_raises(self, llm_with_reply, sample_storage, request_body):
        reply = {k: v for k, v in VALID_REPLY.items() if k != "reasoning"}
        provider = LiveRecommendationProvider(llm_with_reply(json.dumps(reply)), sample_storage)
        with pytest.raises(LLMServiceError):
            await provider.generate_recommendation(request_body)

    @pytest.mark.asyncio
    async def test_project_reply(self, llm_with_reply, sample_storage):
        reply = {
            "title": "Recipe Finder",
            "description": "Search recipes by ingredient.",
            "estimatedTime": "15 hours",
            "skills": ["React"],
            "requirements": ["Search"],
            "learningOutcomes": ["State"],
        }
        provider = LiveRecommendationProvider(llm_with_reply(json.dumps(reply)), sample_storage)
        project = await provider.generate_project(ProjectIdeaRequest(difficulty="beginner"))
        assert project.title == "Recipe Finder"
        assert project.difficulty == DifficultyLevel.BEGINNER


class TestRecommendationService:
    """Tests for live-then-fallback selection."""

    @pytest.mark.asyncio
    async def test_fallback_only(self, sample_storage, request_body):
        service = RecommendationService(FallbackRecommendationProvider(sample_storage))
        response = await service.recommend_path(request_body)
        assert isinstance(response, RecommendationResponse)
        assert response.reasoning
        assert service.provider_name == "FallbackRecommendationProvider"

    @pytest.mark.asyncio
    async def test_live_success(self, llm_with_reply, sample_storage, request_body):
        live = LiveRecommendationProvider(llm_with_reply(json.dumps(VALID_REPLY)), sample_storage)
        service = RecommendationService(FallbackRecommendationProvider(sample_storage), live=live)
        response = await service.recommend_path(request_body)
        assert response.title == "Frontend Engineer"
        assert service.provider_name == "LiveRecommendationProvider"

    @pytest.mark.asyncio
    async def test_garbage_reply_falls_back(self, llm_with_reply, sample_storage, request_body):
        live = LiveRecommendationProvider(llm_with_reply("not json at all"), sample_storage)
        fallback = FallbackRecommendationProvider(sample_storage)
        service = RecommendationService(fallback, live=live)

        response = await service.recommend_path(request_body)

        assert response == await fallback.generate_recommendation(request_body)

    @pytest.mark.asyncio
    async def test_missing_credential_falls_back_with_same_shape(
        self, sample_storage, request_body
    ):
        llm = LLMService(Settings(anthropic_api_key=None))
        live = LiveRecommendationProvider(llm, sample_storage)
        service = RecommendationService(FallbackRecommendationProvider(sample_storage), live=live)

        response = await service.recommend_path(request_body)

        live_shaped = RecommendationResponse.model_validate(VALID_REPLY)
        assert set(response.model_dump()) == set(live_shaped.model_dump())
        assert response.reasoning.strip()

    @pytest.mark.asyncio
    async def test_provider_exception_falls_back(self, sample_storage, request_body):
        live = MagicMock()
        live.generate_recommendation = AsyncMock(side_effect=RuntimeError("boom"))
        service = RecommendationService(FallbackRecommendationProvider(sample_storage), live=live)
        response = await service.recommend_path(request_body)
        assert response.title == "Full-Stack Web Developer"

    @pytest.mark.asyncio
    async def test_live_projects_disabled(self, sample_storage):
        live = MagicMock()
        live.generate_project = AsyncMock()
        service = RecommendationService(
            FallbackRecommendationProvider(sample_storage),
            live=live,
            live_projects=False,
        )
        project = await service.generate_project(ProjectIdeaRequest())
        assert project.title == "Interactive Web Dashboard"
        live.generate_project.assert_not_called()
