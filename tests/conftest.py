"""Test configuration and fixtures."""

import sys
from pathlib import Path

# Load environment variables before any imports that need them
from dotenv import load_dotenv
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

# Ensure the package is importable without installation
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import AsyncMock, MagicMock

from skillpath.modules.assessment.interface import AssessmentQuestion
from skillpath.modules.catalog.storage import InMemoryStorage
from skillpath.shared.models import Category, DifficultyLevel


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test fresh settings, feature flags and services."""
    from skillpath.modules.llm import service as llm_service
    from skillpath.shared.config import get_settings
    from skillpath.shared.feature_flags import FeatureFlagManager, get_feature_flags
    from skillpath.shared.service_registry import ServiceRegistry, get_service_registry

    def _reset():
        get_settings.cache_clear()
        FeatureFlagManager._instance = None
        get_feature_flags.cache_clear()
        ServiceRegistry._instance = None
        get_service_registry.cache_clear()
        llm_service._llm_service = None

    _reset()
    yield
    _reset()


@pytest.fixture
def fallback_only(monkeypatch):
    """Force the deterministic recommendation provider."""
    monkeypatch.setenv("RECOMMENDATION_PROVIDER", "fallback")


def make_question(
    question_id: str,
    category: Category,
    correct_answer: int = 0,
    options: tuple[str, ...] = ("A", "B", "C", "D"),
) -> AssessmentQuestion:
    return AssessmentQuestion(
        id=question_id,
        question=f"Question {question_id}?",
        options=options,
        correct_answer=correct_answer,
        category=category,
        difficulty=DifficultyLevel.BEGINNER,
    )


@pytest.fixture
def eight_questions() -> list[AssessmentQuestion]:
    """Eight questions: 2 development, 2 design, 1 business, 2 data science, 1 marketing."""
    categories = [
        Category.DEVELOPMENT,
        Category.DEVELOPMENT,
        Category.DESIGN,
        Category.DESIGN,
        Category.BUSINESS,
        Category.DATA_SCIENCE,
        Category.DATA_SCIENCE,
        Category.MARKETING,
    ]
    return [make_question(f"q{i + 1}", category) for i, category in enumerate(categories)]


@pytest.fixture
def sample_storage() -> InMemoryStorage:
    """Storage loaded with the sample catalog."""
    return InMemoryStorage.with_sample_data()


@pytest.fixture
def empty_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def mock_llm_service():
    """Mock LLM service."""
    service = MagicMock()
    service.complete = AsyncMock(return_value=MagicMock(
        content="{}",
        model="claude-sonnet-4-20250514",
        usage={"input_tokens": 10, "output_tokens": 20},
    ))
    return service


@pytest.fixture
def question_factory():
    """Build AssessmentQuestion instances with sensible defaults."""
    return make_question
