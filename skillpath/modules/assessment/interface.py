"""Assessment Module - Skill quiz types shared by the engine, service and API."""

from datetime import datetime, timezone
from enum import Enum
from typing import Protocol
from uuid import uuid4

from pydantic import Field, model_validator

from skillpath.shared.constants import MAX_SCORE, MIN_SCORE
from skillpath.shared.models import (
    BaseSchema,
    Category,
    DifficultyLevel,
    FrozenSchema,
)


class QuizState(str, Enum):
    """Phases of one assessment session."""

    INTRO = "intro"
    QUIZ = "quiz"
    RESULTS = "results"


class OptionFeedback(str, Enum):
    """Classification of an option once an answer has been submitted."""

    CORRECT = "correct"
    INCORRECT = "incorrect"  # chosen and wrong
    NEUTRAL = "neutral"


class AssessmentQuestion(FrozenSchema):
    """A multiple-choice question. Immutable once issued to a session."""

    id: str
    question: str
    options: tuple[str, ...] = Field(..., min_length=1)
    correct_answer: int = Field(..., ge=0, description="Index into options")
    category: Category
    difficulty: DifficultyLevel

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "AssessmentQuestion":
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range for "
                f"{len(self.options)} options"
            )
        return self


class Answer(FrozenSchema):
    """A submitted answer. Created once per question, never mutated."""

    question_id: str
    selected_answer: int = Field(..., ge=0)
    is_correct: bool


class CategoryTally(FrozenSchema):
    """Correct and total counts for one category."""

    correct: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class AssessmentResult(FrozenSchema):
    """Scored outcome of a completed session."""

    overall_score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    correct_count: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    category_scores: dict[Category, CategoryTally] = Field(default_factory=dict)
    category_percentages: dict[Category, int] = Field(default_factory=dict)
    strongest_category: Category | None = None
    level: DifficultyLevel


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class AssessmentRecord(BaseSchema):
    """Persisted form of an assessment outcome."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    answers: list[Answer] = Field(default_factory=list)
    category_scores: dict[str, int] = Field(
        default_factory=dict,
        description="Category to percentage",
    )
    overall_score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    recommended_path: str | None = None
    completed_at: str = Field(default_factory=_utc_now_iso)


class IAssessmentService(Protocol):
    """Interface for the server-side assessment service."""

    async def get_questions(self) -> list[AssessmentQuestion]:
        """Fetch the question set in issue order.

        Raises:
            StorageUnavailableError: If the question set cannot be fetched
        """
        ...

    async def save_result(self, record: AssessmentRecord) -> AssessmentRecord:
        """Persist a scored outcome."""
        ...

    async def list_results(self) -> list[AssessmentRecord]:
        """List persisted outcomes, oldest first."""
        ...
