"""Pydantic schemas for catalog entities: courses, paths, projects, progress."""

from datetime import datetime, timezone

from pydantic import Field

from skillpath.shared.models import (
    BaseSchema,
    Category,
    CourseProvider,
    DifficultyLevel,
)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ==================
# Courses and Paths
# ==================


class SyllabusWeek(BaseSchema):
    """One week of a course syllabus."""

    week: int = Field(..., ge=1)
    title: str
    topics: list[str] = Field(default_factory=list)
    duration: str


class Course(BaseSchema):
    """A course offered by an upstream provider."""

    id: str
    title: str
    description: str
    provider: CourseProvider
    category: Category
    difficulty: DifficultyLevel
    duration: str
    rating: float = Field(..., ge=0, le=5)
    review_count: int = Field(..., ge=0)
    instructor: str
    thumbnail_url: str
    syllabus: list[SyllabusWeek] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    price: float | None = None


class LearningPath(BaseSchema):
    """An ordered sequence of courses toward a goal."""

    id: str
    title: str
    description: str
    category: Category
    difficulty: DifficultyLevel
    estimated_duration: str
    courses: list[str] = Field(default_factory=list, description="Course ids")
    skills: list[str] = Field(default_factory=list)


class Project(BaseSchema):
    """A hands-on project, stored in the gallery or generated on demand."""

    id: str | None = None
    title: str
    description: str
    difficulty: DifficultyLevel
    estimated_time: str
    skills: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    learning_outcomes: list[str] = Field(default_factory=list)
    course_id: str | None = None


# ==================
# Progress and Preferences
# ==================


class UserProgress(BaseSchema):
    """A learner's progress through one course."""

    id: str
    course_id: str
    completed_modules: list[int] = Field(default_factory=list)
    progress_percent: float = Field(..., ge=0, le=100)
    started_at: str = Field(default_factory=_utc_now_iso)
    last_accessed_at: str = Field(default_factory=_utc_now_iso)
    time_spent_minutes: int = Field(default=0, ge=0)


class ProgressUpdate(BaseSchema):
    """Partial update for a course's progress; unset fields are kept."""

    completed_modules: list[int] | None = None
    progress_percent: float | None = Field(default=None, ge=0, le=100)
    time_spent_minutes: int | None = Field(default=None, ge=0)


class UserPreferences(BaseSchema):
    """Learning preferences captured during onboarding."""

    id: str | None = None
    learning_goals: list[str] = Field(default_factory=list)
    preferred_categories: list[str] = Field(default_factory=list)
    weekly_time_commitment: int = Field(default=0, ge=0)
    skill_level: DifficultyLevel = DifficultyLevel.BEGINNER


class User(BaseSchema):
    """Identity as asserted by the external identity provider."""

    id: str
    username: str
