"""Catalog Module - storage collaborator contract.

The storage layer is an opaque collection service. Implementations may keep
data anywhere; callers rely only on the operations below. Every operation
raises StorageUnavailableError when the backing store cannot be reached.
"""

from typing import Protocol

from skillpath.modules.analytics.interface import Analytics
from skillpath.modules.assessment.interface import AssessmentQuestion, AssessmentRecord
from skillpath.modules.catalog.schemas import (
    Course,
    LearningPath,
    ProgressUpdate,
    Project,
    User,
    UserPreferences,
    UserProgress,
)


class ICatalogStorage(Protocol):
    """Interface for the storage collaborator."""

    # Users

    async def get_user(self, user_id: str) -> User | None:
        ...

    async def upsert_user(self, user: User) -> User:
        ...

    # Courses and paths

    async def get_courses(self) -> list[Course]:
        ...

    async def get_course(self, course_id: str) -> Course | None:
        ...

    async def get_learning_paths(self) -> list[LearningPath]:
        """All learning paths in storage order. The first one seeds fallbacks."""
        ...

    async def get_learning_path(self, path_id: str) -> LearningPath | None:
        ...

    # Assessment

    async def get_assessment_questions(self) -> list[AssessmentQuestion]:
        ...

    async def save_assessment_result(self, record: AssessmentRecord) -> AssessmentRecord:
        ...

    async def get_assessment_results(self) -> list[AssessmentRecord]:
        ...

    # Progress

    async def get_user_progress(self) -> list[UserProgress]:
        ...

    async def get_course_progress(self, course_id: str) -> UserProgress | None:
        ...

    async def update_progress(self, course_id: str, patch: ProgressUpdate) -> UserProgress:
        """Apply a partial update, creating the progress entry if needed."""
        ...

    # Projects

    async def get_projects(self) -> list[Project]:
        ...

    async def get_project(self, project_id: str) -> Project | None:
        ...

    # Analytics and preferences

    async def get_analytics(self) -> Analytics | None:
        """Analytics snapshot, or None for a learner with no record yet."""
        ...

    async def get_user_preferences(self) -> UserPreferences | None:
        ...

    async def save_user_preferences(self, preferences: UserPreferences) -> UserPreferences:
        ...
