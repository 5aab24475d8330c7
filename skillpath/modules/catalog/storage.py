"""In-memory implementation of the storage collaborator."""

from datetime import datetime, timezone
import logging
from uuid import uuid4

from skillpath.modules.analytics.interface import Analytics
from skillpath.modules.assessment.interface import AssessmentQuestion, AssessmentRecord
from skillpath.modules.catalog.interface import ICatalogStorage
from skillpath.modules.catalog.schemas import (
    Course,
    LearningPath,
    ProgressUpdate,
    Project,
    User,
    UserPreferences,
    UserProgress,
)

logger = logging.getLogger(__name__)


class InMemoryStorage(ICatalogStorage):
    """Dictionary-backed storage for a single learner.

    Collections keep insertion order, so list operations return entities in
    the order they were added.
    """

    def __init__(
        self,
        courses: list[Course] | None = None,
        learning_paths: list[LearningPath] | None = None,
        questions: list[AssessmentQuestion] | None = None,
        projects: list[Project] | None = None,
        progress: list[UserProgress] | None = None,
        analytics: Analytics | None = None,
    ) -> None:
        self._users: dict[str, User] = {}
        self._courses: dict[str, Course] = {c.id: c for c in courses or []}
        self._paths: dict[str, LearningPath] = {p.id: p for p in learning_paths or []}
        self._questions: list[AssessmentQuestion] = list(questions or [])
        self._projects: dict[str, Project] = {
            p.id or str(uuid4()): p for p in projects or []
        }
        self._progress: dict[str, UserProgress] = {p.course_id: p for p in progress or []}
        self._results: list[AssessmentRecord] = []
        self._analytics: Analytics | None = analytics
        self._preferences: UserPreferences | None = None

    @classmethod
    def with_sample_data(cls) -> "InMemoryStorage":
        """Create storage pre-loaded with the sample catalog."""
        from skillpath.modules.catalog import seed

        logger.info("Loading sample catalog into in-memory storage")
        return cls(
            courses=seed.SAMPLE_COURSES,
            learning_paths=seed.SAMPLE_LEARNING_PATHS,
            questions=seed.SAMPLE_QUESTIONS,
            projects=seed.SAMPLE_PROJECTS,
            progress=seed.SAMPLE_PROGRESS,
            analytics=seed.SAMPLE_ANALYTICS,
        )

    # Users

    async def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def upsert_user(self, user: User) -> User:
        self._users[user.id] = user
        return user

    # Courses and paths

    async def get_courses(self) -> list[Course]:
        return list(self._courses.values())

    async def get_course(self, course_id: str) -> Course | None:
        return self._courses.get(course_id)

    async def get_learning_paths(self) -> list[LearningPath]:
        return list(self._paths.values())

    async def get_learning_path(self, path_id: str) -> LearningPath | None:
        return self._paths.get(path_id)

    # Assessment

    async def get_assessment_questions(self) -> list[AssessmentQuestion]:
        return list(self._questions)

    async def save_assessment_result(self, record: AssessmentRecord) -> AssessmentRecord:
        self._results.append(record)
        logger.debug(f"Stored assessment result {record.id}")
        return record

    async def get_assessment_results(self) -> list[AssessmentRecord]:
        return list(self._results)

    # Progress

    async def get_user_progress(self) -> list[UserProgress]:
        return list(self._progress.values())

    async def get_course_progress(self, course_id: str) -> UserProgress | None:
        return self._progress.get(course_id)

    async def update_progress(self, course_id: str, patch: ProgressUpdate) -> UserProgress:
        now = datetime.now(timezone.utc).isoformat()
        existing = self._progress.get(course_id)
        if existing is None:
            existing = UserProgress(
                id=str(uuid4()),
                course_id=course_id,
                progress_percent=0,
                started_at=now,
                last_accessed_at=now,
            )

        changes = patch.model_dump(exclude_none=True)
        changes["last_accessed_at"] = now
        updated = existing.model_copy(update=changes)
        self._progress[course_id] = updated
        return updated

    # Projects

    async def get_projects(self) -> list[Project]:
        return list(self._projects.values())

    async def get_project(self, project_id: str) -> Project | None:
        return self._projects.get(project_id)

    # Analytics and preferences

    async def get_analytics(self) -> Analytics | None:
        return self._analytics

    async def get_user_preferences(self) -> UserPreferences | None:
        return self._preferences

    async def save_user_preferences(self, preferences: UserPreferences) -> UserPreferences:
        if preferences.id is None:
            preferences = preferences.model_copy(update={"id": str(uuid4())})
        self._preferences = preferences
        return preferences
