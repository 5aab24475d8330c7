"""Catalog Service - course browsing, paths, projects, progress and preferences."""

import logging

from skillpath.modules.catalog.interface import ICatalogStorage
from skillpath.modules.catalog.schemas import (
    Course,
    LearningPath,
    ProgressUpdate,
    Project,
    UserPreferences,
    UserProgress,
)
from skillpath.shared.exceptions import (
    CourseNotFoundError,
    LearningPathNotFoundError,
    ProjectNotFoundError,
)

logger = logging.getLogger(__name__)

ALL = "all"


def _is_filter(value: str | None) -> bool:
    return bool(value) and value != ALL


def filter_courses(
    courses: list[Course],
    category: str | None = None,
    difficulty: str | None = None,
    provider: str | None = None,
    search: str | None = None,
) -> list[Course]:
    """Apply catalog filters. A value of "all" or None disables a filter.

    Search is case-insensitive over title, description and skills.
    """
    result = courses
    if _is_filter(category):
        result = [c for c in result if c.category.value == category]
    if _is_filter(difficulty):
        result = [c for c in result if c.difficulty.value == difficulty]
    if _is_filter(provider):
        result = [c for c in result if c.provider.value == provider]
    if search:
        needle = search.lower()
        result = [
            c for c in result
            if needle in c.title.lower()
            or needle in c.description.lower()
            or any(needle in skill.lower() for skill in c.skills)
        ]
    return result


class CatalogService:
    """Read and update operations over the catalog storage."""

    def __init__(self, storage: ICatalogStorage) -> None:
        self._storage = storage

    # Courses

    async def list_courses(
        self,
        category: str | None = None,
        difficulty: str | None = None,
        provider: str | None = None,
        search: str | None = None,
    ) -> list[Course]:
        courses = await self._storage.get_courses()
        return filter_courses(courses, category, difficulty, provider, search)

    async def get_course(self, course_id: str) -> Course:
        course = await self._storage.get_course(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    # Learning paths

    async def list_learning_paths(self) -> list[LearningPath]:
        return await self._storage.get_learning_paths()

    async def get_learning_path(self, path_id: str) -> LearningPath:
        path = await self._storage.get_learning_path(path_id)
        if path is None:
            raise LearningPathNotFoundError(path_id)
        return path

    # Projects

    async def list_projects(self, difficulty: str | None = None) -> list[Project]:
        projects = await self._storage.get_projects()
        if _is_filter(difficulty):
            projects = [p for p in projects if p.difficulty.value == difficulty]
        return projects

    async def get_project(self, project_id: str) -> Project:
        project = await self._storage.get_project(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    # Progress

    async def list_progress(self) -> list[UserProgress]:
        return await self._storage.get_user_progress()

    async def get_course_progress(self, course_id: str) -> UserProgress | None:
        """Progress for one course, or None if the learner never started it."""
        return await self._storage.get_course_progress(course_id)

    async def update_progress(self, course_id: str, patch: ProgressUpdate) -> UserProgress:
        progress = await self._storage.update_progress(course_id, patch)
        logger.info(
            f"Progress updated for course {course_id}: {progress.progress_percent}%"
        )
        return progress

    # Preferences

    async def get_preferences(self) -> UserPreferences | None:
        return await self._storage.get_user_preferences()

    async def save_preferences(self, preferences: UserPreferences) -> UserPreferences:
        return await self._storage.save_user_preferences(preferences)
