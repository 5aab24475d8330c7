"""Unit tests for catalog storage and CatalogService."""

import pytest

from skillpath.modules.catalog.schemas import ProgressUpdate, UserPreferences
from skillpath.modules.catalog.service import CatalogService, filter_courses
from skillpath.modules.catalog.seed import SAMPLE_COURSES
from skillpath.shared.exceptions import (
    CourseNotFoundError,
    LearningPathNotFoundError,
    ProjectNotFoundError,
    ResourceNotFoundError,
)
from skillpath.shared.models import DifficultyLevel, category_color, category_label


class TestCategoryAccessors:
    """Tests for category label and color lookups."""

    def test_labels(self):
        assert category_label("data-science") == "Data Science"
        assert category_label("personal-development") == "Personal Development"

    def test_unknown_label_falls_back_to_raw(self):
        assert category_label("cooking") == "cooking"

    def test_colors(self):
        assert category_color("development") == "blue"
        assert category_color("cooking") == "gray"


class TestFilterCourses:
    """Tests for course filters."""

    def test_all_means_no_filter(self):
        assert filter_courses(SAMPLE_COURSES, "all", "all", "all") == SAMPLE_COURSES
        assert filter_courses(SAMPLE_COURSES) == SAMPLE_COURSES

    def test_category_filter(self):
        ids = [c.id for c in filter_courses(SAMPLE_COURSES, category="development")]
        assert ids == ["1", "2", "7"]

    def test_combined_filters(self):
        result = filter_courses(
            SAMPLE_COURSES, category="development", difficulty="intermediate", provider="udemy"
        )
        assert [c.id for c in result] == ["2", "7"]

    def test_search_is_case_insensitive_over_skills(self):
        assert [c.id for c in filter_courses(SAMPLE_COURSES, search="figma")] == ["3"]

    def test_search_over_description(self):
        assert [c.id for c in filter_courses(SAMPLE_COURSES, search="POSTGRESQL")] == ["7"]


class TestCatalogService:
    """Tests for CatalogService."""

    @pytest.fixture
    def service(self, sample_storage):
        return CatalogService(sample_storage)

    @pytest.mark.asyncio
    async def test_get_course(self, service):
        course = await service.get_course("1")
        assert course.title == "Web Development Fundamentals"

    @pytest.mark.asyncio
    async def test_missing_entities_raise_not_found(self, service):
        with pytest.raises(CourseNotFoundError):
            await service.get_course("nope")
        with pytest.raises(LearningPathNotFoundError):
            await service.get_learning_path("nope")
        with pytest.raises(ProjectNotFoundError) as exc_info:
            await service.get_project("nope")
        assert isinstance(exc_info.value, ResourceNotFoundError)
        assert exc_info.value.details["resource_id"] == "nope"

    @pytest.mark.asyncio
    async def test_learning_paths_keep_order(self, service):
        paths = await service.list_learning_paths()
        assert paths[0].title == "Full-Stack Web Developer"

    @pytest.mark.asyncio
    async def test_projects_by_difficulty(self, service):
        projects = await service.list_projects(difficulty="intermediate")
        assert {p.id for p in projects} == {"proj-2", "proj-4"}
        assert len(await service.list_projects(difficulty="all")) == 4

    @pytest.mark.asyncio
    async def test_progress_created_on_first_update(self, service):
        assert await service.get_course_progress("5") is None

        progress = await service.update_progress("5", ProgressUpdate(progress_percent=20))

        assert progress.course_id == "5"
        assert progress.progress_percent == 20
        assert (await service.get_course_progress("5")).id == progress.id

    @pytest.mark.asyncio
    async def test_progress_patch_keeps_unset_fields(self, service):
        before = await service.get_course_progress("1")
        after = await service.update_progress("1", ProgressUpdate(time_spent_minutes=500))

        assert after.progress_percent == before.progress_percent
        assert after.completed_modules == before.completed_modules
        assert after.time_spent_minutes == 500
        assert after.started_at == before.started_at

    @pytest.mark.asyncio
    async def test_preferences_round_trip(self, service):
        assert await service.get_preferences() is None

        saved = await service.save_preferences(UserPreferences(
            learning_goals=["Get a job"],
            preferred_categories=["design"],
            weekly_time_commitment=6,
            skill_level=DifficultyLevel.INTERMEDIATE,
        ))

        assert saved.id
        assert (await service.get_preferences()) == saved

    @pytest.mark.asyncio
    async def test_empty_storage(self, empty_storage):
        service = CatalogService(empty_storage)
        assert await service.list_courses() == []
        assert await service.list_progress() == []
