"""Unit tests for AssessmentService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from skillpath.modules.assessment import engine
from skillpath.modules.assessment.engine import can_start
from skillpath.modules.assessment.service import AssessmentService
from skillpath.shared.constants import QUESTIONS_LOAD_ERROR_MESSAGE
from skillpath.shared.exceptions import AssessmentStateError, StorageUnavailableError


@pytest.fixture
def service(sample_storage):
    return AssessmentService(sample_storage)


@pytest.fixture
def broken_storage():
    storage = MagicMock()
    storage.get_assessment_questions = AsyncMock(side_effect=ConnectionError("refused"))
    return storage


class TestAssessmentService:
    """Tests for AssessmentService."""

    @pytest.mark.asyncio
    async def test_get_questions_in_issue_order(self, service):
        questions = await service.get_questions()
        assert [q.id for q in questions] == [f"q{i}" for i in range(1, 9)]

    @pytest.mark.asyncio
    async def test_fetch_failure_becomes_storage_error(self, broken_storage):
        with pytest.raises(StorageUnavailableError) as exc_info:
            await AssessmentService(broken_storage).get_questions()
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_open_session_on_failure_blocks_start(self, broken_storage):
        session = await AssessmentService(broken_storage).open_session()
        assert session.has_load_error
        assert not can_start(session)

    @pytest.mark.asyncio
    async def test_load_error_hides_technical_detail(self):
        storage = MagicMock()
        storage.get_assessment_questions = AsyncMock(
            side_effect=ConnectionError("db down at 10.0.0.5:5432")
        )
        session = await AssessmentService(storage).open_session()
        assert session.load_error == QUESTIONS_LOAD_ERROR_MESSAGE
        assert "10.0.0.5" not in session.load_error

    @pytest.mark.asyncio
    async def test_retry_after_failure_loads_questions(self, sample_storage):
        questions = await sample_storage.get_assessment_questions()
        sample_storage.get_assessment_questions = AsyncMock(
            side_effect=[ConnectionError("refused"), questions]
        )
        service = AssessmentService(sample_storage)

        assert (await service.open_session()).has_load_error
        retried = await service.open_session()
        assert can_start(retried)
        assert len(retried.questions) == 8

    @pytest.mark.asyncio
    async def test_save_completed_session(self, service):
        session = engine.start(await service.open_session())
        for question in session.questions:
            session = engine.answer_question(session, question.correct_answer)

        record = await service.save_session(session, recommended_path="Full-Stack Web Developer")

        assert record.overall_score == 100
        assert record.category_scores["development"] == 100
        assert record.recommended_path == "Full-Stack Web Developer"
        assert len(record.answers) == 8
        assert await service.list_results() == [record]

    @pytest.mark.asyncio
    async def test_save_unfinished_session_raises(self, service):
        session = engine.start(await service.open_session())
        with pytest.raises(AssessmentStateError):
            await service.save_session(session)
