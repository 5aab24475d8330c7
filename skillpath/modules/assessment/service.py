"""Assessment Service - question delivery and result persistence.

The quiz itself runs in the engine (see engine.py) on whichever side owns
the session. This service is the server-side boundary: it serves the
question set, opens sessions over it, and stores scored outcomes.
"""

import logging
from typing import TYPE_CHECKING

from skillpath.modules.assessment.engine import (
    AssessmentSession,
    failed_session,
    new_session,
)
from skillpath.modules.assessment.interface import (
    AssessmentQuestion,
    AssessmentRecord,
    IAssessmentService,
    QuizState,
)
from skillpath.shared.constants import QUESTIONS_LOAD_ERROR_MESSAGE
from skillpath.shared.exceptions import AssessmentStateError, StorageUnavailableError

if TYPE_CHECKING:
    from skillpath.modules.catalog.interface import ICatalogStorage

logger = logging.getLogger(__name__)


class AssessmentService(IAssessmentService):
    """Serves assessment questions and persists results."""

    def __init__(self, storage: "ICatalogStorage") -> None:
        self._storage = storage

    async def get_questions(self) -> list[AssessmentQuestion]:
        """Fetch the question set in issue order."""
        try:
            return await self._storage.get_assessment_questions()
        except StorageUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch assessment questions: {e}")
            raise StorageUnavailableError("get_assessment_questions", str(e)) from e

    async def open_session(self) -> AssessmentSession:
        """Load questions and return an intro session.

        A fetch failure yields a session blocked by a retryable load error
        instead of raising, so the caller can offer a retry. The load error
        is a user-facing message; the technical cause is only logged.
        """
        try:
            questions = await self.get_questions()
        except StorageUnavailableError as e:
            logger.warning(f"Assessment questions unavailable: {e.message}")
            return failed_session(QUESTIONS_LOAD_ERROR_MESSAGE)
        return new_session(questions)

    async def save_result(self, record: AssessmentRecord) -> AssessmentRecord:
        saved = await self._storage.save_assessment_result(record)
        logger.info(f"Assessment result {saved.id} saved (score {saved.overall_score})")
        return saved

    async def save_session(
        self,
        session: AssessmentSession,
        recommended_path: str | None = None,
    ) -> AssessmentRecord:
        """Persist the outcome of a completed session."""
        if session.state is not QuizState.RESULTS or session.result is None:
            raise AssessmentStateError("save", session.state.value, "session is not scored")
        result = session.result
        record = AssessmentRecord(
            answers=list(session.answers),
            category_scores={
                category.value: score
                for category, score in result.category_percentages.items()
            },
            overall_score=result.overall_score,
            recommended_path=recommended_path,
        )
        return await self.save_result(record)

    async def list_results(self) -> list[AssessmentRecord]:
        return await self._storage.get_assessment_results()
