"""Assessment Module - skill quiz engine, scoring and result storage.

Usage:
    from skillpath.modules.assessment import engine, new_session

    session = engine.start(new_session(questions))
"""

from skillpath.modules.assessment import engine
from skillpath.modules.assessment.engine import (
    AssessmentSession,
    can_start,
    failed_session,
    loading_session,
    new_session,
    option_feedback,
    progress_percent,
)
from skillpath.modules.assessment.interface import (
    Answer,
    AssessmentQuestion,
    AssessmentRecord,
    AssessmentResult,
    CategoryTally,
    IAssessmentService,
    OptionFeedback,
    QuizState,
)
from skillpath.modules.assessment.scoring import classify_level, score_answers
from skillpath.modules.assessment.service import AssessmentService

__all__ = [
    # Engine
    "engine",
    "AssessmentSession",
    "new_session",
    "loading_session",
    "failed_session",
    "can_start",
    "progress_percent",
    "option_feedback",
    # Interface types
    "Answer",
    "AssessmentQuestion",
    "AssessmentRecord",
    "AssessmentResult",
    "CategoryTally",
    "IAssessmentService",
    "OptionFeedback",
    "QuizState",
    # Scoring
    "classify_level",
    "score_answers",
    # Implementation
    "AssessmentService",
]
