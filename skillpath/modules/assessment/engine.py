"""Assessment engine - the skill quiz as an explicit state machine.

A session is an immutable value. Every transition is a pure function that
takes a session and returns a new one, so the quiz can be driven by any
front end (API, CLI, tests) without shared mutable state:

    session = new_session(questions)
    session = start(session)
    session = select(session, 2)
    session = submit(session)
    session = advance(session)
    ...
    session.result  # AssessmentResult once state is RESULTS

States move intro -> quiz -> results. Results is terminal; reset() begins a
new session over the same questions.
"""

from dataclasses import dataclass, field, replace
from typing import Sequence
from uuid import uuid4

from skillpath.modules.assessment.interface import (
    Answer,
    AssessmentQuestion,
    AssessmentResult,
    OptionFeedback,
    QuizState,
)
from skillpath.modules.assessment.scoring import score_answers
from skillpath.shared.exceptions import AssessmentStateError, InvalidAnswerError


def _new_session_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class AssessmentSession:
    """One traversal of the quiz.

    Invariants:
        len(answers) <= len(questions)
        answers[i].question_id == questions[i].id
        result is set exactly when state is RESULTS
    """

    questions: tuple[AssessmentQuestion, ...] = ()
    state: QuizState = QuizState.INTRO
    position: int = 0
    answers: tuple[Answer, ...] = ()
    selected: int | None = None
    feedback_visible: bool = False
    result: AssessmentResult | None = None
    loaded: bool = True
    load_error: str | None = None
    session_id: str = field(default_factory=_new_session_id)

    @property
    def current_question(self) -> AssessmentQuestion | None:
        if self.state is not QuizState.QUIZ or not self.questions:
            return None
        return self.questions[self.position]

    @property
    def is_last_question(self) -> bool:
        return self.position >= len(self.questions) - 1

    @property
    def is_complete(self) -> bool:
        return self.state is QuizState.RESULTS

    @property
    def has_load_error(self) -> bool:
        return self.load_error is not None


# ===================
# Constructors
# ===================


def new_session(questions: Sequence[AssessmentQuestion]) -> AssessmentSession:
    """Create an intro session over a loaded question set."""
    return AssessmentSession(questions=tuple(questions))


def loading_session() -> AssessmentSession:
    """Create an intro session whose questions have not arrived yet."""
    return AssessmentSession(loaded=False)


def failed_session(error: str) -> AssessmentSession:
    """Create an intro session blocked by a question fetch failure.

    The error is an overlay, not a quiz state: the session stays in INTRO
    and cannot start until the questions are fetched again.
    """
    return AssessmentSession(loaded=False, load_error=error)


# ===================
# Queries
# ===================


def can_start(session: AssessmentSession) -> bool:
    """Whether the start action is enabled."""
    return (
        session.state is QuizState.INTRO
        and session.loaded
        and not session.has_load_error
        and len(session.questions) > 0
    )


def can_submit(session: AssessmentSession) -> bool:
    """Whether the submit action is enabled."""
    return (
        session.state is QuizState.QUIZ
        and session.selected is not None
        and not session.feedback_visible
    )


def progress_percent(session: AssessmentSession) -> float:
    """Position through the quiz as a percentage; 0 with no questions."""
    if not session.questions:
        return 0.0
    return (session.position + 1) / len(session.questions) * 100


def option_feedback(session: AssessmentSession) -> list[OptionFeedback] | None:
    """Classify each option of the current question after submission.

    Returns None while feedback is hidden.
    """
    question = session.current_question
    if question is None or not session.feedback_visible:
        return None
    chosen = session.answers[session.position].selected_answer
    feedback = []
    for index in range(len(question.options)):
        if index == question.correct_answer:
            feedback.append(OptionFeedback.CORRECT)
        elif index == chosen:
            feedback.append(OptionFeedback.INCORRECT)
        else:
            feedback.append(OptionFeedback.NEUTRAL)
    return feedback


# ===================
# Transitions
# ===================


def start(session: AssessmentSession) -> AssessmentSession:
    """intro -> quiz. Resets position, answers and selection."""
    if not can_start(session):
        if session.has_load_error:
            reason = "questions failed to load"
        elif not session.loaded:
            reason = "questions are still loading"
        elif not session.questions:
            reason = "there are no questions"
        else:
            reason = "session already started"
        raise AssessmentStateError("start", session.state.value, reason)

    return replace(
        session,
        state=QuizState.QUIZ,
        position=0,
        answers=(),
        selected=None,
        feedback_visible=False,
        result=None,
    )


def select(session: AssessmentSession, option_index: int) -> AssessmentSession:
    """Choose an option for the current question.

    Selecting after submission is ignored; the answer is already fixed.
    """
    question = session.current_question
    if question is None:
        raise AssessmentStateError("select", session.state.value, "no question is active")
    if session.feedback_visible:
        return session
    if not 0 <= option_index < len(question.options):
        raise InvalidAnswerError(option_index, len(question.options))
    return replace(session, selected=option_index)


def submit(session: AssessmentSession) -> AssessmentSession:
    """Record the selected option as the answer and reveal feedback."""
    question = session.current_question
    if question is None or not can_submit(session):
        if question is None:
            reason = "no question is active"
        elif session.feedback_visible:
            reason = "answer already submitted"
        else:
            reason = "no option selected"
        raise AssessmentStateError("submit", session.state.value, reason)
    # Answer i must belong to question i
    if len(session.answers) != session.position:
        raise AssessmentStateError(
            "submit",
            session.state.value,
            f"expected {session.position} prior answers, found {len(session.answers)}",
        )

    answer = Answer(
        question_id=question.id,
        selected_answer=session.selected,
        is_correct=session.selected == question.correct_answer,
    )
    return replace(
        session,
        answers=session.answers + (answer,),
        feedback_visible=True,
    )


def advance(session: AssessmentSession) -> AssessmentSession:
    """Move to the next question, or score and finish after the last one."""
    if session.state is not QuizState.QUIZ:
        raise AssessmentStateError("advance", session.state.value, "quiz is not in progress")
    if not session.feedback_visible:
        raise AssessmentStateError("advance", session.state.value, "current answer not submitted")

    if not session.is_last_question:
        return replace(
            session,
            position=session.position + 1,
            selected=None,
            feedback_visible=False,
        )

    return replace(
        session,
        state=QuizState.RESULTS,
        selected=None,
        feedback_visible=False,
        result=score_answers(session.questions, session.answers),
    )


def reset(session: AssessmentSession) -> AssessmentSession:
    """Discard this session and return a fresh intro session.

    The new session gets a new id so late responses tied to the old one
    can be recognized and dropped.
    """
    return AssessmentSession(
        questions=session.questions,
        loaded=session.loaded,
        load_error=session.load_error,
    )


def answer_question(session: AssessmentSession, option_index: int) -> AssessmentSession:
    """Select, submit and advance in one step."""
    return advance(submit(select(session, option_index)))
