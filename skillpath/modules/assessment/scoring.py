"""Assessment scoring - overall score, per-category tallies and level.

All functions here are pure: the same questions and answers always produce
the same AssessmentResult.
"""

from typing import Sequence

from skillpath.modules.assessment.interface import (
    Answer,
    AssessmentQuestion,
    AssessmentResult,
    CategoryTally,
)
from skillpath.shared.constants import (
    ADVANCED_SCORE_THRESHOLD,
    INTERMEDIATE_SCORE_THRESHOLD,
)
from skillpath.shared.exceptions import AssessmentStateError
from skillpath.shared.models import Category, DifficultyLevel


def percentage(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 when whole is 0.

    Integer arithmetic avoids float error at .5 boundaries (1/8 -> 13).
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def classify_level(overall_score: int) -> DifficultyLevel:
    """Map an overall score to a level. Lower bounds are inclusive."""
    if overall_score >= ADVANCED_SCORE_THRESHOLD:
        return DifficultyLevel.ADVANCED
    if overall_score >= INTERMEDIATE_SCORE_THRESHOLD:
        return DifficultyLevel.INTERMEDIATE
    return DifficultyLevel.BEGINNER


def check_alignment(
    questions: Sequence[AssessmentQuestion],
    answers: Sequence[Answer],
) -> None:
    """Ensure answer i belongs to question i for every recorded answer."""
    if len(answers) > len(questions):
        raise AssessmentStateError(
            "score", "quiz", f"{len(answers)} answers for {len(questions)} questions"
        )
    for index, answer in enumerate(answers):
        if answer.question_id != questions[index].id:
            raise AssessmentStateError(
                "score",
                "quiz",
                f"answer {index} is for question '{answer.question_id}', "
                f"expected '{questions[index].id}'",
            )


def tally_categories(
    questions: Sequence[AssessmentQuestion],
    answers: Sequence[Answer],
) -> dict[Category, CategoryTally]:
    """Count correct/total per category, walking questions and answers in lockstep.

    Keys appear in order of first occurrence in the question sequence.
    """
    counts: dict[Category, list[int]] = {}
    for index, question in enumerate(questions):
        correct_total = counts.setdefault(question.category, [0, 0])
        correct_total[1] += 1
        if index < len(answers) and answers[index].is_correct:
            correct_total[0] += 1
    return {
        category: CategoryTally(correct=correct, total=total)
        for category, (correct, total) in counts.items()
    }


def strongest_category(percentages: dict[Category, int]) -> Category | None:
    """Category with the highest percentage; ties keep the first one seen."""
    best: Category | None = None
    best_score = -1
    for category, score in percentages.items():
        if score > best_score:
            best, best_score = category, score
    return best


def score_answers(
    questions: Sequence[AssessmentQuestion],
    answers: Sequence[Answer],
) -> AssessmentResult:
    """Score a completed question/answer sequence.

    Args:
        questions: Questions in the order they were issued
        answers: Answers in the same order, one per question

    Returns:
        AssessmentResult with overall score, category breakdown and level

    Raises:
        AssessmentStateError: If the answers do not line up with the questions
    """
    check_alignment(questions, answers)
    if len(answers) != len(questions):
        raise AssessmentStateError(
            "score",
            "quiz",
            f"only {len(answers)} of {len(questions)} questions answered",
        )

    total = len(questions)
    correct_count = sum(1 for answer in answers if answer.is_correct)
    overall = percentage(correct_count, total)

    tallies = tally_categories(questions, answers)
    percentages = {
        category: percentage(tally.correct, tally.total)
        for category, tally in tallies.items()
        if tally.total > 0
    }

    return AssessmentResult(
        overall_score=overall,
        correct_count=correct_count,
        total_questions=total,
        category_scores=tallies,
        category_percentages=percentages,
        strongest_category=strongest_category(percentages),
        level=classify_level(overall),
    )
