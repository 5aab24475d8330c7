"""Unit tests for assessment scoring."""

import pytest
from pydantic import ValidationError

from skillpath.modules.assessment.interface import Answer, AssessmentRecord, AssessmentResult
from skillpath.modules.assessment.scoring import (
    classify_level,
    percentage,
    score_answers,
    strongest_category,
    tally_categories,
)
from skillpath.shared.constants import MAX_SCORE, MIN_SCORE
from skillpath.shared.exceptions import AssessmentStateError
from skillpath.shared.models import Category, DifficultyLevel


def answers_for(questions, correct_flags):
    """Answers aligned with the questions, correct or wrong as flagged."""
    return [
        Answer(
            question_id=question.id,
            selected_answer=question.correct_answer if correct else question.correct_answer + 1,
            is_correct=correct,
        )
        for question, correct in zip(questions, correct_flags)
    ]


class TestPercentage:
    """Tests for half-up integer percentages."""

    def test_exact_values(self):
        assert percentage(3, 4) == 75
        assert percentage(0, 5) == 0
        assert percentage(5, 5) == 100

    def test_half_rounds_up(self):
        """12.5 rounds to 13 and 62.5 to 63, unlike banker's rounding."""
        assert percentage(1, 8) == 13
        assert percentage(5, 8) == 63

    def test_thirds(self):
        assert percentage(1, 3) == 33
        assert percentage(2, 3) == 67

    def test_zero_whole(self):
        assert percentage(0, 0) == 0


class TestClassifyLevel:
    """Tests for level thresholds."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, DifficultyLevel.BEGINNER),
            (49, DifficultyLevel.BEGINNER),
            (50, DifficultyLevel.INTERMEDIATE),
            (79, DifficultyLevel.INTERMEDIATE),
            (80, DifficultyLevel.ADVANCED),
            (100, DifficultyLevel.ADVANCED),
        ],
    )
    def test_boundaries(self, score, expected):
        assert classify_level(score) == expected


class TestScoreAnswers:
    """Tests for score_answers."""

    def test_four_question_scenario(self, question_factory):
        """dev, dev, design, design answered T, F, T, T."""
        questions = [
            question_factory("q1", Category.DEVELOPMENT),
            question_factory("q2", Category.DEVELOPMENT),
            question_factory("q3", Category.DESIGN),
            question_factory("q4", Category.DESIGN),
        ]
        answers = answers_for(questions, [True, False, True, True])

        result = score_answers(questions, answers)

        assert result.overall_score == 75
        assert result.correct_count == 3
        assert result.total_questions == 4
        assert result.category_percentages == {
            Category.DEVELOPMENT: 50,
            Category.DESIGN: 100,
        }
        assert result.strongest_category == Category.DESIGN
        assert result.level == DifficultyLevel.INTERMEDIATE

    def test_category_sums_match_totals(self, eight_questions):
        flags = [True, False, True, True, False, True, False, True]
        result = score_answers(eight_questions, answers_for(eight_questions, flags))

        tallies = result.category_scores.values()
        assert sum(t.correct for t in tallies) == result.correct_count == 5
        assert sum(t.total for t in tallies) == result.total_questions == 8

    def test_overall_matches_rounded_ratio(self, eight_questions):
        for correct in range(len(eight_questions) + 1):
            flags = [i < correct for i in range(len(eight_questions))]
            result = score_answers(eight_questions, answers_for(eight_questions, flags))
            assert result.overall_score == int(100 * correct / 8 + 0.5)
            assert 0 <= result.overall_score <= 100

    def test_scoring_is_idempotent(self, eight_questions):
        answers = answers_for(eight_questions, [True, False] * 4)
        assert score_answers(eight_questions, answers) == score_answers(eight_questions, answers)

    def test_categories_without_questions_are_omitted(self, eight_questions):
        result = score_answers(eight_questions, answers_for(eight_questions, [True] * 8))
        assert Category.PERSONAL_DEVELOPMENT not in result.category_percentages
        assert Category.PERSONAL_DEVELOPMENT not in result.category_scores

    def test_all_wrong_strongest_is_first_category(self, eight_questions):
        result = score_answers(eight_questions, answers_for(eight_questions, [False] * 8))
        assert result.overall_score == 0
        assert result.strongest_category == Category.DEVELOPMENT
        assert result.level == DifficultyLevel.BEGINNER

    def test_tie_keeps_first_in_question_order(self, question_factory):
        questions = [
            question_factory("q1", Category.MARKETING),
            question_factory("q2", Category.DESIGN),
        ]
        result = score_answers(questions, answers_for(questions, [True, True]))
        assert result.strongest_category == Category.MARKETING

    def test_misaligned_answers_rejected(self, question_factory):
        questions = [
            question_factory("q1", Category.DEVELOPMENT),
            question_factory("q2", Category.DESIGN),
        ]
        answers = list(reversed(answers_for(questions, [True, False])))
        with pytest.raises(AssessmentStateError):
            score_answers(questions, answers)

    def test_incomplete_answers_rejected(self, eight_questions):
        answers = answers_for(eight_questions[:3], [True, True, True])
        with pytest.raises(AssessmentStateError):
            score_answers(eight_questions, answers)


class TestHelpers:
    """Tests for tally_categories and strongest_category."""

    def test_tally_key_order_follows_questions(self, question_factory):
        questions = [
            question_factory("q1", Category.DATA_SCIENCE),
            question_factory("q2", Category.BUSINESS),
            question_factory("q3", Category.DATA_SCIENCE),
        ]
        tallies = tally_categories(questions, answers_for(questions, [True, True, False]))
        assert list(tallies) == [Category.DATA_SCIENCE, Category.BUSINESS]
        assert tallies[Category.DATA_SCIENCE].correct == 1
        assert tallies[Category.DATA_SCIENCE].total == 2

    def test_strongest_of_empty_is_none(self):
        assert strongest_category({}) is None


class TestResultBounds:
    """Tests for the score range enforced on results and records."""

    @pytest.mark.parametrize("score", [MIN_SCORE - 1, MAX_SCORE + 1])
    def test_out_of_range_score_rejected(self, score):
        with pytest.raises(ValidationError):
            AssessmentResult(
                overall_score=score,
                correct_count=0,
                total_questions=0,
                level=DifficultyLevel.BEGINNER,
            )
        with pytest.raises(ValidationError):
            AssessmentRecord(overall_score=score)

    def test_bounds_are_inclusive(self):
        assert AssessmentRecord(overall_score=MIN_SCORE).overall_score == MIN_SCORE
        assert AssessmentRecord(overall_score=MAX_SCORE).overall_score == MAX_SCORE
