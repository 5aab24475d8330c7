"""CLI UI Components - Rich displays and the interactive quiz."""

from skillpath.cli.ui.display import (
    display_courses,
    display_dashboard,
    display_progress_bar,
    display_recommendation,
)
from skillpath.cli.ui.quiz import QuizInterface, run_quiz

__all__ = [
    "QuizInterface",
    "display_courses",
    "display_dashboard",
    "display_progress_bar",
    "display_recommendation",
    "run_quiz",
]
