"""Analytics Module - read contract for dashboard statistics."""

from skillpath.modules.analytics.interface import Analytics, DailyActivity
from skillpath.modules.analytics.service import (
    AnalyticsService,
    AnalyticsView,
    ChartRow,
    CourseInProgress,
    category_chart_rows,
    courses_in_progress,
    format_hours,
    format_minutes,
    unique_skills,
)

__all__ = [
    "Analytics",
    "AnalyticsService",
    "AnalyticsView",
    "ChartRow",
    "CourseInProgress",
    "DailyActivity",
    "category_chart_rows",
    "courses_in_progress",
    "format_hours",
    "format_minutes",
    "unique_skills",
]
