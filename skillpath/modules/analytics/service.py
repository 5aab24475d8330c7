"""Analytics Service - fetches snapshots and derives dashboard figures.

Nothing here aggregates raw activity. The storage collaborator produces the
Analytics record; this module only reads it and shapes it for display.
"""

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Iterable

from skillpath.modules.analytics.interface import Analytics
from skillpath.modules.catalog.schemas import Course, UserProgress
from skillpath.shared.models import category_color, category_label

if TYPE_CHECKING:
    from skillpath.modules.catalog.interface import ICatalogStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsView:
    """What the dashboard renders: the data plus a separate failure flag.

    A failed fetch still carries zero-state data so views never need to
    special-case a missing record.
    """

    analytics: Analytics
    failed: bool = False

    @property
    def is_zero_state(self) -> bool:
        a = self.analytics
        return (
            a.total_courses_started == 0
            and a.total_time_spent_minutes == 0
            and not a.skills_acquired
            and all(day.minutes == 0 for day in a.weekly_activity)
        )


@dataclass(frozen=True)
class CourseInProgress:
    course: Course
    progress: UserProgress


@dataclass(frozen=True)
class ChartRow:
    label: str
    value: float
    color: str


def unique_skills(skills: Iterable[str]) -> list[str]:
    """Deduplicate skills keeping the order of first occurrence."""
    return list(dict.fromkeys(skills))


def format_minutes(minutes: int) -> str:
    """Render a duration as 45m, 2h or 2h 5m."""
    hours, rest = divmod(max(minutes, 0), 60)
    if hours == 0:
        return f"{rest}m"
    if rest == 0:
        return f"{hours}h"
    return f"{hours}h {rest}m"


def format_hours(minutes: int) -> str:
    """Render total minutes as whole hours, e.g. 12h."""
    return f"{max(minutes, 0) // 60}h"


def courses_in_progress(
    progress: Iterable[UserProgress],
    courses: Iterable[Course],
) -> list[CourseInProgress]:
    """Join progress entries with their courses.

    Entries whose course is not in the catalog are dropped.
    """
    by_id = {course.id: course for course in courses}
    return [
        CourseInProgress(course=by_id[entry.course_id], progress=entry)
        for entry in progress
        if entry.course_id in by_id
    ]


def category_chart_rows(analytics: Analytics) -> list[ChartRow]:
    """Label/value rows for the category distribution chart, values verbatim."""
    return [
        ChartRow(label=category_label(category), value=share, color=category_color(category))
        for category, share in analytics.category_distribution.items()
    ]


class AnalyticsService:
    """Read access to the learner's analytics."""

    def __init__(self, storage: "ICatalogStorage") -> None:
        self._storage = storage

    async def get_analytics(self) -> Analytics:
        """Fetch the current snapshot; a learner with no record gets zeros."""
        analytics = await self._storage.get_analytics()
        return analytics if analytics is not None else Analytics.empty()

    async def fetch_view(self) -> AnalyticsView:
        """Fetch analytics for display, flagging rather than raising on failure."""
        try:
            return AnalyticsView(analytics=await self.get_analytics())
        except Exception as e:
            logger.warning(f"Failed to load analytics: {type(e).__name__}: {e}")
            return AnalyticsView(analytics=Analytics.empty(), failed=True)
