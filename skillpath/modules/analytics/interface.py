"""Analytics Module - read model for the dashboard and analytics views.

Analytics are aggregated by the storage collaborator. Consumers receive an
immutable snapshot per fetch and never mutate or renormalize it.
"""

from pydantic import Field, field_validator

from skillpath.shared.constants import WEEK_DAYS, WEEKLY_ACTIVITY_LENGTH
from skillpath.shared.models import FrozenSchema


class DailyActivity(FrozenSchema):
    """Minutes studied on one day of the week."""

    day: str
    minutes: int = Field(..., ge=0)


class Analytics(FrozenSchema):
    """Summary statistics for one learner.

    Attributes:
        category_distribution: Category to percentage. Values are rendered
            verbatim; they may not sum to exactly 100 because of rounding.
        weekly_activity: Exactly seven entries in producer order (Mon..Sun).
        skills_acquired: A set transported as a list. Use unique_skills()
            before deriving badges.
    """

    total_courses_started: int = Field(default=0, ge=0)
    total_courses_completed: int = Field(default=0, ge=0)
    total_time_spent_minutes: int = Field(default=0, ge=0)
    average_progress: float = Field(default=0, ge=0, le=100)
    skills_acquired: tuple[str, ...] = ()
    weekly_activity: tuple[DailyActivity, ...]
    category_distribution: dict[str, float] = Field(default_factory=dict)
    streak_days: int = Field(default=0, ge=0)

    @field_validator("weekly_activity")
    @classmethod
    def _seven_days(cls, value: tuple[DailyActivity, ...]) -> tuple[DailyActivity, ...]:
        if len(value) != WEEKLY_ACTIVITY_LENGTH:
            raise ValueError(
                f"weekly_activity must have {WEEKLY_ACTIVITY_LENGTH} entries, got {len(value)}"
            )
        return value

    @field_validator("category_distribution")
    @classmethod
    def _percentages(cls, value: dict[str, float]) -> dict[str, float]:
        for category, share in value.items():
            if not 0 <= share <= 100:
                raise ValueError(f"category_distribution[{category!r}] must be 0-100, got {share}")
        return value

    @classmethod
    def empty(cls) -> "Analytics":
        """Zero-state analytics for a learner with no activity yet."""
        return cls(
            weekly_activity=tuple(DailyActivity(day=day, minutes=0) for day in WEEK_DAYS),
        )
