"""Base models and common types used across modules."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class FrozenSchema(BaseSchema):
    """Schema for values that must not change once issued."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )


# Common enums and types


class Category(str, Enum):
    """Learning domain a course, path or question belongs to."""

    DEVELOPMENT = "development"
    DESIGN = "design"
    BUSINESS = "business"
    DATA_SCIENCE = "data-science"
    MARKETING = "marketing"
    PERSONAL_DEVELOPMENT = "personal-development"


class DifficultyLevel(str, Enum):
    """Difficulty of content, also used as the learner's assessed level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CourseProvider(str, Enum):
    """Upstream course marketplaces."""

    COURSERA = "coursera"
    UDEMY = "udemy"


_CATEGORY_LABELS: dict[Category, str] = {
    Category.DEVELOPMENT: "Development",
    Category.DESIGN: "Design",
    Category.BUSINESS: "Business",
    Category.DATA_SCIENCE: "Data Science",
    Category.MARKETING: "Marketing",
    Category.PERSONAL_DEVELOPMENT: "Personal Development",
}

_CATEGORY_COLORS: dict[Category, str] = {
    Category.DEVELOPMENT: "blue",
    Category.DESIGN: "purple",
    Category.BUSINESS: "green",
    Category.DATA_SCIENCE: "orange",
    Category.MARKETING: "pink",
    Category.PERSONAL_DEVELOPMENT: "teal",
}

UNKNOWN_CATEGORY_COLOR = "gray"


def _as_category(value: "Category | str") -> Category | None:
    try:
        return Category(value)
    except ValueError:
        return None


def category_label(value: "Category | str") -> str:
    """Human-readable label for a category; unknown values are returned as-is."""
    category = _as_category(value)
    if category is None:
        return str(value)
    return _CATEGORY_LABELS[category]


def category_color(value: "Category | str") -> str:
    """Display color token for a category."""
    category = _as_category(value)
    if category is None:
        return UNKNOWN_CATEGORY_COLOR
    return _CATEGORY_COLORS[category]
